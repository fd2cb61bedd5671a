[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calcbench"
version = "0.1.0"
description = "An interactive expression calculator, and a small benchmark of sorting algorithms and a growable character buffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "tokenizer", "parser", "sorting", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
calcbench-calc = "calcbench.calculator:main"
calcbench-bench = "calcbench.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["calcbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
