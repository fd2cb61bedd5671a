# calcbench

Two small command-line tools in one package:

- an interactive **calculator** that reads semicolon-terminated statements
  from standard input, and
- a **benchmark** that times a growable character buffer and, on request,
  several sorting algorithms, then prints performance tables.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The calculator

```
calcbench-calc
```

Every statement ends with `;`. Before each statement the calculator writes
the prompt `:- `. A session with the input
`1 + 2 * 3; store x; sqrt( x + 2 ) ^ 2; variables; quit;` prints:

```
:- result: 7
:- stored 7 in x
:- result: 9
:- Variables:
      e   =   2.71828
      pi   =   3.14159
      x   =   7
:- quitting
```

Supported:

- numbers such as `3`, `-2.5`, `1.0e10` (at most three exponent digits);
- operators `+ - * / % ^` (`^` is right associative) and postfix `!`
  (factorial of a value that is within 1e-8 of an integer);
- `deg`: as a prefix it turns radians into degrees, as a postfix it turns
  degrees into radians;
- the functions `sin cos tan asin acos atan exp log sqrt abs`, called with
  parentheses, e.g. `sin(pi / 2)`;
- the variables `e` and `pi`, and any stored with `store name;`, which saves
  the last result;
- `variables;` lists all variables, sorted by name;
- `quit`, `exit` or `halt`, a `#`, or the end of input ends the session;
- comments `/* ... */` and `// ...` up to the end of the line.

Syntax errors are reported with their line/column, for example
`semicolon expected at location 1/3`. Evaluation errors such as
`division by zero`, `unknown variable y` or `log arg cannot be <= 0` are
reported by message. After either kind of error the calculator skips to the
next `;` and goes on.

From Python:

```python
import io
from calcbench.calculator import run

out = io.StringIO()
run(io.StringIO("2 ^ 3 ^ 2;"), out)
print(out.getvalue())   # ":- result: 512\n:- quitting\n"
```

The pieces are usable on their own: `calcbench.filereader.FileReader`
buffers characters from a text stream and tracks line and column,
`calcbench.tokenizer.Tokenizer` turns them into `calcbench.symbol.Symbol`
objects (`current()`, `consume()`, and `tokens()` to iterate up to the end),
and `calcbench.calculator` offers `eval_sum` and `apply` for evaluation.

## The benchmark

```
calcbench-bench
```

By default this times pushing characters onto a `CharBuffer` and popping
them off again, for 1,000,000 characters and doubling up to 16,000,000, and
prints the resulting table. Options:

- `--sorts` also sorts the same random vector with heap sort, the library
  sort, bubble sort and insertion sort for sizes doubling from the start
  size, prints every sorted vector, a table per algorithm, and the total time;
- `--sort-start N` sets the smallest sorting size (default 2000; sizes go up
  to, but not including, 100 times it);
- `--string-start N` sets the smallest character count (default 1000000;
  counts go up to, but not including, 32 times it).

Bubble sort and insertion sort are quadratic, so `--sorts` with the default
start takes a long time.

The building blocks can be used on their own:

```python
from calcbench.sorting import heap_sort, format_vector
from calcbench.timetable import Timer, TimeTable

values = [5, 3, 9, 1]
table = TimeTable("heapsort")
timer = Timer()
heap_sort(values)
table.insert(len(values), timer.time())
print(format_vector(values))   # { 1, 3, 5, 9 }
print(table)
```

`calcbench.bench.measure_sorts` and `calcbench.bench.measure_string` return
the `TimeTable` objects instead of printing them.