import io

from calcbench.bench import STRING_TABLE_NAME, main, measure_sorts, measure_string
from calcbench.sorting import format_vector


def test_measure_sorts_returns_four_named_tables():
    tables = measure_sorts([4, 8], vector_length=5)
    assert [t.algname for t in tables] == [
        "heapsort",
        "quicksort from library",
        "bubblesort",
        "insertion sort",
    ]
    for table in tables:
        assert [size for size, _ in table] == [4, 8]
        assert all(runtime >= 0.0 for _, runtime in table)


def test_measure_sorts_writes_sorted_vectors():
    out = io.StringIO()
    measure_sorts([3, 6], vector_length=5, out=out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 8
    for line in lines:
        numbers = [int(x) for x in line.strip("{} ").split(", ")]
        assert len(numbers) == 5
        assert numbers == sorted(numbers)
        assert line == format_vector(numbers)


def test_measure_sorts_all_algorithms_agree_per_size():
    out = io.StringIO()
    measure_sorts([7], out=out)
    lines = out.getvalue().splitlines()
    assert len(set(lines)) == 1


def test_measure_string_table():
    table = measure_string([3, 6, 12])
    assert table.algname == STRING_TABLE_NAME
    assert [size for size, _ in table] == [3, 6, 12]
    assert table.totaltime() >= 0.0


def test_main_prints_string_table(capsys):
    status = main(["--string-start", "10"])
    text = capsys.readouterr().out
    assert status == 0
    assert "measuring performance of string operations\n" in text
    assert f"Performance table of {STRING_TABLE_NAME}" in text
    for size in (10, 20, 40, 80, 160):
        assert f"     {size}/" in text
    assert "     320/" not in text


def test_main_with_sorts(capsys):
    status = main(["--sorts", "--sort-start", "2", "--string-start", "2"])
    text = capsys.readouterr().out
    assert status == 0
    assert "Performance table of heapsort" in text
    assert "Performance table of insertion sort" in text
    assert "this is the total time: " in text