from calcbench.timetable import Timer, TimeTable


def test_timer_is_non_negative_and_non_decreasing():
    timer = Timer()
    first = timer.time()
    second = timer.time()
    assert first >= 0.0
    assert second >= first


def test_timer_reset_restarts():
    timer = Timer()
    sum(range(100000))
    before = timer.time()
    timer.reset()
    after = timer.time()
    assert after <= before + 1.0
    assert after >= 0.0


def test_insert_and_len():
    table = TimeTable("heapsort")
    table.insert(2000, 0.5)
    table.insert(4000, 1.0)
    assert len(table) == 2


def test_insert_overwrites_same_size():
    table = TimeTable("heapsort")
    table.insert(2000, 0.5)
    table.insert(2000, 0.25)
    assert len(table) == 1
    assert list(table) == [(2000, 0.25)]


def test_iteration_is_ordered_by_size():
    table = TimeTable("x")
    for size in (8000, 2000, 4000):
        table.insert(size, size / 1000.0)
    sizes = [size for size, _ in table]
    assert sizes == sorted(sizes)


def test_totaltime_is_sum():
    table = TimeTable("x")
    runtimes = {10: 0.5, 20: 0.25, 40: 0.125}
    for size, runtime in runtimes.items():
        table.insert(size, runtime)
    assert table.totaltime() == sum(runtimes.values())


def test_clear_empties():
    table = TimeTable("x")
    table.insert(1, 1.0)
    table.clear()
    assert len(table) == 0
    assert table.totaltime() == 0.0


def test_str_header_and_entries():
    table = TimeTable("heapsort")
    table.insert(2000, 0.15)
    text = str(table)
    assert text.startswith(
        "Performance table of heapsort (inputsize/runtime in seconds):\n"
    )
    assert "     2000/1.5000e-01" in text
    assert text.endswith("\n")


def test_str_of_empty_table():
    table = TimeTable("bubblesort")
    assert str(table) == (
        "Performance table of bubblesort (inputsize/runtime in seconds):\n\n"
    )