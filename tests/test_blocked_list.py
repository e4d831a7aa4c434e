import threading

import pytest

from tarjankit.blocked_list import BlockedList


def test_default_base_is_eight():
    assert BlockedList().base == 8


def test_sums_are_running_totals_of_powers():
    bl = BlockedList(power=2, levels=5)
    running = 0
    for size, total in zip(bl.powers, bl.sums):
        running += size
        assert total == running
    for earlier, later in zip(bl.powers, bl.powers[1:]):
        assert later == earlier * 4


def test_find_location_boundaries():
    bl = BlockedList()
    assert bl.find_location(0) == 0
    assert bl.find_location(bl.base - 1) == 0
    assert bl.find_location(bl.base) == 1
    assert bl.find_location(bl.sums[1]) == 2


def test_find_location_beyond_capacity():
    bl = BlockedList(power=1, levels=2)
    with pytest.raises(IndexError):
        bl.find_location(bl.capacity)


def test_append_and_iterate_in_order():
    bl = BlockedList()
    for value in range(200):
        bl.append(value)
    assert len(bl) == 200
    assert list(bl) == list(range(200))


def test_items_prefix():
    bl = BlockedList()
    for value in "abcdefghijkl":
        bl.append(value)
    assert list(bl.items(5)) == list("abcde")


def test_items_rejects_bad_count():
    bl = BlockedList(power=1, levels=2)
    with pytest.raises(ValueError):
        list(bl.items(bl.capacity + 1))


def test_small_list():
    bl = BlockedList()
    bl.append("x")
    bl.append("y")
    assert bl.is_small(len(bl))
    assert not bl.is_small(bl.base)
    assert bl.small_item(1) == "y"


def test_append_past_capacity_raises():
    bl = BlockedList(power=1, levels=2)
    for value in range(bl.capacity):
        bl.append(value)
    with pytest.raises(IndexError):
        bl.append("overflow")
    assert len(bl) == bl.capacity
    assert list(bl) == list(range(bl.capacity))


def test_concurrent_appends_keep_every_item():
    bl = BlockedList()

    def worker(start):
        for value in range(start, start + 100):
            bl.append(value)

    threads = [threading.Thread(target=worker, args=(n * 100,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(bl) == 400
    assert sorted(bl) == list(range(400))


def test_invalid_construction():
    with pytest.raises(ValueError):
        BlockedList(power=0)
    with pytest.raises(ValueError):
        BlockedList(levels=0)