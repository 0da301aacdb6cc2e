import random

import pytest

from dstructs.array_heap import ArrayHeap


def _assert_heap_order(heap, cmp):
    items = list(heap)
    for index, item in enumerate(items[1:], start=1):
        assert cmp(items[(index - 1) // 2], item) >= 0


def test_empty_heap():
    heap = ArrayHeap()
    assert len(heap) == 0
    assert not heap
    assert list(heap) == []


def test_pop_empty_raises():
    heap = ArrayHeap()
    with pytest.raises(IndexError):
        heap.pop()


def test_push_keeps_maximum_on_top():
    heap = ArrayHeap()
    values = [5, 1, 9, 3, 7]
    for value in values:
        heap.push(value)
    assert len(heap) == len(values)
    assert bool(heap)
    assert next(iter(heap)) == max(values)


def test_pops_in_descending_order():
    rng = random.Random(12345)
    values = [rng.randrange(10000) for _ in range(300)]
    heap = ArrayHeap()
    for value in values:
        heap.push(value)
    popped = [heap.pop() for _ in range(len(values))]
    assert popped == sorted(values, reverse=True)
    assert len(heap) == 0


def test_heap_property_holds_after_mixed_ops():
    rng = random.Random(54321)
    heap = ArrayHeap()
    cmp = heap.cmp
    for _ in range(500):
        if rng.random() < 0.6 or not heap:
            heap.push(rng.randrange(1000))
        else:
            heap.pop()
        _assert_heap_order(heap, cmp)


def test_custom_comparison_makes_min_heap():
    heap = ArrayHeap(lambda a, b: (b > a) - (b < a))
    values = [8, 2, 6, 4, 10, 0]
    for value in values:
        heap.push(value)
    assert [heap.pop() for _ in values] == sorted(values)


def test_single_item_round_trip():
    heap = ArrayHeap()
    heap.push("only")
    assert heap.pop() == "only"
    assert not heap