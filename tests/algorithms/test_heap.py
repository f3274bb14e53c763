import random

import pytest

from primheap.algorithms.heap import HeapUnderflowError, KaryMinHeap, PollResult
from primheap.graph.model import Edge


def _assert_heap_order(heap: KaryMinHeap) -> None:
    entries = heap.entries()
    for i in range(1, len(entries)):
        assert entries[heap.parent(i)].weight <= entries[i].weight


def _drain_weights(heap: KaryMinHeap) -> list:
    weights = []
    while not heap.is_empty():
        weights.append(heap.poll().weight)
    return weights


def test_new_heap_is_empty():
    heap = KaryMinHeap()
    assert heap.is_empty()
    assert len(heap) == 0
    assert heap.branching_factor == 2


@pytest.mark.parametrize("k", [0, -1])
def test_invalid_branching_factor(k):
    with pytest.raises(ValueError):
        KaryMinHeap(k)


def test_index_arithmetic_binary():
    heap = KaryMinHeap(2)
    assert heap.parent(1) == 0
    assert heap.parent(2) == 0
    assert heap.parent(5) == 2
    assert heap.kth_child(0, 1) == 1
    assert heap.kth_child(0, 2) == 2
    assert heap.kth_child(2, 1) == 5


def test_index_arithmetic_ternary():
    heap = KaryMinHeap(3)
    assert [heap.kth_child(1, k) for k in (1, 2, 3)] == [4, 5, 6]
    assert {heap.parent(i) for i in (4, 5, 6)} == {1}


def test_poll_order_for_sample_weights():
    heap = KaryMinHeap()
    for i, w in enumerate([5, 3, 8, 1, 4]):
        heap.add(Edge(i, i + 1, w))
    assert _drain_weights(heap) == [1, 3, 4, 5, 8]


def test_poll_empty_raises_underflow():
    heap = KaryMinHeap()
    with pytest.raises(HeapUnderflowError):
        heap.poll()


def test_underflow_is_index_error():
    heap = KaryMinHeap()
    with pytest.raises(IndexError):
        heap.poll()


def test_poll_after_drain_raises_underflow():
    heap = KaryMinHeap()
    heap.add(Edge(0, 1, 7))
    assert heap.poll() == Edge(0, 1, 7)
    with pytest.raises(HeapUnderflowError):
        heap.poll()


def test_try_poll_outcomes():
    heap = KaryMinHeap()
    empty = heap.try_poll()
    assert isinstance(empty, PollResult)
    assert not empty.ok
    assert empty.edge is None
    with pytest.raises(HeapUnderflowError):
        empty.unwrap()

    heap.add(Edge(1, 2, 3))
    result = heap.try_poll()
    assert result.ok
    assert result.unwrap() == Edge(1, 2, 3)
    assert heap.is_empty()


def test_peek_does_not_remove():
    heap = KaryMinHeap()
    with pytest.raises(HeapUnderflowError):
        heap.peek()
    heap.add(Edge(0, 1, 4))
    heap.add(Edge(0, 2, 2))
    assert heap.peek() == Edge(0, 2, 2)
    assert len(heap) == 2


def test_contains_edge_structural():
    heap = KaryMinHeap()
    heap.add(Edge(0, 1, 3))
    assert heap.contains_edge(0, 1, 3)
    assert not heap.contains_edge(1, 0, 3)
    assert not heap.contains_edge(0, 1, 4)


def test_contains_edge_add_then_remove_restores_size():
    heap = KaryMinHeap()
    for edge in [Edge(0, 1, 3), Edge(0, 2, 4), Edge(1, 2, 5)]:
        heap.add(edge)
    assert heap.contains_edge(0, 2, 4)
    before = len(heap)

    heap.add(Edge(0, 2, 4))
    assert len(heap) == before + 1

    # Remove every copy of (0, 2, 4), then put back the one that was there
    kept = []
    removed = 0
    while not heap.is_empty():
        edge = heap.poll()
        if edge == Edge(0, 2, 4):
            removed += 1
        else:
            kept.append(edge)
    assert removed == 2
    for edge in kept + [Edge(0, 2, 4)]:
        heap.add(edge)
    assert len(heap) == before


def test_equal_weight_insert_rises_above_parent():
    heap = KaryMinHeap()
    heap.add(Edge(0, 1, 4))
    heap.add(Edge(0, 2, 4))
    assert heap.peek() == Edge(0, 2, 4)


def test_equal_weight_poll_order_after_sift_down():
    heap = KaryMinHeap(2)
    for dst in (1, 2, 3, 4):
        heap.add(Edge(0, dst, 4))
    assert [heap.poll().destination for _ in range(4)] == [4, 1, 2, 3]


def test_sift_down_prefers_first_child_on_tie():
    heap = KaryMinHeap(3)
    heap.add(Edge(0, 1, 1))
    heap.add(Edge(0, 2, 5))
    heap.add(Edge(0, 3, 5))
    heap.add(Edge(0, 4, 9))
    # Root removed, 9 moves to the root, children (5, 5) tie
    heap.poll()
    assert heap.entries()[0] == Edge(0, 2, 5)


def test_sift_down_considers_every_child():
    heap = KaryMinHeap(4)
    for dst, w in enumerate([1, 6, 7, 8, 2, 9], start=1):
        heap.add(Edge(0, dst, w))
    heap.poll()
    assert heap.poll().weight == 2


@pytest.mark.parametrize("k", [1, 2, 3, 4, 7])
def test_heap_order_holds_under_mixed_operations(k):
    rng = random.Random(1234 + k)
    heap = KaryMinHeap(k)
    for step in range(300):
        if heap.is_empty() or rng.random() < 0.6:
            heap.add(Edge(step, step + 1, rng.randint(0, 20)))
        else:
            heap.poll()
        _assert_heap_order(heap)


def test_extraction_order_independent_of_branching_factor():
    rng = random.Random(42)
    edges = [Edge(i, i + 1, w) for i, w in enumerate(rng.sample(range(1000), 60))]

    orders = {}
    for k in range(2, len(edges) + 1):
        heap = KaryMinHeap(k)
        for edge in edges:
            heap.add(edge)
        orders[k] = [heap.poll() for _ in range(len(edges))]

    expected = sorted(edges, key=lambda e: e.weight)
    assert all(order == expected for order in orders.values())


def test_extracted_weights_independent_of_branching_factor_with_ties():
    weights = [4, 4, 2, 7, 2, 9, 0, 4, 7, 1]
    for k in range(2, len(weights) + 1):
        heap = KaryMinHeap(k)
        for i, w in enumerate(weights):
            heap.add(Edge(i, i + 1, w))
        assert _drain_weights(heap) == sorted(weights)


def test_repr():
    heap = KaryMinHeap(3)
    heap.add(Edge(0, 1, 1))
    assert repr(heap) == "KaryMinHeap(k=3, size=1)"
