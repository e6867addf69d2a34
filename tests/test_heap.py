import math

import pytest

from metroroute.heap import HeapError, MinHeap


def drain(heap):
    items = []
    while heap:
        items.append(heap.extract_min())
    return items


def test_new_heap_is_empty():
    heap = MinHeap(4)
    assert heap.is_empty()
    assert len(heap) == 0
    assert not heap


def test_extract_min_returns_sorted_distances():
    distances = [7, 3, 9, 1, 4, 8, 2, 6]
    heap = MinHeap(len(distances))
    for vertex, distance in enumerate(distances):
        heap.insert(vertex, distance)
    result = drain(heap)
    assert [d for d, _ in result] == sorted(distances)
    assert sorted(v for _, v in result) == list(range(len(distances)))
    for distance, vertex in result:
        assert distances[vertex] == distance


def test_contains_and_distance_of():
    heap = MinHeap(3)
    heap.insert(1, 42)
    assert 1 in heap
    assert 0 not in heap
    assert 5 not in heap
    assert heap.distance_of(1) == 42
    assert heap.distance_of(0) == math.inf


def test_extracted_vertex_is_no_longer_contained():
    heap = MinHeap(2)
    heap.insert(0, 5)
    heap.insert(1, 6)
    assert heap.extract_min() == (5, 0)
    assert 0 not in heap
    assert len(heap) == 1


def test_decrease_key_moves_vertex_to_front():
    heap = MinHeap(5)
    for vertex in range(5):
        heap.insert(vertex, 10 + vertex)
    heap.decrease_key(4, 0)
    assert heap.distance_of(4) == 0
    assert heap.extract_min() == (0, 4)


def test_insert_existing_vertex_updates_distance():
    heap = MinHeap(3)
    heap.insert(0, 5)
    heap.insert(1, 6)
    heap.insert(2, 7)
    heap.insert(0, 100)
    assert len(heap) == 3
    assert [v for _, v in drain(heap)] == [1, 2, 0]


def test_extract_from_empty_heap_raises():
    with pytest.raises(HeapError):
        MinHeap(1).extract_min()


def test_decrease_key_missing_vertex_raises():
    heap = MinHeap(2)
    with pytest.raises(HeapError):
        heap.decrease_key(0, 1)


def test_decrease_key_to_larger_distance_raises():
    heap = MinHeap(2)
    heap.insert(0, 3)
    with pytest.raises(HeapError):
        heap.decrease_key(0, 4)
    assert heap.distance_of(0) == 3


def test_insert_out_of_range_vertex_raises():
    heap = MinHeap(2)
    with pytest.raises(HeapError):
        heap.insert(2, 1)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        MinHeap(-1)