"""Randomized checks of heap order over long push/pop sequences."""

import sys
import os
import unittest

import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from min_heap import MinHeap, HeapEmptyError, HeapFullError, reverse_order


class TestMinHeapProperties(unittest.TestCase):

    def test_pop_always_returns_current_minimum(self):
        rng = np.random.default_rng(42)
        heap = MinHeap(64)
        shadow = []
        for op, value in zip(rng.integers(0, 3, size=2000), rng.integers(-50, 50, size=2000)):
            if op < 2 and not heap.is_full():
                heap.push(int(value))
                shadow.append(int(value))
            elif shadow:
                expected = min(shadow)
                self.assertEqual(heap.pop(), expected)
                shadow.remove(expected)
            else:
                with self.assertRaises(HeapEmptyError):
                    heap.pop()
            self.assertEqual(heap.size(), len(shadow))

    def test_push_all_then_pop_all_is_sorted(self):
        rng = np.random.default_rng(7)
        for n in (1, 2, 3, 10, 257):
            values = [int(v) for v in rng.integers(0, 20, size=n)]
            heap = MinHeap(n)
            for v in values:
                heap.push(v)
            self.assertEqual([heap.pop() for _ in range(n)], sorted(values))

    def test_reverse_order_sorts_floats_descending(self):
        rng = np.random.default_rng(3)
        values = [float(v) for v in rng.standard_normal(100)]
        heap = MinHeap(len(values), compare=reverse_order)
        for v in values:
            heap.push(v)
        self.assertEqual([heap.pop() for _ in range(len(values))], sorted(values, reverse=True))

    def test_full_heap_rejects_pushes_without_corruption(self):
        rng = np.random.default_rng(11)
        values = [int(v) for v in rng.permutation(16)]
        heap = MinHeap(16)
        for v in values:
            heap.push(v)
        for v in rng.integers(-100, 100, size=5):
            with self.assertRaises(HeapFullError):
                heap.push(int(v))
        self.assertEqual([heap.pop() for _ in range(16)], list(range(16)))


if __name__ == "__main__":
    unittest.main()
