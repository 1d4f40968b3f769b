import logging
import sys
from typing import Any, Callable, Generic, List, Optional, TypeVar

T = TypeVar('T')

Comparator = Callable[[T, T], int]

logger = logging.getLogger(__name__)

EMPTY_POP_MESSAGE = "[Error]: attempting to get element from empty heap\nTerminating..."


class HeapError(Exception):
    pass


class HeapEmptyError(HeapError, IndexError):
    pass


class HeapFullError(HeapError, OverflowError):
    pass


class HeapDestroyedError(HeapError, RuntimeError):
    pass


def natural_order(a: Any, b: Any) -> int:
    """Ascending order: the smallest value is popped first.

    Heap comparators are inverted: positive means `a` rises above `b`.
    """
    return (a < b) - (a > b)


def reverse_order(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def invert(cmp: Callable[[T, T], int]) -> Comparator:
    """Adapt a conventional cmp function (negative when a < b) to a heap comparator."""
    def compare(a: T, b: T) -> int:
        return -cmp(a, b)
    return compare


class MinHeap(Generic[T]):
    def __init__(self, capacity: int, compare: Comparator = natural_order,
                 fatal_on_empty: bool = False) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 0:
            raise ValueError("capacity must be a non-negative integer")
        self._compare = compare
        self._fatal_on_empty = fatal_on_empty
        self._capacity = capacity
        self._size = 0
        # slot 0 is never used so that parent(i) == i // 2
        self._elements: Optional[List[Optional[T]]] = [None] * (capacity + 1)
        logger.debug("created heap with capacity %d", capacity)

    @classmethod
    def create(cls, capacity: int, compare: Comparator = natural_order,
               fatal_on_empty: bool = False) -> Optional['MinHeap[T]']:
        """Build a heap, returning None if its storage cannot be allocated.

        An invalid capacity still raises ValueError.
        """
        try:
            return cls(capacity, compare, fatal_on_empty)
        except (MemoryError, OverflowError):
            logger.warning("could not allocate heap with capacity %d", capacity)
            return None

    def destroy(self) -> None:
        elements = self._live()
        logger.debug("destroying heap with %d of %d slots in use", self._size, self._capacity)
        del elements[:]
        self._elements = None
        self._size = 0

    @property
    def destroyed(self) -> bool:
        return self._elements is None

    def push(self, value: T) -> None:
        elements = self._live()
        if self._size >= self._capacity:
            logger.warning("push refused, heap is full (capacity %d)", self._capacity)
            raise HeapFullError("push onto full heap")
        self._size += 1
        elements[self._size] = value
        self._sift_up()

    def pop(self) -> T:
        elements = self._live()
        if self._size == 0:
            if self._fatal_on_empty:
                logger.critical("pop from empty heap, terminating")
                print(EMPTY_POP_MESSAGE)
                sys.exit(1)
            raise HeapEmptyError("pop from empty heap")
        result = elements[1]
        elements[1] = elements[self._size]
        elements[self._size] = None
        self._size -= 1
        self._sift_down()
        return result

    def peek(self) -> T:
        elements = self._live()
        if self._size == 0:
            raise HeapEmptyError("peek from empty heap")
        return elements[1]

    def size(self) -> int:
        self._live()
        return self._size

    def capacity(self) -> int:
        self._live()
        return self._capacity

    def is_empty(self) -> bool:
        return self.size() == 0

    def is_full(self) -> bool:
        return self.size() == self._capacity

    def clear(self) -> None:
        elements = self._live()
        for i in range(1, self._size + 1):
            elements[i] = None
        self._size = 0

    def _live(self) -> List[Optional[T]]:
        if self._elements is None:
            raise HeapDestroyedError("heap has been destroyed")
        return self._elements

    def _sift_up(self) -> None:
        if self._size <= 1:
            return
        elements = self._elements
        index = self._size
        item = elements[index]
        while index > 1:
            parent = index // 2
            if self._compare(elements[parent], item) < 0:
                elements[index] = elements[parent]
                index = parent
            else:
                break
        elements[index] = item

    def _sift_down(self) -> None:
        if self._size <= 1:
            return
        elements = self._elements
        size = self._size
        compare = self._compare
        index = 1
        item = elements[index]
        while True:
            left = 2 * index
            right = left + 1
            if left > size:
                break
            # right child only wins when strictly smaller than both item and left
            if (right <= size and compare(item, elements[right]) < 0
                    and compare(elements[right], elements[left]) > 0):
                elements[index] = elements[right]
                index = right
            elif compare(item, elements[left]) < 0:
                elements[index] = elements[left]
                index = left
            else:
                break
        elements[index] = item

    def __enter__(self) -> 'MinHeap[T]':
        self._live()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self.destroyed:
            self.destroy()

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self.size() > 0

    def __repr__(self) -> str:
        if self.destroyed:
            return "MinHeap(destroyed)"
        return f"MinHeap({self._elements[1:self._size + 1]}, capacity={self._capacity})"

    def __str__(self) -> str:
        if self.destroyed:
            return "MinHeap(destroyed)"
        return f"MinHeap(size={self._size}, capacity={self._capacity})"
