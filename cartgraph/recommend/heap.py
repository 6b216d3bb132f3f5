"""Array-backed binary max-heap with a pluggable comparator."""

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

Comparator = Callable[[Any, Any], float]


def by_score(a: Any, b: Any) -> float:
    """Default comparator: positive when ``a`` has the higher ``score``."""
    return a.score - b.score


class MaxHeap(Generic[T]):
    """Binary max-heap ordered by ``compare``.

    ``compare(a, b) > 0`` means ``a`` ranks above ``b``. For every non-root
    position ``compare(parent, child) >= 0`` holds.
    """

    def __init__(self, compare: Comparator | None = None):
        self._data: list[T] = []
        self._compare = compare or by_score

    def __len__(self) -> int:
        return len(self._data)

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def push(self, item: T) -> None:
        self._data.append(item)
        self._sift_up(len(self._data) - 1)

    def pop(self) -> T | None:
        """Remove and return the top item, or ``None`` when empty."""
        if not self._data:
            return None
        self._swap(0, len(self._data) - 1)
        top = self._data.pop()
        self._sift_down(0)
        return top

    def peek(self) -> T | None:
        """Return the top item without removing it, or ``None`` when empty."""
        if not self._data:
            return None
        return self._data[0]

    def _swap(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if self._compare(self._data[index], self._data[parent]) <= 0:
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._data)
        while True:
            left = 2 * index + 1
            right = left + 1
            largest = index
            if left < size and self._compare(self._data[left], self._data[largest]) > 0:
                largest = left
            if (
                right < size
                and self._compare(self._data[right], self._data[largest]) > 0
            ):
                largest = right
            if largest == index:
                return
            self._swap(index, largest)
            index = largest
