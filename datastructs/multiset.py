from typing import Iterable, Iterator, Optional, Tuple

from sortedcontainers import SortedList


class MultiSet:
    """
    Sorted multiset backed by a SortedList.

    Iteration yields every copy in ascending order; ``reversed`` yields them
    descending.
    """

    def __init__(self, values: Iterable = ()):
        self._items = SortedList(values)

    def insert(self, value):
        self._items.add(value)

    def remove_one(self, value) -> bool:
        """Remove one copy of value; False if there was none."""
        if value not in self._items:
            return False
        self._items.remove(value)
        return True

    def remove_all(self, value) -> int:
        """Remove every copy of value and return how many there were."""
        lo = self._items.bisect_left(value)
        hi = self._items.bisect_right(value)
        del self._items[lo:hi]
        return hi - lo

    def count(self, value) -> int:
        return self._items.count(value)

    def range(self, minimum=None, maximum=None,
              inclusive: Tuple[bool, bool] = (True, False)) -> Iterator:
        """Values in [minimum, maximum) by default; either bound may be None."""
        return self._items.irange(minimum, maximum, inclusive)

    def is_empty(self) -> bool:
        return not self._items

    def _counts(self):
        # distinct value -> multiplicity, in order
        i = 0
        n = len(self._items)
        while i < n:
            value = self._items[i]
            j = self._items.bisect_right(value)
            yield value, j - i
            i = j

    def is_disjoint(self, other: "MultiSet") -> bool:
        return all(other.count(v) == 0 for v, _ in self._counts())

    def is_subset(self, other: "MultiSet") -> bool:
        return all(c <= other.count(v) for v, c in self._counts())

    def is_superset(self, other: "MultiSet") -> bool:
        return other.is_subset(self)

    def min(self) -> Optional[object]:
        return self._items[0] if self._items else None

    def max(self) -> Optional[object]:
        return self._items[-1] if self._items else None

    def __contains__(self, value):
        return value in self._items

    def __iter__(self):
        return iter(self._items)

    def __reversed__(self):
        return reversed(self._items)

    def __len__(self):
        return len(self._items)

    def __repr__(self):
        return f"MultiSet({list(self._items)})"
