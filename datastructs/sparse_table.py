import operator
from typing import Callable


class SparseTable:
    """
    Static range arg-min / arg-max in O(1) per query.

    ``compare(a, b)`` is true when a should win over b (``operator.lt`` for
    minimum). ``query`` returns the index of the winning value in the
    inclusive range ``[l, r]``; ties go to the right-hand candidate.
    """

    def __init__(self, values, compare: Callable):
        self.data = list(values)
        self.compare = compare
        n = len(self.data)
        self.logs = [0] * (n + 1)
        for i in range(2, n + 1):
            self.logs[i] = self.logs[i >> 1] + 1
        self.table = [list(range(n))]
        k = 1
        while (1 << k) <= n:
            prev = self.table[k - 1]
            half = 1 << (k - 1)
            self.table.append([
                self._pick(prev[i], prev[i + half])
                for i in range(n - (1 << k) + 1)
            ])
            k += 1

    def _pick(self, i: int, j: int) -> int:
        return i if self.compare(self.data[i], self.data[j]) else j

    def query(self, l: int, r: int) -> int:
        assert 0 <= l <= r < len(self.data), f"bad range [{l}, {r}]"
        k = self.logs[r - l + 1]
        return self._pick(self.table[k][l], self.table[k][r + 1 - (1 << k)])

    def __len__(self):
        return len(self.data)


class MinSparseTable(SparseTable):
    def __init__(self, values):
        super().__init__(values, operator.lt)


class MaxSparseTable(SparseTable):
    def __init__(self, values):
        super().__init__(values, operator.gt)
