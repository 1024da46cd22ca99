"""
Segment trees over a monoid (op, identity).

Ranges are half-open ``[l, r)``. ``LazySegmentTree`` additionally applies
maps from a second monoid (mapping, composition, map_identity) to ranges.
"""

import math
import operator
from typing import Callable


class SegmentTree:
    def __init__(self, values, op: Callable, identity):
        if isinstance(values, int):
            values = [identity] * values
        values = list(values)
        self.n = len(values)
        self.op = op
        self.identity = identity
        self.size = 1
        self.log = 0
        while self.size < self.n:
            self.size <<= 1
            self.log += 1
        self.data = [identity] * (2 * self.size)
        self.data[self.size:self.size + self.n] = values
        for i in range(self.size - 1, 0, -1):
            self._update(i)

    def _update(self, k: int):
        self.data[k] = self.op(self.data[2 * k], self.data[2 * k + 1])

    def get(self, idx: int):
        return self.data[self.size + idx]

    def set(self, idx: int, value):
        idx += self.size
        self.data[idx] = value
        for i in range(1, self.log + 1):
            self._update(idx >> i)

    def query(self, l: int = 0, r: int = None):
        """op over values[l:r]."""
        if r is None:
            r = self.n
        assert 0 <= l <= r <= self.n, f"bad range [{l}, {r})"
        sml, smr = self.identity, self.identity
        l += self.size
        r += self.size
        while l < r:
            if l & 1:
                sml = self.op(sml, self.data[l])
                l += 1
            if r & 1:
                r -= 1
                smr = self.op(self.data[r], smr)
            l >>= 1
            r >>= 1
        return self.op(sml, smr)

    def __len__(self):
        return self.n


class LazySegmentTree:
    def __init__(self, values, op: Callable, identity, mapping: Callable,
                 composition: Callable, map_identity):
        if isinstance(values, int):
            values = [identity] * values
        values = list(values)
        self.n = len(values)
        self.op = op
        self.identity = identity
        self.mapping = mapping
        self.composition = composition
        self.map_identity = map_identity
        self.size = 1
        self.log = 0
        while self.size < self.n:
            self.size <<= 1
            self.log += 1
        self.data = [identity] * (2 * self.size)
        self.data[self.size:self.size + self.n] = values
        self.lazy = [map_identity] * self.size
        for i in range(self.size - 1, 0, -1):
            self._update(i)

    def _update(self, k: int):
        self.data[k] = self.op(self.data[2 * k], self.data[2 * k + 1])

    def _apply(self, k: int, f):
        self.data[k] = self.mapping(f, self.data[k])
        if k < self.size:
            self.lazy[k] = self.composition(f, self.lazy[k])

    def _push(self, k: int):
        self._apply(2 * k, self.lazy[k])
        self._apply(2 * k + 1, self.lazy[k])
        self.lazy[k] = self.map_identity

    def _push_path(self, idx: int):
        for i in range(self.log, 0, -1):
            self._push(idx >> i)

    def get(self, idx: int):
        idx += self.size
        self._push_path(idx)
        return self.data[idx]

    def set(self, idx: int, value):
        idx += self.size
        self._push_path(idx)
        self.data[idx] = value
        for i in range(1, self.log + 1):
            self._update(idx >> i)

    def apply_at(self, idx: int, f):
        idx += self.size
        self._push_path(idx)
        self.data[idx] = self.mapping(f, self.data[idx])
        for i in range(1, self.log + 1):
            self._update(idx >> i)

    def query(self, l: int = 0, r: int = None):
        if r is None:
            r = self.n
        assert 0 <= l <= r <= self.n, f"bad range [{l}, {r})"
        if l == r:
            return self.identity
        l += self.size
        r += self.size
        for i in range(self.log, 0, -1):
            if ((l >> i) << i) != l:
                self._push(l >> i)
            if ((r >> i) << i) != r:
                self._push((r - 1) >> i)
        sml, smr = self.identity, self.identity
        while l < r:
            if l & 1:
                sml = self.op(sml, self.data[l])
                l += 1
            if r & 1:
                r -= 1
                smr = self.op(self.data[r], smr)
            l >>= 1
            r >>= 1
        return self.op(sml, smr)

    def apply_range(self, l: int, r: int, f):
        assert 0 <= l <= r <= self.n, f"bad range [{l}, {r})"
        if l == r:
            return
        l += self.size
        r += self.size
        for i in range(self.log, 0, -1):
            if ((l >> i) << i) != l:
                self._push(l >> i)
            if ((r >> i) << i) != r:
                self._push((r - 1) >> i)
        l2, r2 = l, r
        while l < r:
            if l & 1:
                self._apply(l, f)
                l += 1
            if r & 1:
                r -= 1
                self._apply(r, f)
            l >>= 1
            r >>= 1
        l, r = l2, r2
        for i in range(1, self.log + 1):
            if ((l >> i) << i) != l:
                self._update(l >> i)
            if ((r >> i) << i) != r:
                self._update((r - 1) >> i)

    def max_right(self, l: int, pred: Callable) -> int:
        """Largest r with pred(op(values[l:r])) true; pred(identity) must hold."""
        assert 0 <= l <= self.n
        assert pred(self.identity)
        if l == self.n:
            return self.n
        l += self.size
        self._push_path(l)
        sm = self.identity
        while True:
            while l % 2 == 0:
                l >>= 1
            if not pred(self.op(sm, self.data[l])):
                while l < self.size:
                    self._push(l)
                    l = 2 * l
                    res = self.op(sm, self.data[l])
                    if pred(res):
                        sm = res
                        l += 1
                return l - self.size
            sm = self.op(sm, self.data[l])
            l += 1
            if (l & -l) == l:
                break
        return self.n

    def min_left(self, r: int, pred: Callable) -> int:
        """Smallest l with pred(op(values[l:r])) true; pred(identity) must hold."""
        assert 0 <= r <= self.n
        assert pred(self.identity)
        if r == 0:
            return 0
        r += self.size
        for i in range(self.log, 0, -1):
            self._push((r - 1) >> i)
        sm = self.identity
        while True:
            r -= 1
            while r > 1 and r % 2:
                r >>= 1
            if not pred(self.op(self.data[r], sm)):
                while r < self.size:
                    self._push(r)
                    r = 2 * r + 1
                    res = self.op(self.data[r], sm)
                    if pred(res):
                        sm = res
                        r -= 1
                return r + 1 - self.size
            sm = self.op(self.data[r], sm)
            if (r & -r) == r:
                break
        return 0

    def __len__(self):
        return self.n


def max_add(values) -> LazySegmentTree:
    """Range add, range maximum."""
    return LazySegmentTree(values, max, -math.inf, operator.add, operator.add, 0)


def min_add(values) -> LazySegmentTree:
    """Range add, range minimum."""
    return LazySegmentTree(values, min, math.inf, operator.add, operator.add, 0)
