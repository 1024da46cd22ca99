from typing import List, Sequence

# Mersenne prime 2^61 - 1
ROLLING_HASH_MODULUS = (1 << 61) - 1
ROLLING_HASH_BASE = 1_024_578_101


def edit_distance(s: Sequence, t: Sequence) -> int:
    """Levenshtein distance between two sequences."""
    n, m = len(s), len(t)
    prev = list(range(m + 1))
    for i in range(1, n + 1):
        cur = [i] + [0] * m
        for j in range(1, m + 1):
            cur[j] = min(
                prev[j] + 1,
                cur[j - 1] + 1,
                prev[j - 1] + (s[i - 1] != t[j - 1]),
            )
        prev = cur
    return prev[m]


def z_algorithm(s: Sequence) -> List[int]:
    """z[i] = length of the longest common prefix of s and s[i:]."""
    n = len(s)
    if n == 0:
        return []
    z = [0] * n
    z[0] = n
    l = r = 0
    for i in range(1, n):
        if i < r:
            z[i] = min(r - i, z[i - l])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] > r:
            l, r = i, i + z[i]
    return z


class RollingHash:
    """Polynomial prefix hashes of a str or bytes-like sequence."""

    def __init__(self, s, base: int = ROLLING_HASH_BASE, modulus: int = ROLLING_HASH_MODULUS):
        if isinstance(s, str):
            s = s.encode()
        self.base = base
        self.modulus = modulus
        self.size = len(s)
        self.pow = [1] * (self.size + 1)
        self.prefix = [0] * (self.size + 1)
        for i, c in enumerate(s):
            self.pow[i + 1] = self.pow[i] * base % modulus
            self.prefix[i + 1] = (self.prefix[i] * base + c) % modulus

    def hash(self, l: int = 0, r: int = None) -> int:
        """Hash of s[l:r]."""
        if r is None:
            r = self.size
        return (self.prefix[r] - self.prefix[l] * self.pow[r - l]) % self.modulus

    def __len__(self):
        return self.size


def find_substring(s: RollingHash, t: RollingHash) -> List[int]:
    """Start indices of every occurrence of t in s."""
    if t.size > s.size:
        return []
    th = t.hash()
    return [i for i in range(s.size - t.size + 1) if s.hash(i, i + t.size) == th]
