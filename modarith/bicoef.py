"""
Binomial coefficients over modular integers.

``mint`` is any callable turning an int into a modular value: a
StaticModInt class such as ``ModInt998244353`` or a ``ModulusContext``.
The modulus must be a prime larger than the table size.
"""


class SmallNCombination:
    """Factorial tables for all n <= max_n."""

    def __init__(self, max_n: int, mint):
        self.mint = mint
        fact = [mint(1)] * (max_n + 1)
        for i in range(1, max_n + 1):
            fact[i] = fact[i - 1] * i
        finv = [mint(1)] * (max_n + 1)
        finv[max_n] = fact[max_n].inverse()
        for i in range(max_n - 1, -1, -1):
            finv[i] = finv[i + 1] * (i + 1)
        inv = [mint(1)] * (max_n + 1)
        for i in range(1, max_n + 1):
            inv[i] = finv[i] * fact[i - 1]
        self.fact = fact
        self.finv = finv
        self.inv = inv

    def perm(self, n: int, r: int):
        if n < r or r < 0:
            return self.mint(0)
        return self.fact[n] * self.finv[n - r]

    def comb(self, n: int, r: int):
        if n < r or r < 0:
            return self.mint(0)
        return self.fact[n] * self.finv[r] * self.finv[n - r]

    def multicomb(self, n: int, r: int):
        """Combinations with repetition, C(n + r - 1, r)."""
        if r == 0:
            return self.mint(1)
        return self.comb(n + r - 1, r)


class LargeNCombination:
    """C(n, r) for one fixed (possibly huge) n and r <= r_max."""

    def __init__(self, n: int, r_max: int, mint):
        self.n = n
        small = SmallNCombination(r_max, mint)
        com = [mint(1)] * (r_max + 1)
        for i in range(1, r_max + 1):
            com[i] = com[i - 1] * (n - i + 1) * small.inv[i]
        self._com = com

    def comb(self, r: int):
        return self._com[r]
