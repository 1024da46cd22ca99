from math import comb, perm

import pytest

from modarith.bicoef import LargeNCombination, SmallNCombination
from modarith.modint import ModInt998244353, ModulusContext

MOD = 1_000_000_007


@pytest.fixture
def mint():
    return ModulusContext(modulus=MOD)


def test_small_comb(mint):
    c = SmallNCombination(15, mint)
    assert c.comb(12, 4).value == 495
    assert c.comb(3, 5).value == 0
    assert c.perm(10, 3).value == 720
    assert c.multicomb(3, 2).value == 6
    assert c.multicomb(5, 0).value == 1


def test_small_tables_against_math(mint):
    c = SmallNCombination(60, mint)
    for n in range(61):
        for r in range(n + 1):
            assert c.comb(n, r).value == comb(n, r) % MOD
            assert c.perm(n, r).value == perm(n, r) % MOD
    for i in range(1, 61):
        assert (c.inv[i] * i).value == 1


def test_large_comb(mint):
    c = LargeNCombination(12, 12, mint)
    assert c.comb(4).value == 495
    n = 10**18
    big = LargeNCombination(n, 5, mint)
    assert big.comb(5).value == comb(n, 5) % MOD


def test_static_modint_tables():
    c = SmallNCombination(10, ModInt998244353)
    assert c.comb(10, 5) == 252
    assert type(c.comb(10, 5)) is ModInt998244353
