"""
Number-theoretic transform over the transform-friendly primes.

``convolve`` works on plain integers and returns an int64 array,
``multiply`` works on StaticModInt sequences. Both return
``len(f) + len(g) + 1`` entries: the product has ``len(f) + len(g) - 1``
meaningful coefficients followed by two zeros. FormalPowerSeries relies on
that length.
"""

import logging
from functools import lru_cache
from time import perf_counter

import numpy as np
from numba import njit

from .constants import DEFAULT_MODULUS, MAX_KERNEL_MODULUS
from .modint import ModularInteger, StaticModInt
from .utils import find_primitive_root, invmod, next_power_of_two

logger = logging.getLogger(__name__)


@njit(cache=True)
def bit_reverse(a):
    """In-place bit-reversal permutation of a power-of-two length array."""
    n = a.size
    logn = 0
    while (1 << logn) < n:
        logn += 1
    for i in range(n):
        rev = 0
        x = i
        for _ in range(logn):
            rev = (rev << 1) | (x & 1)
            x >>= 1
        if i < rev:
            tmp = a[i]
            a[i] = a[rev]
            a[rev] = tmp


@njit(cache=True)
def _butterflies(a, stage_roots, q):
    """Cooley-Tukey stages on a bit-reversed buffer, in place, mod q."""
    n = a.size
    half = 1
    stage = 0
    while half < n:
        wlen = stage_roots[stage]
        for start in range(0, n, 2 * half):
            w = 1
            for j in range(start, start + half):
                u = a[j]
                v = (a[j + half] * w) % q
                a[j] = u + v if u + v < q else u + v - q
                a[j + half] = u - v if u - v >= 0 else u - v + q
                w = (w * wlen) % q
        half <<= 1
        stage += 1


@lru_cache(maxsize=128)
def _stage_roots(n: int, q: int, inverse: bool) -> tuple:
    # stage with half-width h uses g^((q-1)/(2h)), a primitive 2h-th root of unity
    g = find_primitive_root(q)
    roots = []
    half = 1
    while half < n:
        w = pow(g, (q - 1) // (2 * half), q)
        if inverse:
            w = invmod(w, q)
        roots.append(w)
        half <<= 1
    return tuple(roots)


def _check_transform(n: int, q: int):
    if n < 1 or n & (n - 1):
        raise ValueError(f"transform length must be a power of two, got {n}")
    if not 1 < q < MAX_KERNEL_MODULUS:
        raise ValueError(f"modulus {q} outside the 64-bit kernel range (1, 2^31)")
    if (q - 1) % n:
        raise ValueError(f"modulus {q} has no {n}-th roots of unity")


def as_residues(coeffs, q: int) -> np.ndarray:
    """Coefficients (ints or modular integers) as an int64 array in [0, q)."""
    if isinstance(coeffs, np.ndarray) and coeffs.dtype.kind in "iu":
        return np.mod(coeffs.astype(np.int64), q)
    return np.array([int(c) % q for c in coeffs], dtype=np.int64)


def ntt(a, q: int = DEFAULT_MODULUS) -> np.ndarray:
    """Forward transform of a power-of-two length sequence mod q."""
    A = as_residues(a, q)
    _check_transform(A.size, q)
    bit_reverse(A)
    _butterflies(A, np.array(_stage_roots(A.size, q, False), dtype=np.int64), q)
    return A


def intt(A, q: int = DEFAULT_MODULUS) -> np.ndarray:
    """Inverse transform mod q, then scale by n^{-1}."""
    a = as_residues(A, q)
    _check_transform(a.size, q)
    bit_reverse(a)
    _butterflies(a, np.array(_stage_roots(a.size, q, True), dtype=np.int64), q)
    inv_n = invmod(a.size, q)
    return (a * inv_n) % q


def convolve(f, g, q: int = DEFAULT_MODULUS) -> np.ndarray:
    """
    Convolution of f and g mod q.
    Returns len(f) + len(g) + 1 coefficients (the last two are zero).
    """
    m = len(f) + len(g) + 1
    n = next_power_of_two(m)
    t0 = perf_counter()

    ff = np.zeros(n, dtype=np.int64)
    gg = np.zeros(n, dtype=np.int64)
    ff[:len(f)] = as_residues(f, q)
    gg[:len(g)] = as_residues(g, q)

    F = ntt(ff, q)
    G = ntt(gg, q)
    h = intt((F * G) % q, q)

    logger.debug(
        "convolve %d x %d mod %d (n=%d) took %.2f ms",
        len(f), len(g), q, n, (perf_counter() - t0) * 1000,
    )
    return h[:m]


def multiply(f, g, mint=None) -> list:
    """
    Convolution of two StaticModInt sequences.

    The element type is taken from the inputs, or from ``mint`` when both
    are empty; with neither, the result is empty.
    """
    if mint is None:
        for seq in (f, g):
            if len(seq):
                mint = type(seq[0])
                break
        else:
            return []
    if not (isinstance(mint, type) and issubclass(mint, StaticModInt)):
        raise TypeError(
            f"multiply needs StaticModInt values, got {getattr(mint, '__name__', mint)}; "
            "use convolve() for plain integers"
        )
    q = mint.MOD
    for x in list(f) + list(g):
        if isinstance(x, ModularInteger) and x.modulus != q:
            raise ValueError(f"cannot convolve values mod {x.modulus} under mod {q}")
    return [mint(int(v)) for v in convolve(f, g, q)]


class NumberTheoreticTransform:
    """
    Integer sequence whose product is the convolution mod ``modulus``.

        NumberTheoreticTransform([0, 1, 2]) * NumberTheoreticTransform([1, 1])
    """

    def __init__(self, coeffs, modulus: int = DEFAULT_MODULUS):
        self.modulus = modulus
        self.coeffs = as_residues(coeffs, modulus)

    def __len__(self):
        return self.coeffs.size

    def __getitem__(self, idx):
        return int(self.coeffs[idx])

    def __repr__(self):
        return f"NumberTheoreticTransform({self.coeffs.tolist()}, mod {self.modulus})"

    def __mul__(self, other):
        if not isinstance(other, NumberTheoreticTransform):
            return NotImplemented
        if other.modulus != self.modulus:
            raise ValueError(
                f"cannot convolve mod {self.modulus} with mod {other.modulus}"
            )
        return convolve(self.coeffs, other.coeffs, self.modulus).tolist()
