"""
Floating-point FFT convolution of real sequences.

Same layout as the NTT (bit reversal, radix-2 butterflies, over-allocated
result of len(f) + len(g) + 1 entries) with complex roots of unity in place of
modular ones. No error compensation: round the output when convolving
integers.
"""

import logging

import numpy as np
from numba import njit

from .ntt import bit_reverse
from .utils import next_power_of_two

logger = logging.getLogger(__name__)


@njit(cache=True)
def _butterflies(a, sign):
    n = a.size
    half = 1
    while half < n:
        for k in range(half):
            theta = sign * np.pi * k / half
            w = np.cos(theta) + 1j * np.sin(theta)
            for start in range(0, n, 2 * half):
                s = a[start + k]
                t = a[start + k + half] * w
                a[start + k] = s + t
                a[start + k + half] = s - t
        half <<= 1


def dft(a, inverse: bool = False) -> np.ndarray:
    """Unscaled transform of a power-of-two length sequence."""
    A = np.array(a, dtype=np.complex128)
    if A.size & (A.size - 1):
        raise ValueError(f"transform length must be a power of two, got {A.size}")
    bit_reverse(A)
    _butterflies(A, -1.0 if inverse else 1.0)
    return A


def multiply(f, g) -> np.ndarray:
    """Real convolution, len(f) + len(g) + 1 float64 entries."""
    m = len(f) + len(g) + 1
    n = next_power_of_two(m)
    ff = np.zeros(n, dtype=np.complex128)
    gg = np.zeros(n, dtype=np.complex128)
    ff[:len(f)] = np.asarray(f, dtype=np.float64)
    gg[:len(g)] = np.asarray(g, dtype=np.float64)

    h = dft(dft(ff) * dft(gg), inverse=True)
    logger.debug("fft convolve %d x %d (n=%d)", len(f), len(g), n)
    return h.real[:m] / n


class FastFourierTransform:
    def __init__(self, coeffs):
        self.coeffs = np.asarray(coeffs, dtype=np.float64)

    def __len__(self):
        return self.coeffs.size

    def __getitem__(self, idx):
        return float(self.coeffs[idx])

    def __repr__(self):
        return f"FastFourierTransform({self.coeffs.tolist()})"

    def __mul__(self, other):
        if not isinstance(other, FastFourierTransform):
            return NotImplemented
        return multiply(self.coeffs, other.coeffs)
