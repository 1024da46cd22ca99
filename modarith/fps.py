import logging
from numbers import Integral
from time import perf_counter

import numpy as np

from .constants import DEFAULT_MODULUS, MAX_KERNEL_MODULUS
from .modint import ModularInteger, ModulusContext, ModulusError, STATIC_MODINTS
from .ntt import as_residues, convolve
from .utils import inverse_table, invmod, powmod

logger = logging.getLogger(__name__)


class FormalPowerSeries:
    """
    Truncated power series over Z_q, coefficient i of x^i in ``coeffs``.

    Coefficients above the stored length are implicitly zero. Adding or
    subtracting two series trims trailing zeros; products, shifts and scalar
    operations keep the raw length. Every operator returns a new series.
    """

    def __init__(self, coeffs=(), modulus: int = DEFAULT_MODULUS):
        # coefficient products must fit in int64
        if not 1 < modulus < MAX_KERNEL_MODULUS:
            raise ModulusError(
                f"modulus must be in (1, 2^31) for int64 coefficients, got {modulus}"
            )
        self.modulus = modulus
        self.coeffs = as_residues(coeffs, modulus)

    def _new(self, coeffs: np.ndarray) -> "FormalPowerSeries":
        # coeffs must already be int64 residues
        obj = object.__new__(FormalPowerSeries)
        obj.modulus = self.modulus
        obj.coeffs = coeffs
        return obj

    @classmethod
    def zeros(cls, size: int, modulus: int = DEFAULT_MODULUS) -> "FormalPowerSeries":
        return cls(np.zeros(size, dtype=np.int64), modulus)

    # ------------------------------------------------------------------
    # container protocol
    # ------------------------------------------------------------------

    def __len__(self):
        return self.coeffs.size

    def __iter__(self):
        return iter(self.values())

    def __getitem__(self, idx):
        if isinstance(idx, slice):
            return self._new(self.coeffs[idx].copy())
        return int(self.coeffs[idx])

    def __setitem__(self, idx, value):
        self.coeffs[idx] = int(value) % self.modulus

    def __eq__(self, other):
        if isinstance(other, FormalPowerSeries):
            return (self.modulus == other.modulus
                    and np.array_equal(self.coeffs, other.coeffs))
        if isinstance(other, (list, tuple)):
            return self.values() == [int(v) for v in other]
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"FormalPowerSeries({self.values()}, mod {self.modulus})"

    def values(self) -> list:
        return self.coeffs.tolist()

    def to_modints(self) -> list:
        """Coefficients as StaticModInt when the modulus has one, else DynamicModInt."""
        mint = STATIC_MODINTS.get(self.modulus) or ModulusContext(modulus=self.modulus)
        return [mint(v) for v in self.values()]

    def copy(self) -> "FormalPowerSeries":
        return self._new(self.coeffs.copy())

    def coefficient(self, i: int) -> int:
        return int(self.coeffs[i]) if i < self.coeffs.size else 0

    # ------------------------------------------------------------------
    # truncation helpers
    # ------------------------------------------------------------------

    def head(self, n: int) -> "FormalPowerSeries":
        """First n coefficients (fewer if the series is shorter)."""
        return self._new(self.coeffs[:max(n, 0)].copy())

    def resize(self, n: int) -> "FormalPowerSeries":
        """Exactly n coefficients, truncating or zero-padding."""
        out = np.zeros(n, dtype=np.int64)
        k = min(n, self.coeffs.size)
        out[:k] = self.coeffs[:k]
        return self._new(out)

    def trimmed(self) -> "FormalPowerSeries":
        nz = np.flatnonzero(self.coeffs)
        end = int(nz[-1]) + 1 if nz.size else 0
        return self._new(self.coeffs[:end].copy())

    def reversed(self) -> "FormalPowerSeries":
        return self._new(self.coeffs[::-1].copy())

    # ------------------------------------------------------------------
    # operand coercion
    # ------------------------------------------------------------------

    def _check_same(self, other: "FormalPowerSeries"):
        if other.modulus != self.modulus:
            raise ValueError(
                f"cannot combine series mod {self.modulus} and mod {other.modulus}"
            )

    def _scalar(self, value):
        if isinstance(value, ModularInteger):
            if value.modulus != self.modulus:
                raise ValueError(
                    f"cannot combine series mod {self.modulus} with a value mod {value.modulus}"
                )
            return value.value
        if isinstance(value, Integral):
            return int(value) % self.modulus
        return NotImplemented

    def _padded(self, other: "FormalPowerSeries"):
        n = max(self.coeffs.size, other.coeffs.size)
        a = np.zeros(n, dtype=np.int64)
        b = np.zeros(n, dtype=np.int64)
        a[:self.coeffs.size] = self.coeffs
        b[:other.coeffs.size] = other.coeffs
        return a, b

    def _with_constant(self, delta: int) -> "FormalPowerSeries":
        coeffs = self.coeffs.copy() if self.coeffs.size else np.zeros(1, dtype=np.int64)
        coeffs[0] = (int(coeffs[0]) + delta) % self.modulus
        return self._new(coeffs)

    # ------------------------------------------------------------------
    # ring operations
    # ------------------------------------------------------------------

    def __neg__(self):
        return self._new((self.modulus - self.coeffs) % self.modulus)

    def __add__(self, other):
        if isinstance(other, FormalPowerSeries):
            self._check_same(other)
            a, b = self._padded(other)
            return self._new((a + b) % self.modulus).trimmed()
        s = self._scalar(other)
        if s is NotImplemented:
            return NotImplemented
        return self._with_constant(s)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, FormalPowerSeries):
            self._check_same(other)
            a, b = self._padded(other)
            return self._new((a - b) % self.modulus).trimmed()
        s = self._scalar(other)
        if s is NotImplemented:
            return NotImplemented
        return self._with_constant(-s)

    def __rsub__(self, other):
        s = self._scalar(other)
        if s is NotImplemented:
            return NotImplemented
        return (-self)._with_constant(s)

    def __mul__(self, other):
        if isinstance(other, FormalPowerSeries):
            self._check_same(other)
            return self._new(convolve(self.coeffs, other.coeffs, self.modulus))
        s = self._scalar(other)
        if s is NotImplemented:
            return NotImplemented
        return self._new((self.coeffs * s) % self.modulus)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, FormalPowerSeries):
            self._check_same(other)
            return self._divide(other)
        s = self._scalar(other)
        if s is NotImplemented:
            return NotImplemented
        return self * invmod(s, self.modulus)

    def __mod__(self, other):
        if not isinstance(other, FormalPowerSeries):
            return NotImplemented
        self._check_same(other)
        dividend = self.trimmed()
        return dividend - dividend._divide(other) * other

    def __lshift__(self, n: int):
        """Multiply by x^n."""
        return self._new(np.concatenate([np.zeros(n, dtype=np.int64), self.coeffs]))

    def __rshift__(self, n: int):
        """Drop the lowest n coefficients."""
        return self._new(self.coeffs[n:].copy())

    def __pow__(self, exponent: int):
        return self.pow(exponent)

    def _divide(self, divisor: "FormalPowerSeries") -> "FormalPowerSeries":
        # quotient via reversal: rev(q) = rev(a) * rev(b)^-1 mod x^need
        if divisor.coeffs.size == 0:
            raise ZeroDivisionError("division by the empty series")
        if divisor.coeffs[-1] == 0:
            raise ValueError("divisor must have a non-zero leading coefficient")
        dividend = self.trimmed()
        if len(dividend) < len(divisor):
            return self._new(np.zeros(0, dtype=np.int64))
        need = len(dividend) - len(divisor) + 1
        rq = dividend.reversed().head(need) * divisor.reversed().inverse(need)
        return rq.head(need).reversed()

    # ------------------------------------------------------------------
    # calculus
    # ------------------------------------------------------------------

    def differentiate(self) -> "FormalPowerSeries":
        n = self.coeffs.size
        if n == 0:
            return self._new(np.zeros(0, dtype=np.int64))
        factors = np.arange(1, n, dtype=np.int64)
        return self._new((self.coeffs[1:] * factors) % self.modulus)

    def integrate(self) -> "FormalPowerSeries":
        n = self.coeffs.size
        inv = np.array(inverse_table(n, self.modulus), dtype=np.int64)
        out = np.zeros(n + 1, dtype=np.int64)
        out[1:] = (self.coeffs * inv[1:]) % self.modulus
        return self._new(out)

    def inverse(self, degree: int = None) -> "FormalPowerSeries":
        """1 / f mod x^degree by Newton's iteration."""
        if degree is None:
            degree = len(self)
        c0 = self.coefficient(0)
        if c0 == 0:
            raise ValueError("inverse requires a non-zero constant term")
        t0 = perf_counter()
        v = self._new(np.array([invmod(c0, self.modulus)], dtype=np.int64))
        i = 1
        while i < degree:
            v = (v + v - v * v * self.head(i << 1)).head(i << 1)
            i <<= 1
        logger.debug("inverse to degree %d took %.2f ms", degree, (perf_counter() - t0) * 1000)
        return v.resize(degree)

    def log(self, degree: int = None) -> "FormalPowerSeries":
        if degree is None:
            degree = len(self)
        if self.coefficient(0) != 1:
            raise ValueError("log requires constant term 1")
        v = (self.differentiate() * self.inverse(degree)).integrate()
        return v.resize(degree)

    def exp(self, degree: int = None) -> "FormalPowerSeries":
        """exp(f) mod x^degree by Newton's iteration on log."""
        if degree is None:
            degree = len(self)
        if self.coefficient(0) != 0:
            raise ValueError("exp requires constant term 0")
        t0 = perf_counter()
        v = self._new(np.ones(1, dtype=np.int64))
        i = 1
        while i < degree:
            v = v * (self.head(i << 1) - v.log(i << 1) + 1).head(i << 1)
            i <<= 1
        logger.debug("exp to degree %d took %.2f ms", degree, (perf_counter() - t0) * 1000)
        return v.resize(degree)

    def pow(self, exponent: int, degree: int = None) -> "FormalPowerSeries":
        """f^exponent mod x^degree."""
        if degree is None:
            degree = len(self)
        if exponent < 0:
            raise ValueError(f"exponent must be non-negative, got {exponent}")
        nz = np.flatnonzero(self.coeffs)
        if nz.size == 0:
            return self.zeros(degree, self.modulus)
        i = int(nz[0])
        if i * exponent >= degree:
            return self.zeros(degree, self.modulus)
        k = int(self.coeffs[i])
        v = ((self >> i) / k).log(degree) * exponent
        v = v.exp(degree) * powmod(k, exponent, self.modulus)
        return (v << (exponent * i)).resize(degree)
