"""
Integers modulo a prime.

Two flavours share one implementation:

* ``StaticModInt`` subclasses fix the modulus (and its primitive root) as a
  class attribute, one class per transform-friendly prime, e.g.
  ``ModInt998244353(5)``.
* ``DynamicModInt`` carries an explicit ``ModulusContext``. When no context
  is passed the per-thread default set by ``set_modulus`` is used; the value
  binds that context at construction, so later calls to ``set_modulus`` never
  change live values.

Values are always kept in ``[0, modulus)``. Combining two values under
different moduli raises ``ValueError``.
"""

import logging
import threading
from functools import total_ordering
from numbers import Integral

from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    MOD_167772161, MOD_469762049, MOD_924844033,
    MOD_998244353, MOD_1012924417, MOD_1224736769, PRIMITIVE_ROOTS,
)
from .utils import invmod, powmod

logger = logging.getLogger(__name__)


class ModulusError(ValueError):
    """Modulus missing or not usable."""


class ModulusContext(BaseModel):
    """
    Immutable modulus handle for dynamic modular integers.

        ctx = ModulusContext(modulus=1_000_000_007)
        a = ctx(10) / 3
    """
    model_config = ConfigDict(frozen=True)

    modulus: int = Field(gt=0, strict=True)

    def __call__(self, value=0) -> "DynamicModInt":
        return DynamicModInt(value, self)


_local = threading.local()


def set_modulus(value: int) -> ModulusContext:
    """Set the default modulus for DynamicModInt on the current thread."""
    ctx = ModulusContext(modulus=value)
    _local.context = ctx
    logger.debug("thread default modulus set to %d", value)
    return ctx


def reset_modulus():
    _local.context = None


def get_context() -> ModulusContext:
    ctx = getattr(_local, "context", None)
    if ctx is None:
        raise ModulusError(
            "modulus is not set: call set_modulus() or pass a ModulusContext"
        )
    return ctx


def get_modulus() -> int:
    return get_context().modulus


def _reduce(value, modulus) -> int:
    if modulus is None or modulus <= 0:
        raise ModulusError(f"modulus must be positive, got {modulus}")
    if not isinstance(value, (Integral, ModularInteger)):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return int(value) % modulus


@total_ordering
class ModularInteger:
    """Shared arithmetic. Subclasses provide ``modulus`` and ``_wrap``."""

    __slots__ = ("_value",)

    @property
    def modulus(self) -> int:
        raise NotImplementedError

    @property
    def value(self) -> int:
        return self._value

    def _wrap(self, raw: int):
        raise NotImplementedError

    def _coerce(self, other):
        if isinstance(other, ModularInteger):
            if other.modulus != self.modulus:
                raise ValueError(
                    f"cannot combine values mod {self.modulus} and mod {other.modulus}"
                )
            return other._value
        if isinstance(other, Integral):
            return int(other) % self.modulus
        return NotImplemented

    def __add__(self, other):
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        v = self._value + rhs
        if v >= self.modulus:
            v -= self.modulus
        return self._wrap(v)

    __radd__ = __add__

    def __sub__(self, other):
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        v = self._value - rhs
        if v < 0:
            v += self.modulus
        return self._wrap(v)

    def __rsub__(self, other):
        lhs = self._coerce(other)
        if lhs is NotImplemented:
            return NotImplemented
        v = lhs - self._value
        if v < 0:
            v += self.modulus
        return self._wrap(v)

    def __mul__(self, other):
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return self._wrap(self._value * rhs % self.modulus)

    __rmul__ = __mul__

    def __truediv__(self, other):
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return self._wrap(self._value * invmod(rhs, self.modulus) % self.modulus)

    def __rtruediv__(self, other):
        lhs = self._coerce(other)
        if lhs is NotImplemented:
            return NotImplemented
        return self._wrap(lhs * invmod(self._value, self.modulus) % self.modulus)

    def __pow__(self, exponent):
        return self.pow(exponent)

    def __neg__(self):
        return self._wrap((self.modulus - self._value) % self.modulus)

    def __pos__(self):
        return self

    def pow(self, exponent: int):
        if exponent < 0:
            return self.inverse().pow(-exponent)
        return self._wrap(powmod(self._value, exponent, self.modulus))

    def inverse(self):
        """Multiplicative inverse; raises ZeroDivisionError for 0."""
        return self._wrap(invmod(self._value, self.modulus))

    def __eq__(self, other):
        if isinstance(other, ModularInteger):
            return self.modulus == other.modulus and self._value == other._value
        if isinstance(other, Integral):
            return self._value == other
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, ModularInteger):
            return self._value < self._coerce(other)
        if isinstance(other, Integral):
            return self._value < other
        return NotImplemented

    def __hash__(self):
        return hash(self._value)

    def __bool__(self):
        return self._value != 0

    def __int__(self):
        return self._value

    def __index__(self):
        return self._value


class StaticModInt(ModularInteger):
    """Modulus and primitive root fixed by the subclass."""

    __slots__ = ()
    MOD = None
    PRIMITIVE_ROOT = None

    def __init__(self, value=0):
        self._value = _reduce(value, self.MOD)

    @property
    def modulus(self) -> int:
        return self.MOD

    @classmethod
    def primitive_root(cls) -> int:
        return cls.PRIMITIVE_ROOT

    def _wrap(self, raw: int):
        obj = object.__new__(type(self))
        obj._value = raw
        return obj

    def __repr__(self):
        return f"{type(self).__name__}({self._value})"


class ModInt167772161(StaticModInt):
    __slots__ = ()
    MOD = MOD_167772161
    PRIMITIVE_ROOT = PRIMITIVE_ROOTS[MOD_167772161]


class ModInt469762049(StaticModInt):
    __slots__ = ()
    MOD = MOD_469762049
    PRIMITIVE_ROOT = PRIMITIVE_ROOTS[MOD_469762049]


class ModInt924844033(StaticModInt):
    __slots__ = ()
    MOD = MOD_924844033
    PRIMITIVE_ROOT = PRIMITIVE_ROOTS[MOD_924844033]


class ModInt998244353(StaticModInt):
    __slots__ = ()
    MOD = MOD_998244353
    PRIMITIVE_ROOT = PRIMITIVE_ROOTS[MOD_998244353]


class ModInt1012924417(StaticModInt):
    __slots__ = ()
    MOD = MOD_1012924417
    PRIMITIVE_ROOT = PRIMITIVE_ROOTS[MOD_1012924417]


class ModInt1224736769(StaticModInt):
    __slots__ = ()
    MOD = MOD_1224736769
    PRIMITIVE_ROOT = PRIMITIVE_ROOTS[MOD_1224736769]


STATIC_MODINTS = {
    cls.MOD: cls
    for cls in (
        ModInt167772161, ModInt469762049, ModInt924844033,
        ModInt998244353, ModInt1012924417, ModInt1224736769,
    )
}


def static_modint(modulus: int):
    """The StaticModInt class for one of the supported moduli."""
    try:
        return STATIC_MODINTS[modulus]
    except KeyError:
        raise ModulusError(f"no static modint for modulus {modulus}") from None


class DynamicModInt(ModularInteger):
    """Modular integer bound to an explicit ModulusContext."""

    __slots__ = ("context",)

    def __init__(self, value=0, context: ModulusContext = None):
        if context is None:
            context = get_context()
        self.context = context
        self._value = _reduce(value, context.modulus)

    @property
    def modulus(self) -> int:
        return self.context.modulus

    def _wrap(self, raw: int):
        obj = object.__new__(DynamicModInt)
        obj.context = self.context
        obj._value = raw
        return obj

    def __repr__(self):
        return f"DynamicModInt({self._value}, mod {self.modulus})"


ModInt = DynamicModInt
