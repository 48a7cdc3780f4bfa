"""Arithmetic in the base field of the Pallas curve."""

from __future__ import annotations

from collections.abc import Iterable
from functools import total_ordering
from typing import Union

MODULUS = 0x40000000000000000000000000000000224698FC094CF91B992D30ED00000001
"""The Pallas base field prime p."""

S = 32
"""Two-adicity of p - 1: p - 1 = 2^S * T with T odd."""

T = (MODULUS - 1) >> S
"""The odd part of p - 1."""

GENERATOR = 5
"""A generator of the multiplicative group of the field."""

REPR_SIZE = 32
_LIMB_BITS = 64
_LIMB_COUNT = 4

IntoFp = Union["Fp", int]


def _limbs_to_int(limbs: Iterable[int]) -> int:
    limbs = list(limbs)
    if len(limbs) != _LIMB_COUNT:
        raise ValueError(f"expected {_LIMB_COUNT} limbs, got {len(limbs)}")
    value = 0
    for position, limb in enumerate(limbs):
        if not 0 <= limb < 1 << _LIMB_BITS:
            raise ValueError(f"limb {limb:#x} does not fit in 64 bits")
        value |= limb << (_LIMB_BITS * position)
    return value


@total_ordering
class Fp:
    """An element of the Pallas base field, stored in canonical form."""

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        self._value = int(value) % MODULUS

    @classmethod
    def from_raw(cls, limbs: Iterable[int]) -> "Fp":
        """Build an element from four little-endian 64-bit limbs, reducing mod p."""
        return cls(_limbs_to_int(limbs))

    @classmethod
    def from_repr(cls, data: bytes) -> "Fp":
        """Decode a 32-byte little-endian canonical encoding."""
        data = bytes(data)
        if len(data) != REPR_SIZE:
            raise ValueError(f"expected {REPR_SIZE} bytes, got {len(data)}")
        value = int.from_bytes(data, "little")
        if value >= MODULUS:
            raise ValueError("encoding is not a canonical field element")
        return cls(value)

    def to_repr(self) -> bytes:
        """Encode as 32 little-endian bytes."""
        return self._value.to_bytes(REPR_SIZE, "little")

    def is_zero(self) -> bool:
        return self._value == 0

    def invert(self) -> "Fp":
        """Return the multiplicative inverse; zero has none."""
        if self._value == 0:
            raise ZeroDivisionError("zero has no inverse in the field")
        return Fp(pow(self._value, MODULUS - 2, MODULUS))

    def pow(self, exponent: int) -> "Fp":
        """Raise to a non-negative integer power."""
        exponent = int(exponent)
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        return Fp(pow(self._value, exponent, MODULUS))

    def square(self) -> "Fp":
        return Fp(self._value * self._value)

    def sqrt(self) -> "Fp":
        """Return a square root; raise ValueError for a non-residue."""
        return sqrt_tonelli_shanks(self, (T - 1) // 2)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"Fp({self._value:#066x})"

    def __hash__(self) -> int:
        return hash((Fp, self._value))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Fp):
            return self._value == other._value
        return NotImplemented

    def __lt__(self, other: "Fp") -> bool:
        if isinstance(other, Fp):
            return self._value < other._value
        return NotImplemented

    def __bool__(self) -> bool:
        return self._value != 0

    @staticmethod
    def _coerce(other: object) -> "Fp | None":
        if isinstance(other, Fp):
            return other
        if isinstance(other, int):
            return Fp(other)
        return None

    def __add__(self, other: IntoFp) -> "Fp":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fp(self._value + rhs._value)

    __radd__ = __add__

    def __sub__(self, other: IntoFp) -> "Fp":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fp(self._value - rhs._value)

    def __rsub__(self, other: IntoFp) -> "Fp":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return Fp(lhs._value - self._value)

    def __mul__(self, other: IntoFp) -> "Fp":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fp(self._value * rhs._value)

    __rmul__ = __mul__

    def __neg__(self) -> "Fp":
        return Fp(-self._value)


ZERO = Fp(0)
ONE = Fp(1)
ROOT_OF_UNITY = Fp(GENERATOR).pow(T)
"""A primitive 2^S-th root of unity."""


def sqrt_tonelli_shanks(value: Fp, t_minus_1_over_2: "int | Iterable[int]") -> Fp:
    """Square root by Tonelli-Shanks, given (T - 1) / 2 as an int or four limbs.

    Raises ValueError when ``value`` is not a square.
    """
    if isinstance(t_minus_1_over_2, int):
        exponent = t_minus_1_over_2
    else:
        exponent = _limbs_to_int(t_minus_1_over_2)

    w = value.pow(exponent)
    v = S
    x = w * value
    b = x * w
    z = ROOT_OF_UNITY

    for max_v in range(S, 0, -1):
        k = 1
        tmp = b.square()
        j_less_than_v = True

        for j in range(2, max_v):
            tmp_is_one = tmp == ONE
            squared = (z if tmp_is_one else tmp).square()
            new_z = squared if tmp_is_one else z
            if not tmp_is_one:
                tmp = squared
                k = j
            j_less_than_v = j_less_than_v and j != v
            if j_less_than_v:
                z = new_z

        if b != ONE:
            x = x * z
        z = z.square()
        b = b * z
        v = k

    if x * x != value:
        raise ValueError("value is not a quadratic residue")
    return x