"""Exact fractions over Python integers."""

from __future__ import annotations

from math import gcd
from typing import Union

from ..errors import DivideByZero

RationalLike = Union["BigRational", int]


class BigRational:
    """Immutable fraction kept in lowest terms with a positive denominator.

    Every arithmetic operation returns a new reduced instance, so two values
    are equal exactly when their numerators and denominators match.
    """

    __slots__ = ("_num", "_den")

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        numerator = int(numerator)
        denominator = int(denominator)
        if denominator == 0:
            raise DivideByZero(f"Zero denominator for numerator {numerator}.")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        g = gcd(abs(numerator), denominator)
        self._num = numerator // g
        self._den = denominator // g

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    @property
    def is_integer(self) -> bool:
        return self._den == 1

    @staticmethod
    def _coerce(other: RationalLike) -> "BigRational":
        if isinstance(other, BigRational):
            return other
        if isinstance(other, int):
            return BigRational(other)
        return NotImplemented

    def __add__(self, other: RationalLike) -> "BigRational":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return BigRational(self._num * o._den + o._num * self._den, self._den * o._den)

    __radd__ = __add__

    def __sub__(self, other: RationalLike) -> "BigRational":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return BigRational(self._num * o._den - o._num * self._den, self._den * o._den)

    def __rsub__(self, other: RationalLike) -> "BigRational":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return o - self

    def __mul__(self, other: RationalLike) -> "BigRational":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return BigRational(self._num * o._num, self._den * o._den)

    __rmul__ = __mul__

    def __truediv__(self, other: RationalLike) -> "BigRational":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        if o._num == 0:
            raise DivideByZero(f"Division of {self} by zero.")
        return BigRational(self._num * o._den, self._den * o._num)

    def __rtruediv__(self, other: RationalLike) -> "BigRational":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return o / self

    def __neg__(self) -> "BigRational":
        return BigRational(-self._num, self._den)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, int):
            return self._den == 1 and self._num == other
        if not isinstance(other, BigRational):
            return NotImplemented
        return self._num == other._num and self._den == other._den

    def __hash__(self) -> int:
        if self._den == 1:
            return hash(self._num)
        return hash((self._num, self._den))

    def __str__(self) -> str:
        if self._den == 1:
            return str(self._num)
        return f"{self._num}/{self._den}"

    def __repr__(self) -> str:
        return f"BigRational({self._num}, {self._den})"


ZERO = BigRational(0)
ONE = BigRational(1)

__all__ = ["BigRational", "ZERO", "ONE"]
