"""A simple unreduced integer fraction."""

from __future__ import annotations

import math

from .numerical import get_gcd


def _as_fraction(value):
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int):
        return Fraction(value)
    return None


class Fraction:
    """numerator/denominator pair; results are not reduced automatically."""

    __hash__ = None

    def __init__(self, num=0, den=1):
        self.num = num
        self.den = den

    def reduce(self) -> "Fraction":
        """Divide both parts by their common divisor in place."""
        gcd = get_gcd(self.num, self.den)
        if gcd > 1:
            self.num //= gcd
            self.den //= gcd
        return self

    def value(self) -> float:
        if self.den == 0:
            if self.num == 0:
                return math.nan
            return math.inf if self.num > 0 else -math.inf
        return self.num / self.den

    def __eq__(self, other):
        o = _as_fraction(other)
        if o is None:
            return NotImplemented
        if self.den == o.den:
            return self.num == o.num
        return self.num * o.den == o.num * self.den

    def __gt__(self, other):
        o = _as_fraction(other)
        if o is None:
            return NotImplemented
        if self.den == o.den:
            return self.num > o.num
        if self.num == o.num:
            return o.den > self.den
        return self.num * o.den > o.num * self.den

    def __lt__(self, other):
        o = _as_fraction(other)
        if o is None:
            return NotImplemented
        return o > self

    def __ge__(self, other):
        o = _as_fraction(other)
        if o is None:
            return NotImplemented
        return not (o > self)

    def __le__(self, other):
        o = _as_fraction(other)
        if o is None:
            return NotImplemented
        return not (self > o)

    def __add__(self, other):
        o = _as_fraction(other)
        if o is None:
            return NotImplemented
        if self.den == o.den:
            return Fraction(self.num + o.num, self.den)
        return Fraction(self.num * o.den + self.den * o.num, self.den * o.den)

    def __sub__(self, other):
        o = _as_fraction(other)
        if o is None:
            return NotImplemented
        if self.den == o.den:
            return Fraction(self.num - o.num, self.den)
        return Fraction(self.num * o.den - self.den * o.num, self.den * o.den)

    def __mul__(self, other):
        o = _as_fraction(other)
        if o is None:
            return NotImplemented
        return Fraction(self.num * o.num, self.den * o.den)

    def __truediv__(self, other):
        o = _as_fraction(other)
        if o is None:
            return NotImplemented
        return Fraction(self.num * o.den, self.den * o.num)

    def __radd__(self, other):
        o = _as_fraction(other)
        return NotImplemented if o is None else o + self

    def __rsub__(self, other):
        o = _as_fraction(other)
        return NotImplemented if o is None else o - self

    def __rmul__(self, other):
        o = _as_fraction(other)
        return NotImplemented if o is None else o * self

    def __rtruediv__(self, other):
        o = _as_fraction(other)
        return NotImplemented if o is None else o / self

    def __str__(self) -> str:
        return f"{self.num}/{self.den}"

    def __repr__(self) -> str:
        return f"Fraction({self.num}, {self.den})"