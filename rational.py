"""
Exact rational numbers for the fold checker.

Values are (numerator, denominator) pairs of Python ints. Every arithmetic
result is reduced by the gcd, except that a zero numerator keeps whatever
denominator it came with. Equality is structural, so ``Rational(2, 4)`` and
``Rational(1, 2)`` differ until the former is reduced.

The denominator is always positive: a negative one is folded into the
numerator at construction, and a zero one raises ``ZeroDivisionError``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

# One gcd division is already enough; the second pass never triggers.
MAX_REDUCTIONS = 2


@dataclass(frozen=True)
class Rational:
    n: int
    d: int = 1

    def __post_init__(self) -> None:
        if self.d == 0:
            raise ZeroDivisionError(f"zero denominator in {self.n}/0")
        if self.d < 0:
            object.__setattr__(self, "n", -self.n)
            object.__setattr__(self, "d", -self.d)

    @classmethod
    def parse(cls, text: str) -> Rational:
        """Parse ``"n"`` or ``"n/d"`` into a reduced value."""
        parts = text.strip().split("/")
        if len(parts) > 2:
            raise ValueError(f"not a rational number: {text!r}")
        n = int(parts[0])
        d = int(parts[1]) if len(parts) == 2 else 1
        return cls(n, d).reduce()

    def reduce(self) -> Rational:
        if self.n == 0:
            return self
        n, d = self.n, self.d
        for _ in range(MAX_REDUCTIONS):
            g = math.gcd(n, d)
            if g == 1:
                break
            n //= g
            d //= g
        return Rational(n, d)

    def is_zero(self) -> bool:
        return self.n == 0

    def invert(self) -> Rational:
        return Rational(self.d, self.n)

    # Comparisons against plain integers; valid because d > 0.
    def ge_int(self, k: int) -> bool:
        return self.n >= k * self.d

    def le_int(self, k: int) -> bool:
        return self.n <= k * self.d

    def lt_int(self, k: int) -> bool:
        return self.n < k * self.d

    def __add__(self, other: RationalLike) -> Rational:
        o = as_rational(other)
        return Rational(self.n * o.d + o.n * self.d, self.d * o.d).reduce()

    def __sub__(self, other: RationalLike) -> Rational:
        o = as_rational(other)
        return Rational(self.n * o.d - o.n * self.d, self.d * o.d).reduce()

    def __mul__(self, other: RationalLike) -> Rational:
        o = as_rational(other)
        return Rational(self.n * o.n, self.d * o.d).reduce()

    def __truediv__(self, other: RationalLike) -> Rational:
        return self * as_rational(other).invert()

    def __radd__(self, other: RationalLike) -> Rational:
        return as_rational(other) + self

    def __rsub__(self, other: RationalLike) -> Rational:
        return as_rational(other) - self

    def __rmul__(self, other: RationalLike) -> Rational:
        return as_rational(other) * self

    def __rtruediv__(self, other: RationalLike) -> Rational:
        return as_rational(other) / self

    def __neg__(self) -> Rational:
        return self * Rational(-1, 1)

    def __abs__(self) -> Rational:
        return Rational(abs(self.n), self.d)

    def __float__(self) -> float:
        # Plotting only. Int true division is correctly rounded.
        return self.n / self.d

    def __str__(self) -> str:
        if self.d == 1:
            return str(self.n)
        return f"{self.n}/{self.d}"


RationalLike = Union[Rational, int]

ZERO = Rational(0, 1)
ONE = Rational(1, 1)
HALF = Rational(1, 2)


def as_rational(value: Union[RationalLike, str]) -> Rational:
    """Coerce ints and ``"n/d"`` strings; Rationals pass through untouched."""
    if isinstance(value, Rational):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not a rational number")
    if isinstance(value, int):
        return Rational(value, 1)
    if isinstance(value, str):
        return Rational.parse(value)
    raise TypeError(f"cannot convert {type(value).__name__} to Rational")
