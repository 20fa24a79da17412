"""
Enumerations of the countable number sets.

Each function returns an infinite generator that reaches every member
after finitely many steps, i.e. a bijection with the naturals. Stop
pulling (or use itertools.islice) to truncate.
"""

from __future__ import annotations

from collections.abc import Iterator
from fractions import Fraction
from math import gcd


def naturals(start: int = 0) -> Iterator[int]:
    """
    Yield start, start + 1, start + 2, ...

    Example:
        naturals() -> 0, 1, 2, 3, ...
    """
    if start < 0:
        raise ValueError(f"naturals start at 0 or above, got {start}")
    current = start
    while True:
        yield current
        current += 1


def integers() -> Iterator[int]:
    """
    Yield every integer in zigzag order.

    Example:
        integers() -> 0, 1, -1, 2, -2, 3, -3, ...
    """
    yield 0
    n = 1
    while True:
        yield n
        yield -n
        n += 1


def rationals() -> Iterator[Fraction]:
    """
    Yield every rational number exactly once.

    Reduced fractions n/d are visited by increasing diagonal n + d, each
    followed by its negation.

    Example:
        rationals() -> 0, 1, -1, 2, -2, 1/2, -1/2, 3, -3, 1/3, -1/3, ...
    """
    yield Fraction(0)
    diagonal = 2
    while True:
        for denominator in range(1, diagonal):
            numerator = diagonal - denominator
            if gcd(numerator, denominator) != 1:
                continue
            positive = Fraction(numerator, denominator)
            yield positive
            yield -positive
        diagonal += 1
