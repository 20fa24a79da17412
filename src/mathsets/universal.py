"""
The universal number sets.

Each set is a stateless singleton whose membership is decided by the
element's type alone. The countable ones enumerate through the generators
module; the uncountable ones refuse enumeration outright.

Element types are Python's numeric tower: int for N and Z, int or
fractions.Fraction for Q, numbers.Real for R, numbers.Complex for C.
bool is never a number here.
"""

from __future__ import annotations

import cmath
import math
import numbers
from collections.abc import Callable, Iterator
from typing import Any, NoReturn

from mathsets import generators
from mathsets.base import MathSet, Representation
from mathsets.cardinality import COUNTABLY_INFINITE, UNCOUNTABLE, Cardinality
from mathsets.errors import EnumerationError, MaterializationError


class UniversalSet(MathSet[Any]):
    """
    Base class for the infinite number sets.

    Args:
        name: Display name, e.g. "ℕ"
        cardinality: The set's size class
        member_test: Total membership test on arbitrary values
    """

    representation = Representation.UNIVERSAL

    def __init__(
        self,
        name: str,
        cardinality: Cardinality,
        member_test: Callable[[Any], bool],
    ) -> None:
        self._name = name
        self._cardinality = cardinality
        self._member_test = member_test

    @property
    def name(self) -> str:
        return self._name

    @property
    def cardinality(self) -> Cardinality:
        return self._cardinality

    def contains(self, element: Any) -> bool:
        return self._member_test(element)

    def materialize(self) -> NoReturn:
        raise MaterializationError(f"{self._name} is infinite and cannot be materialized")

    def __repr__(self) -> str:
        return self._name


class CountableUniversalSet(UniversalSet):
    """An infinite set enumerated by a generator."""

    def __init__(
        self,
        name: str,
        member_test: Callable[[Any], bool],
        generator: Callable[[], Iterator[Any]],
    ) -> None:
        super().__init__(name, COUNTABLY_INFINITE, member_test)
        self._generator = generator

    def elements(self) -> Iterator[Any]:
        return self._generator()


class UncountableUniversalSet(UniversalSet):
    """An uncountable set: membership works, enumeration does not."""

    def __init__(self, name: str, member_test: Callable[[Any], bool]) -> None:
        super().__init__(name, UNCOUNTABLE, member_test)

    def elements(self) -> NoReturn:
        raise EnumerationError(f"{self._name} is uncountable and cannot be enumerated")


# =============================================================================
# Membership tests
# =============================================================================


def _is_integer(x: Any) -> bool:
    return isinstance(x, numbers.Integral) and not isinstance(x, bool)


def _is_natural(x: Any) -> bool:
    return _is_integer(x) and x >= 0


def _is_rational(x: Any) -> bool:
    return isinstance(x, numbers.Rational) and not isinstance(x, bool)


def _is_extended_real(x: Any) -> bool:
    if not isinstance(x, numbers.Real) or isinstance(x, bool):
        return False
    # Rationals are always finite; math.isnan would overflow on huge ints.
    return isinstance(x, numbers.Rational) or not math.isnan(x)


def _is_real(x: Any) -> bool:
    return _is_extended_real(x) and (isinstance(x, numbers.Rational) or math.isfinite(x))


def _is_irrational(x: Any) -> bool:
    # Binary floats stand in for irrational values such as math.pi.
    return _is_real(x) and not isinstance(x, numbers.Rational)


def _is_complex(x: Any) -> bool:
    if isinstance(x, numbers.Real):
        return _is_real(x)
    return isinstance(x, numbers.Complex) and cmath.isfinite(x)


def _is_imaginary(x: Any) -> bool:
    return _is_complex(x) and not isinstance(x, numbers.Real) and x.real == 0


# =============================================================================
# Singletons
# =============================================================================

NATURALS = CountableUniversalSet("ℕ", _is_natural, generators.naturals)
INTEGERS = CountableUniversalSet("ℤ", _is_integer, generators.integers)
RATIONALS = CountableUniversalSet("ℚ", _is_rational, generators.rationals)

REALS = UncountableUniversalSet("ℝ", _is_real)
IRRATIONALS = UncountableUniversalSet("ℝ∖ℚ", _is_irrational)
IMAGINARIES = UncountableUniversalSet("iℝ", _is_imaginary)
COMPLEXES = UncountableUniversalSet("ℂ", _is_complex)
EXTENDED_REALS = UncountableUniversalSet("ℝ̄", _is_extended_real)
