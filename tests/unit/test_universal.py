"""
Unit tests for the universal number sets.
"""

import math
from fractions import Fraction

import pytest

from mathsets import (
    COMPLEXES,
    EXTENDED_REALS,
    IMAGINARIES,
    INTEGERS,
    IRRATIONALS,
    NATURALS,
    RATIONALS,
    REALS,
    EnumerationError,
    MaterializationError,
    math_set_of,
)
from mathsets.cardinality import COUNTABLY_INFINITE, UNCOUNTABLE

UNCOUNTABLE_SETS = [REALS, IRRATIONALS, IMAGINARIES, COMPLEXES, EXTENDED_REALS]
COUNTABLE_SETS = [NATURALS, INTEGERS, RATIONALS]


class TestCountableSets:
    """Tests for naturals, integers and rationals."""

    def test_cardinality(self):
        for s in COUNTABLE_SETS:
            assert s.cardinality == COUNTABLY_INFINITE

    def test_naturals_membership(self):
        assert 0 in NATURALS
        assert 10**30 in NATURALS
        assert -1 not in NATURALS
        assert 1.0 not in NATURALS
        assert True not in NATURALS

    def test_integers_membership(self):
        assert -7 in INTEGERS
        assert Fraction(1, 2) not in INTEGERS

    def test_rationals_membership(self):
        assert Fraction(-3, 4) in RATIONALS
        assert 5 in RATIONALS
        assert 0.5 not in RATIONALS

    def test_naturals_enumeration(self):
        assert NATURALS.take(5) == [0, 1, 2, 3, 4]

    def test_integers_zigzag(self):
        assert INTEGERS.take(5) == [0, 1, -1, 2, -2]

    def test_rationals_diagonal(self):
        expected = [0, 1, -1, 2, -2, Fraction(1, 2), Fraction(-1, 2), 3, -3]
        assert RATIONALS.take(9) == expected

    def test_enumerated_elements_are_members(self):
        for s in COUNTABLE_SETS:
            assert all(s.contains(x) for x in s.take(50))

    def test_materialize_raises(self):
        for s in COUNTABLE_SETS:
            with pytest.raises(MaterializationError):
                s.materialize()

    def test_independent_traversals(self):
        first = NATURALS.elements()
        second = NATURALS.elements()
        next(first)
        next(first)
        assert next(second) == 0


class TestUncountableSets:
    """Tests for reals, complexes and friends."""

    def test_cardinality(self):
        for s in UNCOUNTABLE_SETS:
            assert s.cardinality == UNCOUNTABLE

    def test_membership(self):
        assert 3 in REALS
        assert math.pi in IRRATIONALS
        assert 2j in IMAGINARIES
        assert complex(3, -5) in COMPLEXES
        assert math.inf in EXTENDED_REALS

    def test_non_members(self):
        assert math.inf not in REALS
        assert math.nan not in EXTENDED_REALS
        assert Fraction(1, 3) not in IRRATIONALS
        assert complex(1, 1) not in IMAGINARIES
        assert "3" not in REALS

    def test_enumeration_refused_immediately(self):
        for s in UNCOUNTABLE_SETS:
            with pytest.raises(EnumerationError):
                s.elements()

    def test_materialize_raises(self):
        for s in UNCOUNTABLE_SETS:
            with pytest.raises(MaterializationError):
                s.materialize()


class TestUniversalAlgebra:
    """Tests for algebra involving universal sets."""

    def test_union_with_finite(self):
        union = REALS | math_set_of(-1.0, 2.0)
        assert 999.0 in union

    def test_intersection_with_finite(self):
        intersection = REALS & math_set_of(-1.0, 2.0)
        assert -1.0 in intersection
        assert 5.0 not in intersection
        assert intersection.materialize() == math_set_of(-1.0, 2.0)

    def test_naturals_subset_of_integers_on_prefix(self):
        prefix = math_set_of(*NATURALS.take(20))
        assert prefix.is_subset_of(INTEGERS)

    def test_complement_within_integers(self):
        non_naturals = NATURALS.complement(INTEGERS)
        assert -3 in non_naturals
        assert 3 not in non_naturals
        assert non_naturals.take(3) == [-1, -2, -3]

    def test_identity_equality(self):
        assert NATURALS == NATURALS
        assert NATURALS != INTEGERS

    def test_repr(self):
        assert repr(NATURALS) == "ℕ"
