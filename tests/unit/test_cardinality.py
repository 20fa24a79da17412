"""
Unit tests for cardinality classes.
"""

import pytest

from mathsets.cardinality import (
    COUNTABLY_INFINITE,
    EMPTY,
    UNCOUNTABLE,
    UNKNOWN,
    Cardinality,
    CardinalityKind,
)


class TestFiniteCardinality:
    """Tests for finite cardinalities."""

    def test_from_count(self):
        """Test building a finite cardinality from a count."""
        card = Cardinality.finite(3)
        assert card.kind is CardinalityKind.FINITE
        assert card.count == 3
        assert card.is_finite()

    def test_zero_is_allowed(self):
        """Test that the empty set has a finite cardinality."""
        assert EMPTY.is_finite()
        assert EMPTY.count == 0

    def test_arbitrary_precision(self):
        """Test that counts are not bounded by machine words."""
        assert Cardinality.finite(2**100).count == 2**100

    def test_negative_count_rejected(self):
        """Test that counts below zero are rejected."""
        with pytest.raises(ValueError):
            Cardinality.finite(-1)

    def test_missing_count_rejected(self):
        """Test that a finite kind requires a count."""
        with pytest.raises(ValueError):
            Cardinality(CardinalityKind.FINITE)

    def test_equality_by_count(self):
        """Test structural equality."""
        assert Cardinality.finite(4) == Cardinality.finite(4)
        assert Cardinality.finite(4) != Cardinality.finite(5)


class TestInfiniteCardinality:
    """Tests for the infinite and unknown tags."""

    def test_countably_infinite(self):
        assert not COUNTABLY_INFINITE.is_finite()
        assert COUNTABLY_INFINITE.is_infinite()
        assert COUNTABLY_INFINITE.is_countable()

    def test_uncountable(self):
        assert UNCOUNTABLE.is_infinite()
        assert not UNCOUNTABLE.is_countable()

    def test_unknown(self):
        """Test that unknown is neither finite nor infinite."""
        assert not UNKNOWN.is_finite()
        assert not UNKNOWN.is_infinite()
        assert not UNKNOWN.is_known()

    def test_count_rejected_for_infinite(self):
        """Test that only finite cardinalities carry a count."""
        with pytest.raises(ValueError):
            Cardinality(CardinalityKind.UNCOUNTABLE, 5)

    def test_string_forms(self):
        """Test display strings."""
        assert str(Cardinality.finite(7)) == "7"
        assert str(COUNTABLY_INFINITE) == "ℵ₀"
        assert str(UNCOUNTABLE) == "Uncountable"
        assert str(UNKNOWN) == "?"
