"""
Unit tests for predicate combinators.
"""

from mathsets import NATURALS
from mathsets.predicates import all_of, any_of, iff, implies, negate


def is_even(n):
    return n % 2 == 0


def is_small(n):
    return n < 10


class TestCombinators:
    def test_all_of(self):
        check = all_of(is_even, is_small)
        assert check(4)
        assert not check(5)
        assert not check(12)
        assert all_of()(7)

    def test_any_of(self):
        check = any_of(is_even, is_small)
        assert check(3)
        assert check(12)
        assert not check(13)
        assert not any_of()(7)

    def test_negate(self):
        assert negate(is_even)(3)
        assert not negate(is_even)(2)

    def test_implies(self):
        check = implies(is_small, is_even)
        assert check(4)
        assert check(13)
        assert not check(3)

    def test_iff(self):
        check = iff(is_small, is_even)
        assert check(4)
        assert check(13)
        assert not check(12)

    def test_filter_with_combinator(self):
        evens_below_ten = NATURALS.filter(all_of(is_even, is_small))
        assert evens_below_ten.take(5) == [0, 2, 4, 6, 8]


class TestPackageSubmodules:
    def test_helpers_reachable_from_package(self):
        import mathsets

        assert mathsets.predicates.negate is negate
        assert callable(mathsets.laws.same_membership)
        assert callable(mathsets.paradoxes.cantor)
