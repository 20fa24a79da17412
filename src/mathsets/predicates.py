"""
Predicate combinators for building filters.

Example:
    is_small_even = all_of(lambda n: n % 2 == 0, lambda n: n < 10)
    NATURALS.filter(is_small_even)
"""

from collections.abc import Callable
from typing import Any

Predicate = Callable[[Any], bool]


def all_of(*predicates: Predicate) -> Predicate:
    """Conjunction; true for no predicates."""
    return lambda value: all(p(value) for p in predicates)


def any_of(*predicates: Predicate) -> Predicate:
    """Disjunction; false for no predicates."""
    return lambda value: any(p(value) for p in predicates)


def negate(predicate: Predicate) -> Predicate:
    return lambda value: not predicate(value)


def implies(premise: Predicate, conclusion: Predicate) -> Predicate:
    """Material implication: not premise or conclusion."""
    return lambda value: (not premise(value)) or conclusion(value)


def iff(left: Predicate, right: Predicate) -> Predicate:
    return lambda value: bool(left(value)) == bool(right(value))
