"""
Set-algebra law checks.

Each check compares two constructions by membership over a finite
universe. Sets are equal by extension, so agreement on every element of
the universe is what the law asserts there.
"""

from __future__ import annotations

from typing import TypeVar

from mathsets.base import MathSet
from mathsets.errors import PreconditionError
from mathsets.extensional import empty_set

T = TypeVar("T")


def same_membership(left: MathSet[T], right: MathSet[T], universe: MathSet[T]) -> bool:
    """
    Check that left and right agree on every member of universe.

    Raises:
        PreconditionError: If the universe is not finite
    """
    card = universe.cardinality
    if not card.is_finite():
        raise PreconditionError(f"law checks need a finite universe, got cardinality {card}")
    return all(left.contains(x) == right.contains(x) for x in universe.elements())


def is_union_commutative(a: MathSet[T], b: MathSet[T], universe: MathSet[T]) -> bool:
    """A ∪ B = B ∪ A."""
    return same_membership(a.union(b), b.union(a), universe)


def is_intersection_commutative(a: MathSet[T], b: MathSet[T], universe: MathSet[T]) -> bool:
    """A ∩ B = B ∩ A."""
    return same_membership(a.intersect(b), b.intersect(a), universe)


def is_union_associative(
    a: MathSet[T], b: MathSet[T], c: MathSet[T], universe: MathSet[T]
) -> bool:
    """(A ∪ B) ∪ C = A ∪ (B ∪ C)."""
    return same_membership(a.union(b).union(c), a.union(b.union(c)), universe)


def is_de_morgan_for_union(a: MathSet[T], b: MathSet[T], universe: MathSet[T]) -> bool:
    """(A ∪ B)ᶜ = Aᶜ ∩ Bᶜ relative to universe."""
    return same_membership(
        a.union(b).complement(universe),
        a.complement(universe).intersect(b.complement(universe)),
        universe,
    )


def is_idempotent_union(a: MathSet[T], universe: MathSet[T]) -> bool:
    """A ∪ A = A."""
    return same_membership(a.union(a), a, universe)


def has_identity_union(a: MathSet[T], universe: MathSet[T]) -> bool:
    """A ∪ ∅ = A."""
    return same_membership(a.union(empty_set()), a, universe)


def has_absorption(a: MathSet[T], b: MathSet[T], universe: MathSet[T]) -> bool:
    """A ∪ (A ∩ B) = A."""
    return same_membership(a.union(a.intersect(b)), a, universe)


def has_involution(a: MathSet[T], universe: MathSet[T]) -> bool:
    """(Aᶜ)ᶜ = A relative to universe."""
    return same_membership(a.complement(universe).complement(universe), a, universe)


def extensionality_holds(a: MathSet[T], b: MathSet[T], universe: MathSet[T]) -> bool:
    """
    If A and B agree on the universe, then A ⊆ B and B ⊆ A.

    Both sets must be finite for the subset checks.
    """
    if not same_membership(a, b, universe):
        return True
    return a.is_subset_of(b) and b.is_subset_of(a)
