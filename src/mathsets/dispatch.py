"""
Representation dispatch for union and intersection.

The result representation is picked from a table keyed by the operands'
representation families. Every entry returns a set with the same members;
only cost differs. No entry ever materializes an operand whose
cardinality is not finite.

Union:
    EXTENSIONAL x EXTENSIONAL -> merged ExtensionalSet (bitwise OR for two
                                 BitVectorSets)
    EXTENSIONAL x LAZY        -> merged ExtensionalSet when the lazy side is
                                 finite and cheap to test, else UnionView
    LAZY x LAZY               -> UnionView
    any x UNIVERSAL           -> UnionView

Intersection:
    EXTENSIONAL x EXTENSIONAL -> filtered ExtensionalSet (bitwise AND for two
                                 BitVectorSets)
    EXTENSIONAL x LAZY        -> filtered ExtensionalSet when the lazy side is
                                 cheap to test, else IntersectionView
    LAZY x LAZY               -> IntersectionView
    any x UNIVERSAL           -> IntersectionView

An explicit empty operand short-circuits both operations.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from mathsets.base import MathSet, Representation
from mathsets.bitvector import BitVectorSet
from mathsets.extensional import ExtensionalSet, empty_set
from mathsets.views import IntersectionView, UnionView

logger = logging.getLogger(__name__)

T = TypeVar("T")

Rule = Callable[[MathSet[T], MathSet[T]], MathSet[T]]

EXT = Representation.EXTENSIONAL
LAZY = Representation.LAZY
UNIVERSAL = Representation.UNIVERSAL


def _is_explicit_empty(s: MathSet[T]) -> bool:
    return s.representation is EXT and s.cardinality.count == 0


# =============================================================================
# Union rules
# =============================================================================


def _merge(left: MathSet[T], right: MathSet[T]) -> MathSet[T]:
    if isinstance(left, BitVectorSet) and isinstance(right, BitVectorSet):
        return left.bitwise_union(right)
    return ExtensionalSet(left._element_set() | right._element_set())


def _merge_if_finite(explicit: MathSet[T], lazy: MathSet[T]) -> MathSet[T] | None:
    if lazy.cheap_membership and lazy.cardinality.is_finite():
        return ExtensionalSet(explicit._element_set() | lazy.materialize()._element_set())
    return None


def _union_explicit_lazy(left: MathSet[T], right: MathSet[T]) -> MathSet[T]:
    merged = _merge_if_finite(left, right)
    return merged if merged is not None else UnionView(left, right)


def _union_lazy_explicit(left: MathSet[T], right: MathSet[T]) -> MathSet[T]:
    merged = _merge_if_finite(right, left)
    return merged if merged is not None else UnionView(left, right)


def _union_view(left: MathSet[T], right: MathSet[T]) -> MathSet[T]:
    return UnionView(left, right)


UNION_RULES: dict[tuple[Representation, Representation], Rule] = {
    (EXT, EXT): _merge,
    (EXT, LAZY): _union_explicit_lazy,
    (LAZY, EXT): _union_lazy_explicit,
    (LAZY, LAZY): _union_view,
    (EXT, UNIVERSAL): _union_view,
    (UNIVERSAL, EXT): _union_view,
    (LAZY, UNIVERSAL): _union_view,
    (UNIVERSAL, LAZY): _union_view,
    (UNIVERSAL, UNIVERSAL): _union_view,
}


# =============================================================================
# Intersection rules
# =============================================================================


def _filter_explicit(explicit: MathSet[T], other: MathSet[T]) -> ExtensionalSet[T]:
    return ExtensionalSet(x for x in explicit._element_set() if other.contains(x))


def _intersect_explicit(left: MathSet[T], right: MathSet[T]) -> MathSet[T]:
    if isinstance(left, BitVectorSet) and isinstance(right, BitVectorSet):
        return left.bitwise_intersection(right)
    left_elems = left._element_set()
    right_elems = right._element_set()
    smaller, larger = sorted((left_elems, right_elems), key=len)
    return ExtensionalSet(x for x in smaller if x in larger)


def _intersect_explicit_lazy(left: MathSet[T], right: MathSet[T]) -> MathSet[T]:
    if right.cheap_membership:
        return _filter_explicit(left, right)
    return IntersectionView(left, right)


def _intersect_lazy_explicit(left: MathSet[T], right: MathSet[T]) -> MathSet[T]:
    if left.cheap_membership:
        return _filter_explicit(right, left)
    return IntersectionView(left, right)


def _intersection_view(left: MathSet[T], right: MathSet[T]) -> MathSet[T]:
    return IntersectionView(left, right)


INTERSECTION_RULES: dict[tuple[Representation, Representation], Rule] = {
    (EXT, EXT): _intersect_explicit,
    (EXT, LAZY): _intersect_explicit_lazy,
    (LAZY, EXT): _intersect_lazy_explicit,
    (LAZY, LAZY): _intersection_view,
    (EXT, UNIVERSAL): _intersection_view,
    (UNIVERSAL, EXT): _intersection_view,
    (LAZY, UNIVERSAL): _intersection_view,
    (UNIVERSAL, LAZY): _intersection_view,
    (UNIVERSAL, UNIVERSAL): _intersection_view,
}


# =============================================================================
# Entry points
# =============================================================================


def union(left: MathSet[T], right: MathSet[T]) -> MathSet[T]:
    """Return left ∪ right in the cheapest exact representation."""
    if _is_explicit_empty(left):
        return right
    if _is_explicit_empty(right):
        return left
    rule = UNION_RULES[(left.representation, right.representation)]
    result = rule(left, right)
    logger.debug(
        f"union {type(left).__name__} x {type(right).__name__} -> {type(result).__name__}"
    )
    return result


def intersect(left: MathSet[T], right: MathSet[T]) -> MathSet[T]:
    """Return left ∩ right in the cheapest exact representation."""
    if _is_explicit_empty(left) or _is_explicit_empty(right):
        return empty_set()
    rule = INTERSECTION_RULES[(left.representation, right.representation)]
    result = rule(left, right)
    logger.debug(
        f"intersect {type(left).__name__} x {type(right).__name__} -> {type(result).__name__}"
    )
    return result
