"""
Lazy union and intersection views.

Views keep references to their two operands and combine them on demand.
They never copy an operand and never enumerate one eagerly.

Note:
    Fully enumerating an infinite UnionView keeps every yielded element in a
    "seen" set for deduplication, so memory grows with the consumed prefix.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar

from mathsets.base import MathSet
from mathsets.cardinality import (
    COUNTABLY_INFINITE,
    UNCOUNTABLE,
    UNKNOWN,
    Cardinality,
    CardinalityKind,
)
from mathsets.errors import MaterializationError
from mathsets.extensional import ExtensionalSet

T = TypeVar("T")

_EXHAUSTED = object()

_COUNTABLE_KINDS = {CardinalityKind.FINITE, CardinalityKind.COUNTABLY_INFINITE}

# Preference when neither intersection operand is finite; lower scans first.
_SCAN_RANK = {
    CardinalityKind.COUNTABLY_INFINITE: 0,
    CardinalityKind.UNKNOWN: 1,
    CardinalityKind.UNCOUNTABLE: 2,
}


def _interleave_distinct(left: Iterator[T], right: Iterator[T]) -> Iterator[T]:
    seen: set[T] = set()
    active = [left, right]
    while active:
        for iterator in list(active):
            item = next(iterator, _EXHAUSTED)
            if item is _EXHAUSTED:
                active.remove(iterator)
            elif item not in seen:
                seen.add(item)
                yield item


class UnionView(MathSet[T]):
    """left ∪ right, evaluated lazily."""

    def __init__(self, left: MathSet[T], right: MathSet[T]) -> None:
        self._left = left
        self._right = right

    @property
    def operands(self) -> tuple[MathSet[T], MathSet[T]]:
        return (self._left, self._right)

    @property
    def cheap_membership(self) -> bool:  # type: ignore[override]
        return self._left.cheap_membership and self._right.cheap_membership

    def contains(self, element: Any) -> bool:
        return self._left.contains(element) or self._right.contains(element)

    def elements(self) -> Iterator[T]:
        """Alternate between the operands, yielding each distinct member once."""
        return _interleave_distinct(self._left.elements(), self._right.elements())

    @property
    def cardinality(self) -> Cardinality:
        left_card = self._left.cardinality
        right_card = self._right.cardinality
        if left_card.is_finite() and right_card.is_finite():
            return Cardinality.finite(sum(1 for _ in self.elements()))
        kinds = {left_card.kind, right_card.kind}
        if CardinalityKind.UNCOUNTABLE in kinds:
            return UNCOUNTABLE
        if kinds <= _COUNTABLE_KINDS:
            return COUNTABLY_INFINITE
        # An unknown side may hide an uncountable domain.
        return UNKNOWN

    def materialize(self) -> ExtensionalSet[T]:
        """
        Raises:
            MaterializationError: Unless both operands are finite
        """
        if not (self._left.cardinality.is_finite() and self._right.cardinality.is_finite()):
            raise MaterializationError(
                f"cannot materialize {self!r}: both operands must be finite"
            )
        return ExtensionalSet(self.elements())

    def __repr__(self) -> str:
        return f"UnionView({self._left!r}, {self._right!r})"


class IntersectionView(MathSet[T]):
    """
    left ∩ right, evaluated lazily.

    Enumeration always scans a finite operand when there is one (left first)
    and tests membership against the other side, never the reverse.
    """

    def __init__(self, left: MathSet[T], right: MathSet[T]) -> None:
        self._left = left
        self._right = right

    @property
    def operands(self) -> tuple[MathSet[T], MathSet[T]]:
        return (self._left, self._right)

    @property
    def cheap_membership(self) -> bool:  # type: ignore[override]
        return self._left.cheap_membership and self._right.cheap_membership

    def contains(self, element: Any) -> bool:
        return self._left.contains(element) and self._right.contains(element)

    def _scan_order(self) -> tuple[MathSet[T], MathSet[T]]:
        """Return (scanned, tested) operands."""
        left_card = self._left.cardinality
        right_card = self._right.cardinality
        if left_card.is_finite():
            return self._left, self._right
        if right_card.is_finite():
            return self._right, self._left
        # Neither is finite: scan the side most likely to enumerate, left on ties.
        if _SCAN_RANK[right_card.kind] < _SCAN_RANK[left_card.kind]:
            return self._right, self._left
        return self._left, self._right

    def elements(self) -> Iterator[T]:
        scanned, tested = self._scan_order()
        return filter(tested.contains, scanned.elements())

    @property
    def cardinality(self) -> Cardinality:
        if self._left.cardinality.is_finite() or self._right.cardinality.is_finite():
            return Cardinality.finite(sum(1 for _ in self.elements()))
        return UNKNOWN

    def materialize(self) -> ExtensionalSet[T]:
        """
        Raises:
            MaterializationError: If neither operand is finite
        """
        if not (self._left.cardinality.is_finite() or self._right.cardinality.is_finite()):
            raise MaterializationError(
                f"cannot materialize {self!r}: at least one operand must be finite"
            )
        return ExtensionalSet(self.elements())

    def __repr__(self) -> str:
        return f"IntersectionView({self._left!r}, {self._right!r})"
