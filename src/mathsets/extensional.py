"""
Explicit finite sets.

ExtensionalSet is the hash-backed representation every materialization
ends in. Its contents are fixed at construction.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

from mathsets.base import MathSet, Representation
from mathsets.cardinality import Cardinality

T = TypeVar("T")


class ExtensionalSet(MathSet[T]):
    """
    A finite set given by listing its members.

    Duplicates in the input collapse; membership is a hash lookup.
    Equality and hashing follow the member set.
    """

    representation = Representation.EXTENSIONAL

    def __init__(self, elements: Iterable[T] = ()) -> None:
        self._elements: frozenset[T] = frozenset(elements)

    def contains(self, element: Any) -> bool:
        try:
            return element in self._elements
        except TypeError:
            # Unhashable values cannot be members.
            return False

    def elements(self) -> Iterator[T]:
        return iter(self._elements)

    @property
    def cardinality(self) -> Cardinality:
        return Cardinality.finite(len(self._elements))

    def materialize(self) -> ExtensionalSet[T]:
        return self

    def is_empty(self) -> bool:
        return not self._elements

    def _element_set(self) -> frozenset[T]:
        return self._elements

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ExtensionalSet):
            return self._elements == other._elements
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(self._elements)

    def __repr__(self) -> str:
        if not self._elements:
            return "ExtensionalSet({})"
        try:
            shown = sorted(self._elements)
        except TypeError:
            shown = list(self._elements)
        return f"ExtensionalSet({{{', '.join(repr(x) for x in shown)}}})"


_EMPTY: ExtensionalSet[Any] = ExtensionalSet()


def empty_set() -> ExtensionalSet[Any]:
    """Return the shared empty set."""
    return _EMPTY


def singleton(element: T) -> ExtensionalSet[T]:
    """Return the set {element}."""
    return ExtensionalSet((element,))


def math_set_of(*elements: T) -> ExtensionalSet[T]:
    """
    Build an explicit set from the arguments.

    Examples:
        >>> math_set_of(1, 2, 2, 3).cardinality.count
        3
    """
    return ExtensionalSet(elements)


def math_set_from(iterable: Iterable[T]) -> ExtensionalSet[T]:
    """
    Build an explicit set from a finite iterable.

    Examples:
        >>> 100 in math_set_from(range(1, 101))
        True
    """
    return ExtensionalSet(iterable)
