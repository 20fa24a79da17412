"""
Image sets (Replacement).

A MappedSet is the image of a source set under a function. Enumeration
maps and deduplicates as it goes; membership is an existential scan over
the source, so it costs O(|source|) and never ends for an infinite source
that lacks a preimage.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

from mathsets.base import MathSet
from mathsets.cardinality import UNKNOWN, Cardinality
from mathsets.errors import MaterializationError
from mathsets.extensional import ExtensionalSet

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


def _distinct_images(source: Iterator[T], func: Callable[[T], U]) -> Iterator[U]:
    seen: set[U] = set()
    for item in source:
        image = func(item)
        if image not in seen:
            seen.add(image)
            yield image


class MappedSet(MathSet[U], Generic[T, U]):
    """The set { func(x) | x ∈ source }."""

    cheap_membership = False

    def __init__(self, source: MathSet[T], func: Callable[[T], U]) -> None:
        self._source = source
        self._func = func

    @property
    def source(self) -> MathSet[T]:
        return self._source

    def contains(self, element: Any) -> bool:
        return any(self._func(x) == element for x in self._source.elements())

    def elements(self) -> Iterator[U]:
        return _distinct_images(self._source.elements(), self._func)

    @property
    def cardinality(self) -> Cardinality:
        # Collisions can shrink the image, so the finite count is measured.
        if self._source.cardinality.is_finite():
            return Cardinality.finite(sum(1 for _ in self.elements()))
        return UNKNOWN

    def materialize(self) -> ExtensionalSet[U]:
        """
        Raises:
            MaterializationError: If the source is not finite
        """
        source_card = self._source.cardinality
        if not source_card.is_finite():
            raise MaterializationError(
                f"cannot materialize {self!r}: source cardinality is {source_card}"
            )
        result = ExtensionalSet(map(self._func, self._source.elements()))
        logger.debug(f"Materialized {self!r} into {result.cardinality} elements")
        return result

    def __repr__(self) -> str:
        name = getattr(self._func, "__name__", "func")
        return f"MappedSet({self._source!r}, {name})"
