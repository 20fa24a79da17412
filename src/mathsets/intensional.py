"""
Predicate-defined sets (Separation).

An IntensionalSet is a domain plus a membership predicate. Nothing is
computed at construction; enumeration filters the domain lazily, and a
finite domain is materialized at most once.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from mathsets.base import MathSet
from mathsets.cardinality import UNKNOWN, Cardinality
from mathsets.errors import MaterializationError
from mathsets.extensional import ExtensionalSet

logger = logging.getLogger(__name__)

T = TypeVar("T")


class IntensionalSet(MathSet[T]):
    """
    The set { x ∈ domain | predicate(x) }.

    The domain is referenced, not copied. The predicate must be pure, so
    the single materialization cache never needs invalidating.
    """

    def __init__(self, domain: MathSet[T], predicate: Callable[[T], bool]) -> None:
        self._domain = domain
        self._predicate = predicate
        self._cache: ExtensionalSet[T] | None = None
        self._cache_lock = threading.Lock()

    @property
    def domain(self) -> MathSet[T]:
        return self._domain

    @property
    def predicate(self) -> Callable[[T], bool]:
        return self._predicate

    @property
    def cheap_membership(self) -> bool:  # type: ignore[override]
        return self._domain.cheap_membership

    def contains(self, element: Any) -> bool:
        return self._domain.contains(element) and bool(self._predicate(element))

    def elements(self) -> Iterator[T]:
        # Always walk the domain so the domain's order is kept.
        return filter(self._predicate, self._domain.elements())

    @property
    def cardinality(self) -> Cardinality:
        if self._domain.cardinality.is_finite():
            return self.materialize().cardinality
        return UNKNOWN

    def materialize(self) -> ExtensionalSet[T]:
        """
        Collect the members of a finite domain, once.

        Raises:
            MaterializationError: If the domain is not finite. No partial
                enumeration is attempted.
        """
        cached = self._cache
        if cached is not None:
            return cached

        domain_card = self._domain.cardinality
        if not domain_card.is_finite():
            raise MaterializationError(
                f"cannot materialize {self!r}: domain cardinality is {domain_card}"
            )

        with self._cache_lock:
            if self._cache is None:
                self._cache = ExtensionalSet(
                    filter(self._predicate, self._domain.elements())
                )
                logger.debug(
                    f"Materialized {self!r} from a domain of {domain_card} elements "
                    f"into {self._cache.cardinality} elements"
                )
            return self._cache

    def __repr__(self) -> str:
        name = getattr(self._predicate, "__name__", "predicate")
        return f"IntensionalSet({self._domain!r}, {name})"
