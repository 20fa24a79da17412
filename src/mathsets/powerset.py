"""
Lazy power sets.

Subsets of an n-element explicit set are enumerated by counting a mask from
0 to 2^n - 1 and reading bit i as "element i is in the subset". Only the
current subset is ever held in memory.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, TypeVar

from mathsets.base import MathSet
from mathsets.cardinality import UNCOUNTABLE, UNKNOWN, Cardinality
from mathsets.config import get_config
from mathsets.errors import ErrorCode, MaterializationError, PreconditionError
from mathsets.extensional import ExtensionalSet

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _subsets(items: tuple[T, ...]) -> Iterator[ExtensionalSet[T]]:
    n = len(items)
    for mask in range(1 << n):
        yield ExtensionalSet(items[i] for i in range(n) if (mask >> i) & 1)


class LazyPowerSetView(MathSet[MathSet[T]]):
    """
    P(origin), the set of all subsets of origin.

    Membership is semantic: any finite set whose members all belong to
    origin is a member, whatever its representation. Unlike other sets,
    contains() is not total: it raises PreconditionError for a candidate
    of unknown cardinality, and for an infinite candidate when origin is
    not finite, since neither can be settled by a finite scan.
    """

    cheap_membership = False

    def __init__(self, origin: MathSet[T]) -> None:
        self._origin = origin

    @property
    def origin(self) -> MathSet[T]:
        return self._origin

    def contains(self, element: Any) -> bool:
        """
        Check whether element is a subset of origin.

        Raises:
            PreconditionError: If element is not finite and origin is not
                finite either, so the question cannot be settled
        """
        if not isinstance(element, MathSet):
            return False
        candidate_card = element.cardinality
        if candidate_card.is_finite():
            return all(self._origin.contains(x) for x in element.elements())
        if candidate_card.is_infinite() and self._origin.cardinality.is_finite():
            return False
        raise PreconditionError(
            f"cannot decide whether {element!r} (cardinality {candidate_card}) "
            f"is a subset of {self._origin!r}"
        )

    def elements(self) -> Iterator[ExtensionalSet[T]]:
        """
        Enumerate all 2^n subsets.

        Raises:
            MaterializationError: If origin is not finite
            PreconditionError: If origin has more members than the
                configured power_set_limit
        """
        items = self._explicit_origin()
        logger.debug(f"Enumerating {1 << len(items)} subsets of {self._origin!r}")
        return _subsets(items)

    @property
    def cardinality(self) -> Cardinality:
        origin_card = self._origin.cardinality
        if origin_card.is_finite():
            return Cardinality.finite(2 ** origin_card.count)
        if origin_card.is_infinite():
            return UNCOUNTABLE
        return UNKNOWN

    def _explicit_origin(self) -> tuple[T, ...]:
        origin = self._origin
        if not isinstance(origin, ExtensionalSet):
            origin_card = origin.cardinality
            if not origin_card.is_finite():
                raise MaterializationError(
                    f"power set of {origin!r} cannot be enumerated: "
                    f"origin cardinality is {origin_card}"
                )
            origin = origin.materialize()

        items = tuple(origin.elements())
        limit = get_config().power_set_limit
        if len(items) > limit:
            raise PreconditionError(
                f"power set enumeration is limited to origins of at most {limit} "
                f"elements, got {len(items)}",
                code=ErrorCode.S0202,
            )
        return items

    def __repr__(self) -> str:
        return f"LazyPowerSetView({self._origin!r})"
