"""
Cardinality classes for sets.

A cardinality is a coarse size tag used to decide whether a set may be
enumerated or materialized. Only the finite count carries data.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class CardinalityKind(Enum):
    """The four size categories a set can fall into."""

    FINITE = auto()
    COUNTABLY_INFINITE = auto()
    UNCOUNTABLE = auto()
    UNKNOWN = auto()


@dataclass(frozen=True, slots=True)
class Cardinality:
    """
    A tagged cardinality value.

    Attributes:
        kind: The size category
        count: Exact element count, only set for FINITE
    """

    kind: CardinalityKind
    count: int | None = None

    def __post_init__(self) -> None:
        if self.kind is CardinalityKind.FINITE:
            if self.count is None or self.count < 0:
                raise ValueError(f"finite cardinality needs a count >= 0, got {self.count!r}")
        elif self.count is not None:
            raise ValueError(f"{self.kind.name} cardinality carries no count")

    @classmethod
    def finite(cls, count: int) -> Cardinality:
        """Build a finite cardinality from a known element count."""
        return cls(CardinalityKind.FINITE, int(count))

    def is_finite(self) -> bool:
        return self.kind is CardinalityKind.FINITE

    def is_infinite(self) -> bool:
        """True for countably infinite and uncountable sets (not for UNKNOWN)."""
        return self.kind in (CardinalityKind.COUNTABLY_INFINITE, CardinalityKind.UNCOUNTABLE)

    def is_countable(self) -> bool:
        return self.kind in (CardinalityKind.FINITE, CardinalityKind.COUNTABLY_INFINITE)

    def is_known(self) -> bool:
        return self.kind is not CardinalityKind.UNKNOWN

    def __str__(self) -> str:
        if self.kind is CardinalityKind.FINITE:
            return str(self.count)
        if self.kind is CardinalityKind.COUNTABLY_INFINITE:
            return "ℵ₀"
        if self.kind is CardinalityKind.UNCOUNTABLE:
            return "Uncountable"
        return "?"


COUNTABLY_INFINITE = Cardinality(CardinalityKind.COUNTABLY_INFINITE)
UNCOUNTABLE = Cardinality(CardinalityKind.UNCOUNTABLE)
UNKNOWN = Cardinality(CardinalityKind.UNKNOWN)
EMPTY = Cardinality.finite(0)
