"""
Demonstrations of classical set-theoretic paradoxes.

Separation only carves subsets out of an existing set, so Russell's
construction yields an ordinary set here, and Cantor's theorem can be
observed directly on finite power sets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from mathsets.base import MathSet
from mathsets.extensional import ExtensionalSet

A = TypeVar("A")


@dataclass(frozen=True)
class ParadoxResult(Generic[A]):
    """
    Outcome of a paradox demonstration.

    Attributes:
        title: Short name, e.g. "Russell"
        artifact: The object the demonstration built
        contradiction_detected: Whether a contradiction surfaced
        explanation: Human-readable summary
    """

    title: str
    artifact: A
    contradiction_detected: bool
    explanation: str


def russell(base: MathSet[Any]) -> ParadoxResult[ExtensionalSet[Any]]:
    """
    Build R = { x ∈ base | x ∉ x } over a finite base of sets.

    Non-set members are never members of themselves.
    """

    def not_self_member(candidate: Any) -> bool:
        return not (isinstance(candidate, MathSet) and candidate.contains(candidate))

    russell_set = base.filter(not_self_member).materialize()
    return ParadoxResult(
        title="Russell",
        artifact=russell_set,
        contradiction_detected=False,
        explanation=(
            "No contradiction under restricted comprehension; the paradox needs "
            "unrestricted comprehension."
        ),
    )


def cantor(s: MathSet[Any]) -> ParadoxResult[int]:
    """Compare |P(S)| with |S| for a finite set S."""
    power_count = sum(1 for _ in s.power_set().elements())
    base_count = sum(1 for _ in s.elements())
    return ParadoxResult(
        title="Cantor",
        artifact=power_count,
        contradiction_detected=power_count <= base_count,
        explanation=f"For finite sets, |P(S)| = {power_count} and |S| = {base_count}.",
    )
