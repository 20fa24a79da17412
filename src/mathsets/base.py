"""
The MathSet contract.

Every set representation (explicit, predicate-defined, mapped, views and
the universal number sets) implements this interface. Sets are immutable:
every algebra operation returns a new set and never touches its operands.

Membership, enumeration and cardinality are the three primitives. The
algebra defaults below are written only in terms of those primitives, and
union/intersect are routed through the dispatch table so the chosen
representation never changes the result.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from enum import Enum, auto
from itertools import islice
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from mathsets.cardinality import Cardinality
from mathsets.errors import MaterializationError, PreconditionError

if TYPE_CHECKING:
    from mathsets.extensional import ExtensionalSet
    from mathsets.intensional import IntensionalSet
    from mathsets.mapped import MappedSet
    from mathsets.powerset import LazyPowerSetView

T = TypeVar("T")
U = TypeVar("U")


class Representation(Enum):
    """Closed set of representation families used by the dispatch table."""

    EXTENSIONAL = auto()  # finite, explicit, hash or bit backed
    LAZY = auto()  # predicate, image, power set and combinator views
    UNIVERSAL = auto()  # stateless infinite number sets


class MathSet(ABC, Generic[T]):
    """
    Base class for all sets.

    Subclasses provide contains(), elements() and cardinality. Everything
    else has a default written in terms of those three.
    """

    representation: ClassVar[Representation] = Representation.LAZY

    # Whether contains() is a constant-time style test. Dispatch only
    # filters an explicit set through another set when this holds.
    cheap_membership: bool = True

    # =========================================================================
    # Primitives
    # =========================================================================

    @abstractmethod
    def contains(self, element: Any) -> bool:
        """Return True if element is a member of this set."""
        pass

    @abstractmethod
    def elements(self) -> Iterator[T]:
        """
        Return a fresh lazy iterator over the members.

        Each call starts an independent traversal. Infinite sets yield
        forever; the caller decides when to stop pulling.
        """
        pass

    @property
    @abstractmethod
    def cardinality(self) -> Cardinality:
        """The size class of this set."""
        pass

    def materialize(self) -> ExtensionalSet[T]:
        """
        Force this set into a finite explicit set.

        Raises:
            MaterializationError: If the cardinality is not finite
        """
        from mathsets.extensional import ExtensionalSet

        card = self.cardinality
        if not card.is_finite():
            raise MaterializationError(
                f"cannot materialize {self!r}: cardinality is {card}"
            )
        return ExtensionalSet(self.elements())

    # =========================================================================
    # Algebra
    # =========================================================================

    def union(self, other: MathSet[T]) -> MathSet[T]:
        """A ∪ B."""
        from mathsets import dispatch

        return dispatch.union(self, other)

    def intersect(self, other: MathSet[T]) -> MathSet[T]:
        """A ∩ B."""
        from mathsets import dispatch

        return dispatch.intersect(self, other)

    def minus(self, other: MathSet[T]) -> MathSet[T]:
        """
        A ∖ B.

        A finite left operand is filtered eagerly; otherwise the result is
        a predicate view over this set.
        """
        from mathsets.extensional import ExtensionalSet
        from mathsets.intensional import IntensionalSet

        if self.cardinality.is_finite():
            return ExtensionalSet(x for x in self.elements() if not other.contains(x))
        return IntensionalSet(self, lambda x: not other.contains(x))

    def symmetric_diff(self, other: MathSet[T]) -> MathSet[T]:
        """A △ B, built as (A ∖ B) ∪ (B ∖ A)."""
        return self.minus(other).union(other.minus(self))

    def complement(self, universe: MathSet[T]) -> MathSet[T]:
        """Complement relative to universe: U ∖ A."""
        return universe.minus(self)

    # =========================================================================
    # Relations
    # =========================================================================

    def is_subset_of(self, other: MathSet[T]) -> bool:
        """
        Check A ⊆ B by scanning A.

        The left operand must be finite; B may be anything with a
        membership test.

        Raises:
            PreconditionError: If this set is not finite
        """
        self._require_finite("is_subset_of")
        return all(other.contains(x) for x in self.elements())

    def is_proper_subset_of(self, other: MathSet[T]) -> bool:
        """
        Check A ⊂ B (A ⊆ B and A ≠ B).

        Raises:
            PreconditionError: If this set is not finite, or if B has an
                unknown cardinality and A ⊆ B
        """
        if not self.is_subset_of(other):
            return False
        other_card = other.cardinality
        if other_card.is_finite():
            return any(not self.contains(y) for y in other.elements())
        if other_card.is_infinite():
            return True
        raise PreconditionError(
            f"is_proper_subset_of: cannot decide against {other!r} "
            f"with unknown cardinality"
        )

    def is_disjoint_with(self, other: MathSet[T]) -> bool:
        """
        Check A ∩ B = ∅ by scanning whichever side is finite.

        Raises:
            PreconditionError: If neither operand is finite
        """
        if self.cardinality.is_finite():
            return not any(other.contains(x) for x in self.elements())
        if other.cardinality.is_finite():
            return not any(self.contains(x) for x in other.elements())
        raise PreconditionError(
            f"is_disjoint_with needs at least one finite operand, "
            f"got {self!r} and {other!r}"
        )

    # =========================================================================
    # Derived constructions
    # =========================================================================

    def filter(self, predicate: Callable[[T], bool]) -> IntensionalSet[T]:
        """Separation: the subset of members satisfying predicate."""
        from mathsets.intensional import IntensionalSet

        return IntensionalSet(self, predicate)

    def map(self, func: Callable[[T], U]) -> MappedSet[T, U]:
        """Replacement: the image of this set under func."""
        from mathsets.mapped import MappedSet

        return MappedSet(self, func)

    def power_set(self) -> LazyPowerSetView[T]:
        """The set of all subsets, enumerated lazily."""
        from mathsets.powerset import LazyPowerSetView

        return LazyPowerSetView(self)

    def take(self, n: int) -> list[T]:
        """Return the first n enumerated members (explicit truncation)."""
        if n < 0:
            raise ValueError(f"take() needs n >= 0, got {n}")
        return list(islice(self.elements(), n))

    # =========================================================================
    # Helpers and Python protocol
    # =========================================================================

    def _require_finite(self, operation: str) -> None:
        card = self.cardinality
        if not card.is_finite():
            raise PreconditionError(
                f"{operation} requires a finite left operand, {self!r} has cardinality {card}"
            )

    def _element_set(self) -> frozenset[T]:
        """Members as a frozenset. Only valid for finite sets."""
        return frozenset(self.materialize().elements())

    def __contains__(self, element: object) -> bool:
        return self.contains(element)

    def __iter__(self) -> Iterator[T]:
        return self.elements()

    def __or__(self, other: object) -> MathSet[T]:
        if not isinstance(other, MathSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> MathSet[T]:
        if not isinstance(other, MathSet):
            return NotImplemented
        return self.intersect(other)

    def __sub__(self, other: object) -> MathSet[T]:
        if not isinstance(other, MathSet):
            return NotImplemented
        return self.minus(other)

    def __xor__(self, other: object) -> MathSet[T]:
        if not isinstance(other, MathSet):
            return NotImplemented
        return self.symmetric_diff(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, MathSet):
            return NotImplemented
        return self.is_subset_of(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MathSet):
            return NotImplemented
        return self.is_proper_subset_of(other)

    def __eq__(self, other: object) -> bool:
        """
        Extensional equality.

        Two finite sets are equal when they have the same members, whatever
        their representations. Non-finite sets are only equal to themselves.
        """
        if self is other:
            return True
        if not isinstance(other, MathSet):
            return NotImplemented
        if self.cardinality.is_finite() and other.cardinality.is_finite():
            return self._element_set() == other._element_set()
        return False

    def __hash__(self) -> int:
        if self.cardinality.is_finite():
            return hash(self._element_set())
        return object.__hash__(self)
