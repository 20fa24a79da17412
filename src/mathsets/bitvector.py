"""
Bit-packed sets of small non-negative integers.

A BitVectorSet covers the fixed domain [0, size). Member i is bit i % 64 of
word i // 64 in a read-only numpy uint64 array.
"""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Iterator
from typing import Any

import numpy as np

from mathsets.base import MathSet, Representation
from mathsets.cardinality import Cardinality

WORD_BITS = 64
WORD_MASK = (1 << WORD_BITS) - 1


def _word_count(size: int) -> int:
    return (size + WORD_BITS - 1) // WORD_BITS


def _tail_mask(size: int) -> int:
    """Mask of the valid bits in the last word."""
    used = size % WORD_BITS
    return (1 << used) - 1 if used else WORD_MASK


def _as_words(words: Iterable[int] | np.ndarray) -> np.ndarray:
    """Convert to uint64, reading negative ints as two's-complement words."""
    if isinstance(words, np.ndarray):
        return words.astype(np.uint64)
    return np.array([int(w) & WORD_MASK for w in words], dtype=np.uint64)


def _resized(words: np.ndarray, count: int) -> np.ndarray:
    if len(words) >= count:
        return words[:count]
    return np.concatenate([words, np.zeros(count - len(words), dtype=np.uint64)])


class BitVectorSet(MathSet[int]):
    """
    A finite set of integers in [0, size) stored one bit per integer.

    Args:
        size: Exclusive upper bound of the domain
        words: Packed bits; missing words are zero, bits at or past size
            are cleared, and negative ints are read as signed 64-bit words
    """

    representation = Representation.EXTENSIONAL

    def __init__(self, size: int, words: Iterable[int] | np.ndarray | None = None) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._size = size

        count = _word_count(size)
        if words is None:
            packed = np.zeros(count, dtype=np.uint64)
        else:
            packed = _resized(_as_words(words), count).copy()
        if count:
            packed[-1] &= np.uint64(_tail_mask(size))
        packed.flags.writeable = False
        self._words = packed

    @classmethod
    def from_iterable(cls, size: int, ints: Iterable[int]) -> BitVectorSet:
        """
        Build a BitVectorSet from integers; values outside [0, size) are ignored.

        Examples:
            >>> sorted(BitVectorSet.from_iterable(10, [1, 3, 3, 12]))
            [1, 3]
        """
        words = [0] * _word_count(size)
        for value in ints:
            if 0 <= value < size:
                words[value // WORD_BITS] |= 1 << (value % WORD_BITS)
        return cls(size, words)

    @property
    def size(self) -> int:
        return self._size

    @property
    def words(self) -> np.ndarray:
        return self._words

    def contains(self, element: Any) -> bool:
        if not isinstance(element, numbers.Integral) or isinstance(element, bool):
            return False
        element = int(element)
        if element < 0 or element >= self._size:
            return False
        word = int(self._words[element // WORD_BITS])
        return (word >> (element % WORD_BITS)) & 1 == 1

    def elements(self) -> Iterator[int]:
        return self._iter_bits()

    def _iter_bits(self) -> Iterator[int]:
        for index, word in enumerate(self._words.tolist()):
            base = index * WORD_BITS
            while word:
                lowest = word & -word
                yield base + lowest.bit_length() - 1
                word ^= lowest

    @property
    def cardinality(self) -> Cardinality:
        return Cardinality.finite(sum(word.bit_count() for word in self._words.tolist()))

    def _element_set(self) -> frozenset[int]:
        return frozenset(self._iter_bits())

    # =========================================================================
    # Word-level fast paths
    # =========================================================================

    def bitwise_union(self, other: BitVectorSet) -> BitVectorSet:
        """Union with another BitVectorSet over the larger of the two domains."""
        size = max(self._size, other._size)
        count = _word_count(size)
        words = np.bitwise_or(_resized(self._words, count), _resized(other._words, count))
        return BitVectorSet(size, words)

    def bitwise_intersection(self, other: BitVectorSet) -> BitVectorSet:
        """Intersection with another BitVectorSet over the smaller domain."""
        size = min(self._size, other._size)
        count = _word_count(size)
        words = np.bitwise_and(_resized(self._words, count), _resized(other._words, count))
        return BitVectorSet(size, words)

    def __repr__(self) -> str:
        return f"BitVectorSet({self._size}, {{{', '.join(map(str, self._iter_bits()))}}})"
