"""Poker hand categories and comparison of hands within a category."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from holdem.cards import Rank


class HandCategory(IntEnum):
    """Hand categories, ordered from weakest to strongest."""

    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9


class Comparison(IntEnum):
    """Outcome of comparing two hands of the same category."""

    EQUAL = 0
    FIRST = 1
    SECOND = 2


def compare_ranks(first: Sequence[Rank], second: Sequence[Rank]) -> Comparison:
    """Compare two rank sequences position by position."""
    for mine, theirs in zip(first, second):
        if mine > theirs:
            return Comparison.FIRST
        if mine < theirs:
            return Comparison.SECOND
    return Comparison.EQUAL


class Hand(ABC):
    """A made poker hand."""

    category: ClassVar[HandCategory]

    @abstractmethod
    def _key(self) -> tuple[Rank, ...]:
        """Ranks that decide between two hands of this category, in order."""

    def compare(self, other: Hand) -> Comparison:
        """Compare with another hand of the same category."""
        if type(other) is not type(self):
            raise TypeError(
                f"cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        return compare_ranks(self._key(), other._key())


@dataclass(frozen=True)
class _RankedHand(Hand):
    ranks: tuple[Rank, ...]

    def __init__(self, ranks: Iterable[Rank]) -> None:
        object.__setattr__(self, "ranks", tuple(ranks))

    def _key(self) -> tuple[Rank, ...]:
        return self.ranks


@dataclass(frozen=True)
class _TopCardHand(Hand):
    top: Rank

    def _key(self) -> tuple[Rank, ...]:
        return (self.top,)


class HighCard(_RankedHand):
    """The five highest cards."""

    category = HandCategory.HIGH_CARD


class Pair(_RankedHand):
    """Pair rank followed by three kickers."""

    category = HandCategory.PAIR


class TwoPair(_RankedHand):
    """Higher pair, lower pair and one kicker."""

    category = HandCategory.TWO_PAIR


class ThreeOfAKind(_RankedHand):
    """Set rank followed by two kickers."""

    category = HandCategory.THREE_OF_A_KIND


class Flush(_RankedHand):
    """The five highest ranks of the flush suit."""

    category = HandCategory.FLUSH


class FullHouse(_RankedHand):
    """Set rank followed by pair rank."""

    category = HandCategory.FULL_HOUSE


class FourOfAKind(_RankedHand):
    """Quad rank followed by one kicker."""

    category = HandCategory.FOUR_OF_A_KIND


class Straight(_TopCardHand):
    """Five consecutive ranks, identified by the top one."""

    category = HandCategory.STRAIGHT


class StraightFlush(_TopCardHand):
    """Five consecutive suited ranks, identified by the top one."""

    category = HandCategory.STRAIGHT_FLUSH


@dataclass(frozen=True)
class RoyalFlush(Hand):
    """Ace-high straight flush; all royal flushes tie."""

    category: ClassVar[HandCategory] = HandCategory.ROYAL_FLUSH

    def _key(self) -> tuple[Rank, ...]:
        return ()