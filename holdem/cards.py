"""Playing cards and a standard 52-card deck."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum

RANK_COUNT = 13
SUIT_COUNT = 4
CARD_COUNT = RANK_COUNT * SUIT_COUNT

_RANK_LABELS = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A")


class Suit(IntEnum):
    """Card suit."""

    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3

    @property
    def label(self) -> str:
        return self.name


class Rank(IntEnum):
    """Card rank, ordered from lowest to highest."""

    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12

    @property
    def label(self) -> str:
        return _RANK_LABELS[self.value]


@dataclass(frozen=True)
class Card:
    """A single playing card."""

    suit: Suit
    rank: Rank

    def __str__(self) -> str:
        return f"{self.rank.label} {self.suit.label}"


class Deck:
    """A deck of cards dealt from its back."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Refill the deck with all 52 cards in suit-then-rank order."""
        self._cards = [Card(suit, rank) for suit in Suit for rank in Rank]

    def shuffle(self) -> None:
        """Shuffle the remaining cards in place."""
        self._rng.shuffle(self._cards)

    def deal(self) -> Card:
        """Remove and return the card at the back of the deck."""
        if not self._cards:
            raise IndexError("cannot deal from an empty deck")
        return self._cards.pop()

    def __len__(self) -> int:
        return len(self._cards)