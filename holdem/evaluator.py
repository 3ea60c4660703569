"""Find the best poker hand in a set of cards."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from holdem.cards import Card, Rank, Suit
from holdem.hands import (
    Flush,
    FourOfAKind,
    FullHouse,
    Hand,
    HighCard,
    Pair,
    RoyalFlush,
    Straight,
    StraightFlush,
    ThreeOfAKind,
    TwoPair,
)

STRAIGHT_LENGTH = 5
FLUSH_LENGTH = 5
FOUR_OF_A_KIND_KICKER_COUNT = 1
THREE_OF_A_KIND_KICKER_COUNT = 2
MAX_KICKER_COUNT = 5


def _find_run(cards: Sequence[Card], suited: bool) -> Card | None:
    """Scan rank-sorted cards for a straight and return its top card.

    Duplicate ranks do not break a run; the ace also counts low for a
    five-high straight. With ``suited`` every card of the run must share
    the suit of the card before it.
    """
    top: Card | None = None
    prev: Card | None = None
    length = 0
    i = 0
    while i < len(cards):
        card = cards[i]
        if length == 0:
            top = prev = card
            length = 1
        elif prev.rank == card.rank + 1 and (not suited or prev.suit == card.suit):
            prev = card
            length += 1
            highest = cards[0]
            wheel = (
                length == STRAIGHT_LENGTH - 1
                and card.rank == Rank.TWO
                and highest.rank == Rank.ACE
                and (not suited or highest.suit == card.suit)
            )
            if length == STRAIGHT_LENGTH or wheel:
                return top
        elif card.rank != prev.rank:
            # Start a new run from this very card.
            length = 0
            continue
        i += 1
    return None


class _Evaluation:
    """Rank and suit tallies of one set of cards."""

    def __init__(self, cards: Iterable[Card]) -> None:
        self.cards = sorted(cards, key=lambda card: card.rank, reverse=True)
        self.rank_counts = Counter(card.rank for card in self.cards)
        self.suit_counts = Counter(card.suit for card in self.cards)

    def _ranks_high_to_low(self) -> list[tuple[Rank, int]]:
        return [
            (rank, self.rank_counts[rank])
            for rank in reversed(Rank)
            if self.rank_counts[rank] > 0
        ]

    def straight_flush(self) -> Hand | None:
        top = _find_run(self.cards, suited=True)
        if top is None:
            return None
        if top.rank == Rank.ACE:
            return RoyalFlush()
        return StraightFlush(top.rank)

    def four_of_a_kind(self) -> Hand | None:
        quad: list[Rank] = []
        kickers: list[Rank] = []
        for rank, count in self._ranks_high_to_low():
            if count == 4:
                quad.insert(0, rank)
            elif len(kickers) < FOUR_OF_A_KIND_KICKER_COUNT:
                kickers.append(rank)
        if not quad:
            return None
        return FourOfAKind(quad + kickers)

    def full_house(self) -> Hand | None:
        three = self.three_of_a_kind()
        if three is None:
            return None
        pairs = self.pairs_or_high_card()
        if isinstance(pairs, (TwoPair, Pair)):
            return FullHouse((three.ranks[0], pairs.ranks[0]))
        return None

    def flush(self) -> Hand | None:
        for suit in Suit:
            if self.suit_counts[suit] >= FLUSH_LENGTH:
                suited = [card.rank for card in self.cards if card.suit == suit]
                return Flush(suited[:FLUSH_LENGTH])
        return None

    def straight(self) -> Hand | None:
        top = _find_run(self.cards, suited=False)
        return None if top is None else Straight(top.rank)

    def three_of_a_kind(self) -> ThreeOfAKind | None:
        set_rank: Rank | None = None
        kickers: list[Rank] = []
        for rank, count in self._ranks_high_to_low():
            if set_rank is None and count == 3:
                set_rank = rank
            elif len(kickers) < THREE_OF_A_KIND_KICKER_COUNT:
                kickers.append(rank)
        if set_rank is None:
            return None
        return ThreeOfAKind([set_rank, *kickers])

    def pairs_or_high_card(self) -> Hand:
        pair_ranks: list[Rank] = []
        kickers: list[Rank] = []
        for rank, count in self._ranks_high_to_low():
            if len(pair_ranks) < 2 and count == 2:
                pair_ranks.append(rank)
            elif len(kickers) < MAX_KICKER_COUNT:
                kickers.append(rank)
        ranks = pair_ranks + kickers
        if len(pair_ranks) == 2:
            return TwoPair(ranks[:3])
        if len(pair_ranks) == 1:
            return Pair(ranks[:4])
        return HighCard(ranks[:5])

    def best(self) -> Hand:
        checks = (
            self.straight_flush,
            self.four_of_a_kind,
            self.full_house,
            self.flush,
            self.straight,
            self.three_of_a_kind,
        )
        for check in checks:
            hand = check()
            if hand is not None:
                return hand
        return self.pairs_or_high_card()


def determine_hand(cards: Iterable[Card]) -> Hand:
    """Return the best hand made from the given cards (usually seven)."""
    return _Evaluation(cards).best()