import random

import pytest

from holdem.cards import Card, Rank, Suit
from holdem.evaluator import determine_hand
from holdem.hands import (
    Comparison,
    Flush,
    FourOfAKind,
    FullHouse,
    HandCategory,
    HighCard,
    Pair,
    RoyalFlush,
    Straight,
    StraightFlush,
    ThreeOfAKind,
    TwoPair,
)

_RANKS = {rank.label: rank for rank in Rank}
_SUITS = {"S": Suit.SPADES, "H": Suit.HEARTS, "D": Suit.DIAMONDS, "C": Suit.CLUBS}


def cards(text):
    return [Card(_SUITS[token[-1]], _RANKS[token[:-1]]) for token in text.split()]


R = Rank


@pytest.mark.parametrize(
    "text, expected",
    [
        ("AS KS QS JS 10S 2H 3D", RoyalFlush()),
        ("9H 8H 7H 6H 5H KD 2C", StraightFlush(R.NINE)),
        ("AS 2S 3S 4S 5S 9D KH", StraightFlush(R.FIVE)),
        ("7S 7H 7D 7C AS 2D 3H", FourOfAKind([R.SEVEN, R.ACE])),
        ("KS KH KD 4C 4D 9S 2H", FullHouse([R.KING, R.FOUR])),
        ("KS KH KD 4C 4D 9S 9H", FullHouse([R.KING, R.NINE])),
        ("AH JH 9H 6H 3H 2H KS", Flush([R.ACE, R.JACK, R.NINE, R.SIX, R.THREE])),
        ("9H 8H 7H 6H 2H 5S KD", Flush([R.NINE, R.EIGHT, R.SEVEN, R.SIX, R.TWO])),
        ("10S 9H 8D 7C 6S 2H 2D", Straight(R.TEN)),
        ("AS 2H 3D 4C 5S 9H KD", Straight(R.FIVE)),
        ("9S 9H 8D 7C 6S 5H 2D", Straight(R.NINE)),
        ("QS QH QD 9C 5S 3H 2D", ThreeOfAKind([R.QUEEN, R.NINE, R.FIVE])),
        ("AS AH KD KC QS QH 2D", TwoPair([R.ACE, R.KING, R.QUEEN])),
        ("8S 8H AD KC 9S 4H 2D", Pair([R.EIGHT, R.ACE, R.KING, R.NINE])),
        ("AS JH 9D 7C 5S 3H 2D", HighCard([R.ACE, R.JACK, R.NINE, R.SEVEN, R.FIVE])),
    ],
)
def test_determine_hand(text, expected):
    assert determine_hand(cards(text)) == expected


def test_two_sets_without_pair_is_three_of_a_kind():
    hand = determine_hand(cards("KS KH KD 4C 4D 4S 2H"))
    assert hand == ThreeOfAKind([R.KING, R.FOUR, R.TWO])


def test_input_order_does_not_matter():
    rng = random.Random(7)
    hole = cards("QS QH QD 9C 5S 3H 2D")
    expected = determine_hand(hole)
    for _ in range(20):
        shuffled = hole[:]
        rng.shuffle(shuffled)
        assert determine_hand(shuffled) == expected


def test_input_is_not_modified():
    given = cards("2D AS 7C KH 9S 4H 5D")
    snapshot = list(given)
    determine_hand(given)
    assert given == snapshot


def test_accepts_any_iterable():
    assert determine_hand(iter(cards("AS KS QS JS 10S 2H 3D"))) == RoyalFlush()


@pytest.mark.parametrize(
    "stronger, weaker",
    [
        ("AS KS QS JS 10S 2H 3D", "9H 8H 7H 6H 5H KD 2C"),
        ("9H 8H 7H 6H 5H KD 2C", "7S 7H 7D 7C AS 2D 3H"),
        ("7S 7H 7D 7C AS 2D 3H", "KS KH KD 4C 4D 9S 2H"),
        ("KS KH KD 4C 4D 9S 2H", "AH JH 9H 6H 3H 2H KS"),
        ("AH JH 9H 6H 3H 2H KS", "10S 9H 8D 7C 6S 2H 2D"),
        ("10S 9H 8D 7C 6S 2H 2D", "QS QH QD 9C 5S 3H 2D"),
        ("QS QH QD 9C 5S 3H 2D", "AS AH KD KC QS QH 2D"),
        ("AS AH KD KC QS QH 2D", "8S 8H AD KC 9S 4H 2D"),
        ("8S 8H AD KC 9S 4H 2D", "AS JH 9D 7C 5S 3H 2D"),
    ],
)
def test_categories_are_ordered(stronger, weaker):
    assert determine_hand(cards(stronger)).category > determine_hand(cards(weaker)).category


def test_higher_straight_wins_within_category():
    high = determine_hand(cards("10S 9H 8D 7C 6S 2H 2D"))
    wheel = determine_hand(cards("AS 2H 3D 4C 5S 9H KD"))
    assert high.category == wheel.category == HandCategory.STRAIGHT
    assert high.compare(wheel) == Comparison.FIRST
    assert wheel.compare(high) == Comparison.SECOND


def test_kicker_decides_pair():
    better = determine_hand(cards("8S 8H AD KC 9S 4H 2D"))
    worse = determine_hand(cards("8D 8C AS QC 9H 4S 2C"))
    assert better.compare(worse) == Comparison.FIRST


def test_same_board_ties():
    first = determine_hand(cards("AS KD QC JH 9S 3D 2C"))
    second = determine_hand(cards("AH KC QD JS 9H 3C 2D"))
    assert first.compare(second) == Comparison.EQUAL