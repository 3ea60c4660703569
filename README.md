# holdem

A Texas Hold'em poker game for two to eight players who share one terminal.
It can also be used as a small library for dealing cards and ranking poker
hands.

## Playing

```
holdem
holdem --seed 42
```

`--seed` fixes the shuffle, so that games can be repeated. Input is read as
words separated by whitespace, and each answer is ended with Enter. The screen
is cleared and coloured with ANSI escape codes.

The game first asks for the big blind, which must be more than 0. It then asks
for the small blind, which must be more than 0 and no bigger than the big
blind. Next it asks how many players there are (from 2 to 8). For each player
it asks for a name and a starting stack, which must be at least the big blind.

Each round runs through these stages:

1. Every player is dealt two hole cards, and the blinds are posted.
2. There is a betting round before the flop, starting with the player after
   the big blind.
3. The flop (three cards), the turn and the river are each dealt after a burn
   card. Each one is followed by a betting round, starting with the small
   blind.
4. The hands still in play are compared at a showdown. If the best hands tie,
   the pot is divided equally among them, with whole chips only.

On your turn, type one of these capital letters:

- `C` to check, or to call the current price
- `R` to call and then raise; a raise must be at least the minimum and no more
  than your stack. The minimum starts at the big blind in each betting round
  and becomes twice the last raise.
- `F` to fold

When only one player has not folded, that player takes the pot at once. At the
end of a round, a player who cannot cover the big blind is asked to rebuy
(`0`) or to leave. A rebuy that does not bring the stack up to the big blind
also removes the player. The blinds then move one seat on. After each round,
`0` ends the game and anything else plays another round. If the input ends,
the command exits with status 1.

## Using the library

```python
from holdem.cards import Card, Deck, Rank, Suit
from holdem.evaluator import determine_hand
from holdem.hands import Comparison, HandCategory

deck = Deck()
deck.shuffle()
seven = [deck.deal() for _ in range(7)]
hand = determine_hand(seven)
print(hand.category, hand)

royal = determine_hand([
    Card(Suit.SPADES, Rank.ACE), Card(Suit.SPADES, Rank.KING),
    Card(Suit.SPADES, Rank.QUEEN), Card(Suit.SPADES, Rank.JACK),
    Card(Suit.SPADES, Rank.TEN), Card(Suit.HEARTS, Rank.TWO),
    Card(Suit.CLUBS, Rank.THREE),
])
assert royal.category is HandCategory.ROYAL_FLUSH
```

- `holdem.cards` has the `Suit` and `Rank` enums and the `Card` dataclass.
  `str(card)` gives text such as `10 HEARTS`. It also has `Deck`, which takes
  an optional `random.Random` and offers `reset()`, `shuffle()`, `deal()` and
  `len()`. `deal()` raises `IndexError` when the deck is empty.
- `holdem.evaluator.determine_hand(cards)` returns the best hand in a set of
  cards, usually seven. An ace also counts low, for a five-high straight.
- `holdem.hands` has the hand classes `HighCard`, `Pair`, `TwoPair`,
  `ThreeOfAKind`, `Straight`, `Flush`, `FullHouse`, `FourOfAKind`,
  `StraightFlush` and `RoyalFlush`. Each class has a `HandCategory`, ordered
  from weakest to strongest. Most of them keep the deciding ranks in `ranks`.
  `Straight` and `StraightFlush` keep their top rank in `top`.
  `Hand.compare(other)` compares two hands of the same category and returns a
  `Comparison` (`EQUAL`, `FIRST` or `SECOND`). Comparing hands of different
  classes raises `TypeError`. `compare_ranks(first, second)` compares two
  sequences of ranks position by position.
- `holdem.player.Player` holds a name, a stack (`chips`), the chips put in the
  pot this round (`chips_in_pot`) and the hole cards. It has `folded()` and
  `describe()`.
- `holdem.game.Game(read, write, rng)` runs the table. `read` returns the next
  input word and `write` receives the output text. `setup()` asks for the
  blinds and the players, and `play_round()` plays one hand.

## What it does not do

There are no all-in rules and no side pots. A call is not limited by the
player's stack, so a stack can go below zero. There are no computer opponents
and no play over a network. Nothing is saved between runs.

## Development

```
pip install -e ".[test]"
pytest
```