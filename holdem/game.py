"""A Texas hold'em table: blinds, betting rounds, showdown and rebuys."""

from __future__ import annotations

import random
from collections.abc import Callable

from holdem.cards import Card, Deck
from holdem.evaluator import determine_hand
from holdem.hands import Comparison, Hand
from holdem.player import FOLD, Player

MIN_PLAYERS = 2
MAX_PLAYERS = 8
RECOMMENDED_BUY_IN_BIG_BLINDS = 20

CLEAR_SCREEN = "\033[2J\033[H"
WHITE = "\033[0m"
_PLAYER_COLORS = (
    "\033[92m",
    "\033[32m",
    "\033[36m",
    "\033[31m",
    "\033[35m",
    "\033[33m",
    "\033[90m",
    "\033[94m",
)


class Game:
    """An interactive hold'em game driven by a token reader and a text writer."""

    def __init__(
        self,
        read: Callable[[], str],
        write: Callable[[str], object],
        rng: random.Random | None = None,
    ) -> None:
        self._read = read
        self._write = write
        self._deck = Deck(rng)
        self.players: list[Player] = []
        self.small_blind = 0
        self.big_blind = 0
        self.sb_index = 0
        self.bb_index = 1
        self.community_cards: list[Card] = []
        self.pot = 0
        self.price = 0
        self.remaining = 0
        self._min_raise = 0

    # ----------------------------------------------------------------- input

    def _line(self, text: str = "") -> None:
        self._write(text + "\n")

    def _read_int(self) -> int:
        while True:
            token = self._read()
            try:
                return int(token)
            except ValueError:
                self._line("Please enter a whole number.")

    def _read_choice(self) -> str:
        token = self._read().strip()
        return token[:1]

    def _pause(self) -> None:
        self._read()

    def _clear(self) -> None:
        self._write(CLEAR_SCREEN)

    # ----------------------------------------------------------------- setup

    def setup(self) -> None:
        """Ask for the blinds and the players."""
        self._write(WHITE)
        self._init_blinds()
        self._init_players()
        self.sb_index, self.bb_index = 0, 1

    def _init_blinds(self) -> None:
        while True:
            self._line("Enter Big Blind:")
            self.big_blind = self._read_int()
            if self.big_blind > 0:
                break
            self._line("Big Blind must be bigger than 0!")
        while True:
            self._line("Enter Small Blind:")
            self.small_blind = self._read_int()
            if 0 < self.small_blind <= self.big_blind:
                break
            self._line(
                "Small Blind must be bigger than 0 and not bigger than the Big Blind!"
            )
        self._line()

    def _init_players(self) -> None:
        while True:
            self._line("How many players will you be?")
            count = self._read_int()
            if MIN_PLAYERS <= count <= MAX_PLAYERS:
                break
            self._line(
                f"Number of players should be between {MIN_PLAYERS} and {MAX_PLAYERS}!"
            )
        self.players = []
        while len(self.players) < count:
            self._write(f"Enter name of Player {len(self.players) + 1}: ")
            name = self._read()
            self._write(f"Enter number of chips for {name}: ")
            chips = self._read_int()
            if chips < self.big_blind:
                self._line(
                    "Starting number of chips must be greater than or equal to the big blind!"
                )
                continue
            self.players.append(Player(name, chips))
        self.remaining = len(self.players)
        self.price = self.big_blind
        self._clear()

    # ----------------------------------------------------------------- round

    def play_round(self) -> None:
        """Play one hand from the deal to the payout."""
        self._deck.reset()
        self._deck.shuffle()
        self._deal_hole_cards()
        self._take_blinds()
        finished = (
            self._betting_round(preflop=True)
            or self._open("The flop is:", 3)
            or self._open("The turn is:", 1)
            or self._open("The river is:", 1)
        )
        if not finished:
            self._showdown()
        self._kick_players()
        self._update_positions()
        self._cleanup()

    def _deal_hole_cards(self) -> None:
        firsts = [self._deck.deal() for _ in self.players]
        for player, first in zip(self.players, firsts):
            player.cards = (first, self._deck.deal())

    def _take_blinds(self) -> None:
        small = self.players[self.sb_index]
        big = self.players[self.bb_index]
        self._line(f"{small.name} is the Small Blind ({self.small_blind} Chips)")
        self._line(f"{big.name} is the Big Blind ({self.big_blind} Chips)")
        self._line()
        self._line()
        small.chips -= self.small_blind
        small.chips_in_pot = self.small_blind
        self.pot += self.small_blind
        big.chips -= self.big_blind
        big.chips_in_pot = self.big_blind
        self.pot += self.big_blind
        self.price = self.big_blind

    def _open(self, title: str, count: int) -> bool:
        self._line(title)
        self._deck.deal()  # burn card
        for _ in range(count):
            card = self._deck.deal()
            self.community_cards.append(card)
            self._line(str(card))
        self._line()
        return self._betting_round(preflop=False)

    def _prompt_action(self, index: int, player: Player) -> str:
        color = _PLAYER_COLORS[index % len(_PLAYER_COLORS)]
        while True:
            self._write(color)
            self._line(f"It is {player.name}'s turn:")
            self._write(player.describe())
            owed = self.price - player.chips_in_pot
            if owed == 0:
                self._line("C - Check")
                self._line("R - Raise")
            else:
                self._line(f"C - Call ({owed} Chips)")
                self._line("R - Call and Raise")
            self._line("F - Fold")
            choice = self._read_choice()
            self._line()
            if choice in ("C", "R", "F"):
                return choice
            self._line("Invalid choice!")

    def _betting_round(self, preflop: bool) -> bool:
        """Run one betting round; return True when all but one player folded."""
        count = len(self.players)
        i = self.bb_index + 1 if preflop else self.sb_index
        last = count if i == 0 else i
        self._min_raise = self.big_blind
        while True:
            if i >= count:
                i -= count
            player = self.players[i]
            if not player.folded():
                choice = self._prompt_action(i, player)
                if choice == "C":
                    if player.chips_in_pot != self.price:
                        self._call(player)
                elif choice == "R":
                    self._call(player)
                    self._raise(player)
                    last = count if i == 0 else i
                else:
                    player.chips_in_pot = FOLD
                    self.remaining -= 1
                    if self.remaining == 1:
                        self._find_winner()
                        return True
            i += 1
            if i == last:
                break
        self._clear()
        self._write(WHITE)
        return False

    def _call(self, player: Player) -> None:
        owed = self.price - player.chips_in_pot
        self.pot += owed
        player.chips -= owed
        player.chips_in_pot = self.price

    def _raise(self, player: Player) -> None:
        while True:
            self._write(f"Enter raise amount (Minimum {self._min_raise} Chips): ")
            amount = self._read_int()
            if self._min_raise <= amount <= player.chips:
                break
            self._line(
                "Raise amount must be at least the size of the minimum raise amount, "
                "and make sure you have enough chips!"
            )
        self._line()
        self._min_raise = amount * 2
        self.price += amount
        self.pot += amount
        player.chips -= amount
        player.chips_in_pot += amount

    # ---------------------------------------------------------------- payout

    def _find_winner(self) -> None:
        for player in self.players:
            if not player.folded():
                self._clear()
                self._write(WHITE)
                self._award(player)
                break

    def _award(self, player: Player) -> None:
        player.chips += self.pot
        self._line(
            f"{player.name} has won and earned a pot of {self.pot} Chips, "
            f"he now has {player.chips} Chips in total"
        )
        self._pause()
        self._clear()

    def _split_pot(self, winners: list[Player]) -> None:
        share = self.pot // len(winners)
        self._line(f"The pot is split {len(winners)} ways!")
        for player in winners:
            player.chips += share
            self._line(
                f"{player.name} has tied and earned {share} Chips, "
                f"he now has {player.chips} Chips"
            )
        self._pause()
        self._clear()

    def _showdown(self) -> None:
        best: Hand | None = None
        winners: list[Player] = []
        for player in self.players:
            if player.folded():
                continue
            hand = determine_hand([*self.community_cards, *player.cards])
            if (
                best is None
                or hand.category > best.category
                or (
                    hand.category == best.category
                    and hand.compare(best) == Comparison.FIRST
                )
            ):
                best = hand
                winners = [player]
            elif hand.category == best.category and hand.compare(best) == Comparison.EQUAL:
                winners.append(player)
        if len(winners) > 1:
            self._split_pot(winners)
        elif winners:
            self._award(winners[0])

    # ------------------------------------------------------------ between rounds

    def _kick_players(self) -> None:
        kept: list[Player] = []
        for player in self.players:
            if player.chips >= self.big_blind:
                kept.append(player)
                continue
            shortfall = self.big_blind - player.chips
            self._line(
                f"{player.name}, you don't have enough chips to pay for the Big Blind!"
            )
            self._line(
                f"Would you like to rebuy into the game (Minimum of {shortfall} Chips) "
                "or leave the game?"
            )
            self._line("0 - Rebuy")
            self._line("Any other key - Leave the game")
            choice = self._read_choice()
            if choice == "0" and self._rebuy(player):
                kept.append(player)
            self._line()
        self.players = kept
        self._clear()

    def _rebuy(self, player: Player) -> bool:
        shortfall = self.big_blind - player.chips
        self._line(
            f"How much chips would you like to add to your stack, the minimum is "
            f"{shortfall} Chips in order to match the Big Blind"
        )
        self._line(
            f"It is recommended to buy in with at least {RECOMMENDED_BUY_IN_BIG_BLINDS} "
            f"Big Blinds ({self.big_blind * RECOMMENDED_BUY_IN_BIG_BLINDS} Chips)"
        )
        amount = self._read_int()
        if amount < shortfall:
            self._line(f"Insufficient amount! Goodbye {player.name}")
            self._line()
            return False
        player.chips += amount
        return True

    def _update_positions(self) -> None:
        count = len(self.players)
        if count:
            self.sb_index = (self.sb_index + 1) % count
            self.bb_index = (self.bb_index + 1) % count

    def _cleanup(self) -> None:
        for player in self.players:
            player.chips_in_pot = 0
        self.community_cards.clear()
        self.pot = 0
        self.remaining = len(self.players)
        self.price = self.big_blind