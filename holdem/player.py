"""A player seated at the table."""

from __future__ import annotations

from dataclasses import dataclass, field

from holdem.cards import Card

FOLD = -1


@dataclass
class Player:
    """A player's name, stack, chips committed this round and hole cards."""

    name: str
    chips: int = 0
    chips_in_pot: int = 0
    cards: tuple[Card, ...] = field(default_factory=tuple)

    def folded(self) -> bool:
        """Whether the player has folded this round."""
        return self.chips_in_pot == FOLD

    def describe(self) -> str:
        """The player's stack and hole cards, one item per line."""
        lines = [f"Chips: {self.chips}", "Cards:"]
        lines.extend(str(card) for card in self.cards)
        return "\n".join(lines) + "\n"