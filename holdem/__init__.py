"""Texas Hold'em poker: cards, hand evaluation, players and a terminal game."""

__version__ = "0.1.0"