"""Command-line entry point for the hold'em table."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterator
from typing import TextIO

from holdem.game import CLEAR_SCREEN, Game


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Play rounds until the table asks to stop; return the exit status."""
    parser = argparse.ArgumentParser(prog="holdem", description="Play Texas hold'em.")
    parser.add_argument("--seed", type=int, default=None, help="seed for shuffling")
    args = parser.parse_args(argv)

    tokens = _tokens(sys.stdin)

    def read() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError("input ended") from None

    def write(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    game = Game(read, write, random.Random(args.seed))
    try:
        write("Greetings! Are you new here?\nPress any key to start!\n")
        read()
        write("\n")
        game.setup()
        while True:
            if not game.players:
                write("No players are left at the table.\n")
                break
            game.play_round()
            write("Would you like to play another round?\n")
            write("0 - No\n")
            write("Any other key - Yes\n")
            keep_playing = read()
            write(CLEAR_SCREEN)
            if keep_playing.startswith("0"):
                break
    except EOFError:
        write("\n")
        return 1
    write("Goodbye!\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())