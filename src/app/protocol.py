from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

Outcome = Literal["player_win", "computer_win", "draw"]
CommandKind = Literal["help", "quit", "move", "invalid"]

HELP_TOKEN = "help"
QUIT_TOKEN = "0"

_INTEGER = re.compile(r"[+-]?[0-9]+")


def resolve(a: int, b: int, n: int) -> int:
    """Return 1 if move ``a`` beats ``b``, -1 if ``b`` beats ``a``, 0 on a draw.

    Moves are arranged in a circle; each one beats the ``n // 2`` moves that
    precede it and loses to the ``n // 2`` moves that follow it.
    """
    if n < 3 or n % 2 == 0:
        raise ValueError(f"move count must be odd and >= 3, got {n}")
    if not (0 <= a < n and 0 <= b < n):
        raise ValueError(f"move indices must be in [0, {n}), got {a} and {b}")

    half = n // 2
    d = (a - b + half + n) % n - half
    return (d > 0) - (d < 0)


def determine_outcome(player: int, computer: int, n: int) -> Outcome:
    result = resolve(player, computer, n)
    if result == 0:
        return "draw"
    return "player_win" if result > 0 else "computer_win"


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    # 0-based, only set when kind == "move"
    index: int | None = None


def parse_input_token(line: str, n: int) -> Command:
    token = line.strip()
    if token == HELP_TOKEN:
        return Command("help")
    if token == QUIT_TOKEN:
        return Command("quit")
    if not _INTEGER.fullmatch(token):
        return Command("invalid")
    number = int(token)
    if 1 <= number <= n:
        return Command("move", index=number - 1)
    return Command("invalid")


@dataclass(frozen=True)
class RoundOutcome:
    result: Outcome
    player_move: int
    computer_move: int
    player_move_name: str
    computer_move_name: str
    commitment: str
    key_hex: str

    def message(self) -> str:
        if self.result == "draw":
            return "Draw."
        if self.result == "player_win":
            return f"You win: {self.player_move_name} beats {self.computer_move_name}."
        return f"Computer wins: {self.computer_move_name} beats {self.player_move_name}."
