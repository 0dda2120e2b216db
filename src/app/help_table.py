from __future__ import annotations

from tabulate import tabulate, tabulate_formats

from moves import MoveSet
from protocol import resolve

DEFAULT_TABLE_FORMAT = "grid"
TABLE_FORMATS: tuple[str, ...] = tuple(tabulate_formats)

_CELL = {1: "Win", 0: "Draw", -1: "Lose"}


def payoff_rows(moves: MoveSet) -> list[list[str]]:
    n = len(moves)
    return [[moves[i]] + [_CELL[resolve(i, j, n)] for j in range(n)] for i in range(n)]


def render_payoff_table(moves: MoveSet, tablefmt: str = DEFAULT_TABLE_FORMAT) -> str:
    """Rows are the player's move, columns the computer's; cells read from the row's side."""
    headers = ["v User\\Computer >"] + list(moves)
    return tabulate(payoff_rows(moves), headers=headers, tablefmt=tablefmt, disable_numparse=True)
