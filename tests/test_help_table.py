from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

from help_table import payoff_rows, render_payoff_table  # type: ignore[import-not-found]  # noqa: E402
from moves import validate_moves  # type: ignore[import-not-found]  # noqa: E402


def test_payoff_rows_for_classic_moves() -> None:
    rows = payoff_rows(validate_moves(["rock", "paper", "scissors"]))
    assert rows == [
        ["rock", "Draw", "Lose", "Win"],
        ["paper", "Win", "Draw", "Lose"],
        ["scissors", "Lose", "Win", "Draw"],
    ]


def test_payoff_rows_are_balanced() -> None:
    rows = payoff_rows(validate_moves(["a", "b", "c", "d", "e", "f", "g"]))
    for row in rows:
        cells = row[1:]
        assert cells.count("Win") == 3
        assert cells.count("Lose") == 3
        assert cells.count("Draw") == 1


def test_render_contains_headers_and_cells() -> None:
    table = render_payoff_table(validate_moves(["rock", "paper", "scissors"]))
    assert "v User\\Computer >" in table
    for word in ("rock", "paper", "scissors", "Win", "Lose", "Draw"):
        assert word in table


def test_numeric_move_names_are_kept_verbatim() -> None:
    table = render_payoff_table(validate_moves(["007", "1e3", "x"]), tablefmt="plain")
    assert "007" in table
    assert "1e3" in table
