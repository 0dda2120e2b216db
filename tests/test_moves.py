from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

from moves import (  # type: ignore[import-not-found]  # noqa: E402
    ArgumentCountError,
    DuplicateMoveError,
    MoveSet,
    OddCountViolation,
    ValidationError,
    validate_moves,
)


def test_classic_moves_are_valid() -> None:
    moves = validate_moves(["rock", "paper", "scissors"])
    assert isinstance(moves, MoveSet)
    assert list(moves) == ["rock", "paper", "scissors"]
    assert len(moves) == 3
    assert moves[1] == "paper"


def test_five_moves_are_valid() -> None:
    assert len(validate_moves(["a", "b", "c", "d", "e"])) == 5


def test_original_casing_is_kept() -> None:
    assert validate_moves(["Rock", "PAPER", "scissors"]).names == ("Rock", "PAPER", "scissors")


@pytest.mark.parametrize("moves", [[], ["rock"], ["rock", "paper"], ["a", "b", "c", "d"]])
def test_bad_move_count(moves: list[str]) -> None:
    with pytest.raises(OddCountViolation):
        validate_moves(moves)


def test_duplicates_ignore_case() -> None:
    with pytest.raises(DuplicateMoveError) as info:
        validate_moves(["rock", "ROCK", "paper"])
    assert info.value.first == "rock"
    assert info.value.second == "ROCK"


def test_count_is_checked_before_duplicates() -> None:
    with pytest.raises(ArgumentCountError):
        validate_moves(["rock", "rock"])


def test_errors_share_a_base() -> None:
    assert issubclass(ArgumentCountError, ValidationError)
    assert issubclass(DuplicateMoveError, ValidationError)
    assert issubclass(ValidationError, ValueError)
