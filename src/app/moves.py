from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


class ValidationError(ValueError):
    pass


class ArgumentCountError(ValidationError):
    def __init__(self, count: int) -> None:
        super().__init__("Please enter an odd number of moves, three or more, separated by a space.")
        self.count = count


# Name used when talking about the rule rather than the CLI arguments.
OddCountViolation = ArgumentCountError


class DuplicateMoveError(ValidationError):
    def __init__(self, first: str, second: str) -> None:
        super().__init__(f"duplicate moves {first!r} and {second!r}. All moves must be unique.")
        self.first = first
        self.second = second


@dataclass(frozen=True)
class MoveSet:
    """Validated moves, in the order given. Build it with ``validate_moves``."""

    names: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __getitem__(self, index: int) -> str:
        return self.names[index]


def validate_moves(moves: Iterable[str]) -> MoveSet:
    names = tuple(moves)
    if len(names) < 3 or len(names) % 2 == 0:
        raise ArgumentCountError(len(names))

    seen: dict[str, str] = {}
    for name in names:
        key = name.casefold()
        if key in seen:
            raise DuplicateMoveError(seen[key], name)
        seen[key] = name

    return MoveSet(names=names)
