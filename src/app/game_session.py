from __future__ import annotations

import random
from enum import Enum
from typing import Callable

from commit_reveal import compute_commitment, generate_key, reveal_key
from help_table import DEFAULT_TABLE_FORMAT, render_payoff_table
from moves import MoveSet
from protocol import RoundOutcome, determine_outcome, parse_input_token


class SessionState(str, Enum):
    AWAITING_MOVE_SET = "awaiting_move_set"
    COMMITMENT_PUBLISHED = "commitment_published"
    AWAITING_PLAYER_MOVE = "awaiting_player_move"
    RESOLVED = "resolved"
    QUIT = "quit"


class GameSession:
    """One round against the computer.

    The computer's move is fixed and its HMAC published in ``start()``, before
    any player input is read. The key is revealed only in ``resolve()``.

    ``rng`` picks the computer's move and only needs to be uniform.
    ``key_factory`` must be a secure source; it defaults to ``generate_key``.
    """

    def __init__(
        self,
        moves: MoveSet,
        *,
        rng: random.Random | None = None,
        key_factory: Callable[[], bytes] = generate_key,
        read_line: Callable[[], str] | None = None,
        write: Callable[[str], None] | None = None,
        table_format: str = DEFAULT_TABLE_FORMAT,
    ) -> None:
        self.moves = moves
        self.rng = rng if rng is not None else random.Random()
        self.key_factory = key_factory
        self.read_line = read_line if read_line is not None else input
        self.write = write if write is not None else print
        self.table_format = table_format

        self.state = SessionState.AWAITING_MOVE_SET
        self.commitment: str | None = None
        self._computer_move: int | None = None
        self._key: bytes | None = None

    def start(self) -> str:
        self._require(SessionState.AWAITING_MOVE_SET)
        self._computer_move = self.rng.randrange(len(self.moves))
        self._key = self.key_factory()
        self.commitment = compute_commitment(key=self._key, move=self.moves[self._computer_move])
        self.state = SessionState.COMMITMENT_PUBLISHED

        self.write(f"Computer move HMAC: {self.commitment}")
        self._show_available_moves()
        return self.commitment

    def await_player_move(self) -> int | None:
        """Block until the player picks a move (0-based index) or quits (None)."""
        self._require(SessionState.COMMITMENT_PUBLISHED, SessionState.AWAITING_PLAYER_MOVE)
        self.state = SessionState.AWAITING_PLAYER_MOVE
        n = len(self.moves)
        while True:
            command = parse_input_token(self.read_line(), n)
            if command.kind == "help":
                self.write(render_payoff_table(self.moves, self.table_format))
            elif command.kind == "quit":
                self.write("The program is complete.")
                self.quit()
                return None
            elif command.kind == "move":
                return command.index
            else:
                self.write(
                    "Error: Type 'help' for display help table, '0' to quit, "
                    f"or one of the valid move numbers (1 - {n})."
                )

    def resolve(self, player_move: int) -> RoundOutcome:
        self._require(SessionState.AWAITING_PLAYER_MOVE)
        if self._key is None or self._computer_move is None or self.commitment is None:
            raise RuntimeError("no commitment to resolve")

        computer_move = self._computer_move
        outcome = RoundOutcome(
            result=determine_outcome(player_move, computer_move, len(self.moves)),
            player_move=player_move,
            computer_move=computer_move,
            player_move_name=self.moves[player_move],
            computer_move_name=self.moves[computer_move],
            commitment=self.commitment,
            key_hex=reveal_key(self._key),
        )
        # Single use: forget the key once it has been shown.
        self._key = None
        self.state = SessionState.RESOLVED

        self.write(f"Your move: {player_move + 1} ({outcome.player_move_name})")
        self.write(f"Computer move: {computer_move + 1} ({outcome.computer_move_name})")
        self.write(outcome.message())
        self.write(f"Computer move key: {outcome.key_hex}")
        return outcome

    def play(self) -> RoundOutcome | None:
        self.start()
        player_move = self.await_player_move()
        if player_move is None:
            return None
        return self.resolve(player_move)

    def quit(self) -> None:
        self._key = None
        self.state = SessionState.QUIT

    def _show_available_moves(self) -> None:
        self.write("Type 'help' for display help table.")
        self.write("Type '0' to quit, or select one of the valid move numbers.")
        self.write("Moves list:")
        for i, name in enumerate(self.moves, start=1):
            self.write(f"{i}: {name}")

    def _require(self, *allowed: SessionState) -> None:
        if self.state not in allowed:
            raise RuntimeError(f"operation not allowed in state {self.state.value}")
