from __future__ import annotations

import argparse
import sys

from commit_reveal import SecureRandomUnavailable, verify_commitment
from game_session import GameSession
from help_table import DEFAULT_TABLE_FORMAT, TABLE_FORMATS
from moves import ValidationError, validate_moves


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rps",
        usage="%(prog)s [-h] [--table-format NAME] MOVE [MOVE ...]",
        description="Rock-paper-scissors with any odd number of moves. "
        "The computer's move is committed with HMAC-SHA256 before you choose.",
        epilog="MOVE: odd number (>= 3) of unique moves, in cycle order. Any token is a move, including ones starting with '-'.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--table-format",
        default=DEFAULT_TABLE_FORMAT,
        choices=TABLE_FORMATS,
        metavar="NAME",
        help=f"tabulate format for the help table (default: {DEFAULT_TABLE_FORMAT})",
    )
    # Moves are whatever argparse does not claim, in the order given.
    args, move_args = parser.parse_known_args(argv)
    if "--" in move_args:
        move_args.remove("--")

    try:
        moves = validate_moves(move_args)
    except ValidationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Welcome to the game '{', '.join(moves)}'. The game is played until one win. Good luck.\n")

    session = GameSession(moves, table_format=args.table_format)
    try:
        session.play()
    except SecureRandomUnavailable as exc:
        print(f"Error: {exc}. Cannot commit to a move fairly.", file=sys.stderr)
        return 2
    except EOFError:
        session.quit()
        print("\nGame interrupted.")
        return 0
    except KeyboardInterrupt:
        session.quit()
        print("\nGame interrupted.")
        return 130
    return 0


def verify_main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rps-verify",
        description="Check that a revealed key and move reproduce the HMAC shown before the round.",
    )
    parser.add_argument("--key", required=True, help="Computer move key printed after the round (hex)")
    parser.add_argument("--move", required=True, help="Computer move name, exactly as printed")
    parser.add_argument("--hmac", required=True, help="Computer move HMAC printed before the round")
    args = parser.parse_args(argv)

    if verify_commitment(expected_commitment=args.hmac, key_hex=args.key, move=args.move):
        print("OK: commitment matches")
        return 0
    print(f"MISMATCH: HMAC of {args.move!r} under this key is not {args.hmac}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
