from __future__ import annotations

import hashlib
import hmac
import secrets
from typing import Final

KEY_BYTES: Final[int] = 32


class SecureRandomUnavailable(RuntimeError):
    pass


def generate_key(num_bytes: int = KEY_BYTES) -> bytes:
    # Must come from the OS CSPRNG; the move itself is picked with `random`.
    try:
        return secrets.token_bytes(num_bytes)
    except (NotImplementedError, OSError) as exc:
        raise SecureRandomUnavailable(f"secure random source unavailable: {exc}") from exc


def compute_commitment(*, key: bytes, move: str) -> str:
    return hmac.new(key, move.encode("utf-8"), hashlib.sha256).hexdigest()


def reveal_key(key: bytes) -> str:
    # Same lowercase hex as hexdigest() so both values read alike on screen.
    return key.hex()


def verify_commitment(*, expected_commitment: str, key_hex: str, move: str) -> bool:
    try:
        key = bytes.fromhex(key_hex)
    except ValueError:
        return False
    computed = compute_commitment(key=key, move=move)
    return secrets.compare_digest(
        expected_commitment.strip().lower().encode("utf-8"),
        computed.encode("ascii"),
    )
