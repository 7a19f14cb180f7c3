"""
One-way password hashing with bcrypt.

The encoded hash ("$2b$<cost>$<salt><digest>") carries its own salt and
work factor, so it is the only thing callers need to store.
"""

from __future__ import annotations

import logging
import re

import bcrypt

from .config import DEFAULT_CONFIG, MAX_BCRYPT_COST, MIN_BCRYPT_COST
from .errors import HashingFailure

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of its input.
MAX_PASSWORD_BYTES = 72

_HASH_RE = re.compile(r"^\$2[abxy]?\$(\d{2})\$[./A-Za-z0-9]{53}$")


def _encode(password: str) -> bytes:
    data = password.encode("utf-8")
    if len(data) > MAX_PASSWORD_BYTES:
        raise HashingFailure(
            f"Password is {len(data)} bytes; bcrypt accepts at most {MAX_PASSWORD_BYTES}."
        )
    if b"\x00" in data:
        raise HashingFailure("Password must not contain NUL characters.")
    return data


def hash_password(password: str, cost: int | None = None) -> str:
    """
    Hash `password` with a fresh random salt.

    Two calls with the same password return different strings that both
    verify. Raises HashingFailure if bcrypt cannot hash the input; the
    caller must then reject the credential. A cost outside 4..31 is a
    caller error and raises ValueError.
    """
    if cost is None:
        cost = DEFAULT_CONFIG.bcrypt_cost
    if not MIN_BCRYPT_COST <= cost <= MAX_BCRYPT_COST:
        raise ValueError(
            f"bcrypt cost {cost} outside {MIN_BCRYPT_COST}..{MAX_BCRYPT_COST}"
        )

    data = _encode(password)
    try:
        hashed = bcrypt.hashpw(data, bcrypt.gensalt(rounds=cost))
    except ValueError as exc:
        raise HashingFailure(f"bcrypt rejected the password: {exc}") from exc

    logger.debug("Hashed password with bcrypt cost=%d", cost)
    return hashed.decode("ascii")


def verify_password(password: str, encoded_hash: str) -> bool:
    """
    Compare a plaintext password with a stored bcrypt hash.

    Returns False on mismatch, on a malformed hash and on any error from
    bcrypt; it never raises.
    """
    try:
        data = _encode(password)
        return bcrypt.checkpw(data, encoded_hash.encode("ascii"))
    except (HashingFailure, ValueError, TypeError, AttributeError) as exc:
        logger.debug("Password verification failed: %s", type(exc).__name__)
        return False


def hash_cost(encoded_hash: str) -> int | None:
    """Work factor embedded in `encoded_hash`, or None if it is not a bcrypt hash."""
    match = _HASH_RE.match(encoded_hash or "")
    if match is None:
        return None
    return int(match.group(1))
