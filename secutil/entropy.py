"""
Secure entropy source:
Reads random bytes from the operating system CSPRNG.
"""

from __future__ import annotations

import math
import os

from .errors import EntropyUnavailable


def secure_bytes(count: int) -> bytes:
    """
    Return `count` bytes from os.urandom().

    Never falls back to the `random` module: if the OS source fails,
    EntropyUnavailable is raised and the calling operation fails with it.
    """
    if count < 0:
        raise ValueError(f"byte count must be non-negative, got {count}")
    if count == 0:
        return b""

    try:
        data = os.urandom(count)
    except (OSError, NotImplementedError) as exc:
        raise EntropyUnavailable(
            f"Secure random source failed to supply {count} bytes."
        ) from exc

    if len(data) != count:
        raise EntropyUnavailable(
            f"Secure random source returned {len(data)} of {count} bytes."
        )
    return data


def estimate_entropy_bits(length: int, alphabet: str) -> float:
    """
    Theoretical entropy of a `length`-character string drawn uniformly
    from `alphabet`: length * log2(len(alphabet)).
    """
    if length <= 0 or len(alphabet) < 2:
        return 0.0
    return length * math.log2(len(alphabet))
