"""
Mapping logic: Convert random bytes into characters of an alphabet.
"""

from __future__ import annotations

from typing import Callable


def bytes_to_chars(data: bytes, alphabet: str) -> str:
    """
    Map each byte to alphabet[byte % len(alphabet)], keeping draw order.

    Unless len(alphabet) divides 256 the low indexes are slightly more
    likely (for 62 characters: 5/256 vs 4/256 per character). Use
    uniform_chars() when that matters.
    """
    if not alphabet:
        raise ValueError("alphabet must not be empty")

    size = len(alphabet)
    return "".join(alphabet[b % size] for b in data)


def uniform_chars(
    length: int,
    alphabet: str,
    read_bytes: Callable[[int], bytes],
) -> str:
    """
    Draw `length` characters with rejection sampling.

    Bytes >= 256 - (256 % size) are discarded so every character of the
    alphabet has the same probability. read_bytes is called again until
    enough bytes were accepted.
    """
    if not alphabet:
        raise ValueError("alphabet must not be empty")

    size = len(alphabet)
    limit = 256 - (256 % size)
    chars: list[str] = []

    while len(chars) < length:
        missing = length - len(chars)
        # Over-draw a little so one round usually suffices.
        batch = read_bytes(missing + missing // 4 + 1)
        for b in batch:
            if b < limit:
                chars.append(alphabet[b % size])
                if len(chars) == length:
                    break

    return "".join(chars)
