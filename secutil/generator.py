"""
High-level random identifier generation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .alphabets import Alphabet, resolve_alphabet
from .config import SecutilConfig, DEFAULT_CONFIG
from .entropy import estimate_entropy_bits, secure_bytes
from .mapping import bytes_to_chars, uniform_chars

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationMeta:
    """
    Full result of one identifier generation.
    """
    # Final identifier
    identifier: str

    # Preset the characters were drawn from
    alphabet: Alphabet

    # Requested (and delivered) length
    length: int

    # length * log2(len(alphabet)); ignores the modulo bias
    entropy_bits: float

    # True if rejection sampling was used instead of plain modulo
    uniform: bool


def random_id_with_meta(
    length: int,
    alphabet: Alphabet | str | None = None,
    *,
    uniform: bool = False,
    config: SecutilConfig | None = None,
) -> GenerationMeta:
    """
    Generation pipeline with metadata:

    - Resolve the alphabet (None and unknown names use the configured default).
    - Read `length` bytes from the OS secure random source.
    - Map each byte into the alphabet.

    Raises EntropyUnavailable if the OS source fails.
    """
    cfg = config or DEFAULT_CONFIG

    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")

    preset = resolve_alphabet(alphabet, default=resolve_alphabet(cfg.default_alphabet))
    chars = preset.value

    if uniform:
        identifier = uniform_chars(length, chars, secure_bytes)
    else:
        identifier = bytes_to_chars(secure_bytes(length), chars)

    logger.debug(
        "Generated random id: length=%d alphabet=%s uniform=%s",
        length,
        preset.label,
        uniform,
    )

    return GenerationMeta(
        identifier=identifier,
        alphabet=preset,
        length=length,
        entropy_bits=estimate_entropy_bits(length, chars),
        uniform=uniform,
    )


def random_id(
    length: int,
    alphabet: Alphabet | str | None = None,
    *,
    uniform: bool = False,
    config: SecutilConfig | None = None,
) -> str:
    """
    Return a random string of `length` characters from `alphabet`.

        random_id(10)                   # 10 alphanumeric characters
        random_id(6, Alphabet.NUMBER)   # 6 digits
        random_id(8, "alphanumnosim")   # no look-alike characters
    """
    meta = random_id_with_meta(length, alphabet, uniform=uniform, config=config)
    return meta.identifier
