"""
Named character sets used as dictionaries for random identifiers.
"""

from __future__ import annotations

from enum import Enum


class Alphabet(str, Enum):
    """
    Closed set of generation alphabets.

    ALPHANUM_NO_SIMILARITY drops glyphs that are easy to confuse when read
    or typed by hand (0/O/o, 1/l/I, 5/S/s, u/v).
    """

    NUMBER = "0123456789"
    ALPHA = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
    ALPHANUM = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
    ALPHANUM_NO_SIMILARITY = "2346789abcdefghijkmnpqrtwxyzABCDEFGHJKLMNPQRTUVWXYZ"

    @property
    def label(self) -> str:
        return _LABELS[self]


DEFAULT_ALPHABET = Alphabet.ALPHANUM

_LABELS = {
    Alphabet.NUMBER: "number",
    Alphabet.ALPHA: "alpha",
    Alphabet.ALPHANUM: "alphanum",
    Alphabet.ALPHANUM_NO_SIMILARITY: "alphanumnosim",
}

# Short names, enum member names and the raw character strings all select
# the same preset.
_LOOKUP: dict[str, Alphabet] = {}
for _member in Alphabet:
    _LOOKUP[_LABELS[_member]] = _member
    _LOOKUP[_member.name.lower()] = _member
    _LOOKUP[_member.value] = _member


def find_alphabet(selector: Alphabet | str | None) -> Alphabet | None:
    """Preset named by `selector`, or None if it names no preset."""
    if isinstance(selector, Alphabet):
        return selector
    if not isinstance(selector, str):
        return None

    key = selector.strip()
    if key in _LOOKUP:
        return _LOOKUP[key]
    return _LOOKUP.get(key.lower())


def resolve_alphabet(
    selector: Alphabet | str | None = None,
    default: Alphabet = DEFAULT_ALPHABET,
) -> Alphabet:
    """
    Map a selector to a preset.

    Unknown selectors (and None) select `default` instead of raising.
    """
    preset = find_alphabet(selector)
    return default if preset is None else preset


def alphabet_names() -> list[str]:
    """Short names accepted by resolve_alphabet(), in declaration order."""
    return [member.label for member in Alphabet]
