"""
Password strength validation.

A password passes when it contains at least one uppercase letter, one
lowercase letter, one digit and one punctuation/symbol character, and
has at least `minimum_length` of those characters in total.

Characters are classified by their Unicode general category, so "É",
"ß", "٣" and "€" count like "E", "s", "3" and "$". Any character that
fits none of the four classes (spaces, control characters, CJK
ideographs, combining marks, ...) rejects the whole password.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum

from .config import DEFAULT_CONFIG


class CharClass(Enum):
    UPPER = "upper"
    LOWER = "lower"
    DIGIT = "digit"
    SYMBOL = "symbol"
    OTHER = "other"


def classify_char(ch: str) -> CharClass:
    """Classify a single code point."""
    category = unicodedata.category(ch)
    if category == "Lu":
        return CharClass.UPPER
    if category == "Ll":
        return CharClass.LOWER
    if category[0] == "N":
        return CharClass.DIGIT
    if category[0] in ("P", "S"):
        return CharClass.SYMBOL
    return CharClass.OTHER


@dataclass
class StrengthReport:
    minimum_length: int
    has_upper: bool = False
    has_lower: bool = False
    has_digit: bool = False
    has_symbol: bool = False
    classified_count: int = 0
    # First character that fits no class; its presence fails the check.
    disallowed: str | None = None

    @property
    def ok(self) -> bool:
        return (
            self.disallowed is None
            and self.has_upper
            and self.has_lower
            and self.has_digit
            and self.has_symbol
            and self.classified_count >= self.minimum_length
        )

    def missing(self) -> list[str]:
        """Human readable list of unmet requirements, empty when ok."""
        if self.disallowed is not None:
            return [f"disallowed character {self.disallowed!r}"]

        problems = []
        if not self.has_upper:
            problems.append("uppercase letter")
        if not self.has_lower:
            problems.append("lowercase letter")
        if not self.has_digit:
            problems.append("digit")
        if not self.has_symbol:
            problems.append("symbol")
        if self.classified_count < self.minimum_length:
            problems.append(f"at least {self.minimum_length} characters")
        return problems


def check_password(candidate: str, minimum_length: int | None = None) -> StrengthReport:
    """
    Scan `candidate` once and report which requirements it meets.

    Scanning stops at the first disallowed character.
    """
    if minimum_length is None:
        minimum_length = DEFAULT_CONFIG.min_password_length

    report = StrengthReport(minimum_length=minimum_length)

    for ch in candidate:
        kind = classify_char(ch)
        if kind is CharClass.OTHER:
            report.disallowed = ch
            return report

        if kind is CharClass.UPPER:
            report.has_upper = True
        elif kind is CharClass.LOWER:
            report.has_lower = True
        elif kind is CharClass.DIGIT:
            report.has_digit = True
        else:
            report.has_symbol = True
        report.classified_count += 1

    return report


def validate_password(candidate: str, minimum_length: int | None = None) -> bool:
    """True if `candidate` satisfies the four-class policy and minimum length."""
    return check_password(candidate, minimum_length).ok
