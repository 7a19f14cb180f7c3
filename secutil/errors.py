"""
Error types raised by secutil.

A weak password is not an error (validation returns False) and an
unknown alphabet name is not an error (the default alphabet is used).
"""

from __future__ import annotations


class SecutilError(Exception):
    """Base class for all secutil errors."""


class EntropyUnavailable(SecutilError):
    """The operating system could not supply secure random bytes."""


class HashingFailure(SecutilError):
    """The password hashing primitive rejected the input or failed."""


class ConfigError(SecutilError):
    """A configuration value is out of range or malformed."""
