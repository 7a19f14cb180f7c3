"""
Configuration for secutil.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .alphabets import find_alphabet
from .errors import ConfigError

# bcrypt accepts log2 work factors in this range.
MIN_BCRYPT_COST = 4
MAX_BCRYPT_COST = 31

# Compact UTC timestamp used in identifiers and filenames: 20240131235959
DEFAULT_TIME_FORMAT = "%Y%m%d%H%M%S"


@dataclass
class SecutilConfig:
    # Preset used by random_id() when no alphabet is given.
    # Also used for selectors that name no preset.
    default_alphabet: str = "alphanum"

    # Minimum number of classified characters a password needs.
    min_password_length: int = 8

    # bcrypt work factor (log2 rounds). Each +1 doubles hashing time.
    bcrypt_cost: int = 10

    # strftime() format used by formatted_time() when none is given.
    time_format: str = DEFAULT_TIME_FORMAT

    def __post_init__(self) -> None:
        if find_alphabet(self.default_alphabet) is None:
            raise ConfigError(
                f"default_alphabet={self.default_alphabet!r} names no alphabet preset"
            )
        if self.min_password_length < 1:
            raise ConfigError(
                f"min_password_length must be positive, got {self.min_password_length}"
            )
        if not MIN_BCRYPT_COST <= self.bcrypt_cost <= MAX_BCRYPT_COST:
            raise ConfigError(
                f"bcrypt_cost={self.bcrypt_cost} outside "
                f"{MIN_BCRYPT_COST}..{MAX_BCRYPT_COST}"
            )
        if not self.time_format:
            self.time_format = DEFAULT_TIME_FORMAT

    @classmethod
    def from_env(cls) -> "SecutilConfig":
        """
        Build a config from SECUTIL_* environment variables.

        Unset variables keep the dataclass defaults.
        """
        defaults = cls()
        try:
            return cls(
                default_alphabet=os.getenv(
                    "SECUTIL_DEFAULT_ALPHABET", defaults.default_alphabet
                ),
                min_password_length=int(
                    os.getenv(
                        "SECUTIL_MIN_PASSWORD_LENGTH",
                        str(defaults.min_password_length),
                    )
                ),
                bcrypt_cost=int(
                    os.getenv("SECUTIL_BCRYPT_COST", str(defaults.bcrypt_cost))
                ),
                time_format=os.getenv("SECUTIL_TIME_FORMAT", defaults.time_format),
            )
        except ValueError as exc:
            raise ConfigError(f"Invalid SECUTIL_* environment value: {exc}") from exc


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = SecutilConfig()
