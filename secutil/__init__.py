"""
Security helpers: random identifiers, password strength and bcrypt hashing.
"""

from .alphabets import Alphabet, DEFAULT_ALPHABET, alphabet_names, find_alphabet, resolve_alphabet
from .config import SecutilConfig, DEFAULT_CONFIG
from .errors import ConfigError, EntropyUnavailable, HashingFailure, SecutilError
from .generator import GenerationMeta, random_id, random_id_with_meta
from .hashing import hash_cost, hash_password, verify_password
from .strength import CharClass, StrengthReport, check_password, classify_char, validate_password
from .timeutil import formatted_time

__all__ = [
    "Alphabet",
    "DEFAULT_ALPHABET",
    "alphabet_names",
    "find_alphabet",
    "resolve_alphabet",
    "SecutilConfig",
    "DEFAULT_CONFIG",
    "SecutilError",
    "EntropyUnavailable",
    "HashingFailure",
    "ConfigError",
    "GenerationMeta",
    "random_id",
    "random_id_with_meta",
    "hash_password",
    "verify_password",
    "hash_cost",
    "CharClass",
    "StrengthReport",
    "check_password",
    "classify_char",
    "validate_password",
    "formatted_time",
]
