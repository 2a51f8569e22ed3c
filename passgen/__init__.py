"""passgen: random password generator with configurable character sets."""

from .errors import (
    ConfigError,
    EmptyAlphabetError,
    InvalidLengthError,
    OutOfRangeError,
    PasswordGenerationError,
    PasswordGeneratorError,
    RandomSourceError,
)
from .generator import DIGITS, LETTERS, SIMILAR_CHARS, SYMBOLS, build_alphabet, generate

__all__ = [
    "ConfigError",
    "DIGITS",
    "EmptyAlphabetError",
    "InvalidLengthError",
    "LETTERS",
    "OutOfRangeError",
    "PasswordGenerationError",
    "PasswordGeneratorError",
    "RandomSourceError",
    "SIMILAR_CHARS",
    "SYMBOLS",
    "build_alphabet",
    "generate",
]
