"""
passgen.generator
Password generator drawing from the operating system CSPRNG via Python's secrets module.
"""

import logging
from secrets import token_bytes

from .errors import EmptyAlphabetError, InvalidLengthError, OutOfRangeError, RandomSourceError

logger = logging.getLogger(__name__)

LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
SYMBOLS = "!@#$%^&*()-_=+[]{}|;:,.<>/?"
SIMILAR_CHARS = "lI1oO0"

DEFAULT_MIN_LENGTH = 8
DEFAULT_MAX_LENGTH = 128


def build_alphabet(
    include_digits: bool = True,
    include_symbols: bool = False,
    exclude_similar: bool = False,
) -> str:
    """
    Return the characters eligible for sampling, letters first, then digits, then symbols.
    """
    chars = LETTERS
    if include_digits:
        chars += DIGITS
    if include_symbols:
        chars += SYMBOLS

    excluded = set(SIMILAR_CHARS) if exclude_similar else set()
    seen = set()
    out = []
    for c in chars:
        if c in excluded or c in seen:
            continue
        seen.add(c)
        out.append(c)
    return "".join(out)


def generate(
    length: int,
    include_symbols: bool = False,
    include_digits: bool = True,
    exclude_similar: bool = False,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> str:
    """
    Generate a password of `length` characters.

    Each character is alphabet[b % len(alphabet)] for one random byte b, so the
    mapping is slightly biased when the alphabet size does not divide 256.

    Raises InvalidLengthError, OutOfRangeError or EmptyAlphabetError for a bad
    request (checked in that order) and RandomSourceError if the OS entropy
    source fails.
    """
    if length <= 0:
        raise InvalidLengthError("password length must be greater than zero")

    if length < min_length or length > max_length:
        raise OutOfRangeError(length, min_length, max_length)

    chars = build_alphabet(
        include_digits=include_digits,
        include_symbols=include_symbols,
        exclude_similar=exclude_similar,
    )
    if not chars:
        raise EmptyAlphabetError("character set for password is empty")

    logger.debug("drawing %d characters from an alphabet of %d", length, len(chars))
    try:
        raw = token_bytes(length)
    except (OSError, NotImplementedError) as e:
        raise RandomSourceError(f"random source failed: {e}") from e
    if len(raw) != length:
        raise RandomSourceError(f"random source returned {len(raw)} of {length} bytes")

    size = len(chars)
    return "".join(chars[b % size] for b in raw)
