from concurrent.futures import ThreadPoolExecutor

import pytest

from passgen import generator
from passgen.generator import DIGITS, LETTERS, SIMILAR_CHARS, SYMBOLS, build_alphabet, generate
from passgen.errors import (
    EmptyAlphabetError,
    InvalidLengthError,
    OutOfRangeError,
    PasswordGenerationError,
    RandomSourceError,
)

FLAG_COMBOS = [
    (symbols, digits, similar)
    for symbols in (False, True)
    for digits in (False, True)
    for similar in (False, True)
]


def test_build_alphabet_order():
    assert build_alphabet(include_digits=False, include_symbols=False) == LETTERS
    assert build_alphabet(include_digits=True, include_symbols=True) == LETTERS + DIGITS + SYMBOLS


def test_build_alphabet_exclude_similar_keeps_order():
    chars = build_alphabet(include_digits=True, include_symbols=False, exclude_similar=True)
    expected = "".join(c for c in LETTERS + DIGITS if c not in SIMILAR_CHARS)
    assert chars == expected
    for c in "lI1oO0":
        assert c not in chars


@pytest.mark.parametrize("symbols,digits,similar", FLAG_COMBOS)
def test_length_and_alphabet(symbols, digits, similar):
    alphabet = build_alphabet(include_digits=digits, include_symbols=symbols, exclude_similar=similar)
    pw = generate(64, include_symbols=symbols, include_digits=digits, exclude_similar=similar)
    assert len(pw) == 64
    assert all(c in alphabet for c in pw)
    if similar:
        assert not any(c in SIMILAR_CHARS for c in pw)
    if not symbols:
        assert not any(c in SYMBOLS for c in pw)


def test_letters_and_digits_only():
    pw = generate(12, include_symbols=False, include_digits=True, exclude_similar=False)
    assert len(pw) == 12
    assert pw.isalnum()


def test_exclude_similar_with_symbols():
    for _ in range(20):
        pw = generate(8, include_symbols=True, include_digits=True, exclude_similar=True)
        assert len(pw) == 8
        for c in SIMILAR_CHARS:
            assert c not in pw


def test_no_digits():
    pw = generate(100, include_digits=False)
    assert not any(c in DIGITS for c in pw)


@pytest.mark.parametrize("length", [0, -1, -50])
def test_non_positive_length_raises(length):
    with pytest.raises(InvalidLengthError, match="greater than zero"):
        generate(length)


def test_non_positive_length_checked_before_range():
    with pytest.raises(InvalidLengthError):
        generate(0, min_length=5, max_length=10)


@pytest.mark.parametrize("length", [4, 7, 129, 500])
def test_out_of_default_range(length):
    with pytest.raises(OutOfRangeError) as exc:
        generate(length)
    assert "8" in str(exc.value)
    assert "128" in str(exc.value)
    assert exc.value.length == length


def test_custom_bounds():
    assert len(generate(4, min_length=2, max_length=6)) == 4
    with pytest.raises(OutOfRangeError, match="between 20 and 30"):
        generate(12, min_length=20, max_length=30)


def test_bounds_are_inclusive():
    assert len(generate(8)) == 8
    assert len(generate(128)) == 128


def test_errors_are_value_errors():
    # callers catching ValueError still see bad requests
    with pytest.raises(ValueError):
        generate(-1)
    assert issubclass(OutOfRangeError, PasswordGenerationError)
    assert not issubclass(RandomSourceError, ValueError)


def test_empty_alphabet(monkeypatch):
    monkeypatch.setattr(generator, "LETTERS", "lIoO")
    with pytest.raises(EmptyAlphabetError):
        generate(12, include_digits=False, exclude_similar=True)


def test_random_source_failure(monkeypatch):
    def broken(n):
        raise OSError("entropy unavailable")

    monkeypatch.setattr(generator, "token_bytes", broken)
    with pytest.raises(RandomSourceError, match="entropy unavailable") as exc:
        generate(12)
    assert isinstance(exc.value.__cause__, OSError)


def test_short_read_from_random_source(monkeypatch):
    monkeypatch.setattr(generator, "token_bytes", lambda n: b"\x00" * (n - 1))
    with pytest.raises(RandomSourceError):
        generate(12)


def test_modulo_mapping(monkeypatch):
    # 62 characters: byte 62 wraps to "a", byte 255 is 255 % 62 == 7
    monkeypatch.setattr(generator, "token_bytes", lambda n: bytes([0, 61, 62, 255] * (n // 4)))
    pw = generate(8, include_digits=True)
    assert pw == "a9ah" * 2


def test_randomness():
    passwords = {generate(16) for _ in range(20)}
    assert len(passwords) == 20


def test_concurrent_calls():
    alphabet = build_alphabet(include_digits=True, include_symbols=True, exclude_similar=True)
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(
            lambda n: generate(n, include_symbols=True, exclude_similar=True),
            [8 + i % 100 for i in range(200)],
        ))
    for i, pw in enumerate(results):
        assert len(pw) == 8 + i % 100
        assert all(c in alphabet for c in pw)
    assert len(set(results)) == len(results)
