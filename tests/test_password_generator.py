"""Tests for password generation."""

import string

import pytest
from core import DEFAULT_PASSWORD_LENGTH, evaluate
from core.generator import (
    ALL_CHARACTERS,
    SYMBOLS,
    GeneratorOptions,
    InvalidLengthError,
    generate,
    generate_password,
)
from core.scoring import Rating


def _has_all_classes(password: str) -> bool:
    return (
        any(c in string.ascii_lowercase for c in password)
        and any(c in string.ascii_uppercase for c in password)
        and any(c in string.digits for c in password)
        and any(c in SYMBOLS for c in password)
    )


class TestPasswordGenerator:
    """Test cases for secure password generation."""

    def test_default_password_length(self):
        """Default password should be 16 characters."""
        password = generate_password()
        assert len(password) == DEFAULT_PASSWORD_LENGTH == 16

    def test_custom_length(self):
        """Password should match requested length."""
        for length in [4, 5, 8, 12, 20, 32, 64, 128]:
            password = generate_password(length=length)
            assert len(password) == length

    def test_options_entry_point(self):
        password = generate(GeneratorOptions(length=24))
        assert len(password) == 24

    def test_all_character_types(self):
        """Every password contains all four classes."""
        for length in range(4, 40):
            for _ in range(5):
                assert _has_all_classes(generate_password(length=length))

    def test_minimum_length_with_all_types(self):
        """Minimum length 4 holds exactly one of each type."""
        for _ in range(50):
            password = generate_password(length=4)
            assert len(password) == 4
            assert sum(1 for c in password if c in string.ascii_lowercase) == 1
            assert sum(1 for c in password if c in string.ascii_uppercase) == 1
            assert sum(1 for c in password if c in string.digits) == 1
            assert sum(1 for c in password if c in SYMBOLS) == 1

    def test_only_known_characters(self):
        password = generate_password(length=128)
        assert set(password) <= set(ALL_CHARACTERS)

    def test_randomness(self):
        """Generated passwords should be different each time."""
        passwords = [generate_password() for _ in range(100)]
        assert len(set(passwords)) == 100

    def test_guaranteed_characters_not_always_first(self):
        """The shuffle moves the mandatory lowercase character around."""
        first_chars = [generate_password(length=16)[0] for _ in range(200)]
        assert not all(c in string.ascii_lowercase for c in first_chars)


class TestLengthValidation:
    """Test rejection of invalid lengths."""

    @pytest.mark.parametrize("length", [3, 2, 1, 0, -1, -16])
    def test_too_short(self, length):
        with pytest.raises(InvalidLengthError):
            generate_password(length=length)

    @pytest.mark.parametrize("length", [4.0, "16", None, True])
    def test_not_an_integer(self, length):
        with pytest.raises(InvalidLengthError):
            GeneratorOptions(length=length)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            generate_password(length=2)

    def test_options_are_immutable(self):
        options = GeneratorOptions(length=8)
        with pytest.raises(AttributeError):
            options.length = 2


class TestRoundTrip:
    """Generated passwords evaluated by the scoring engine."""

    def test_generated_passwords_rate_strong(self):
        """Nearly every 18-character password rates Strong or Excellent."""
        samples = 200
        strong = sum(
            1 for _ in range(samples)
            if evaluate(generate_password(length=18)).rating in (Rating.STRONG, Rating.EXCELLENT)
        )
        assert strong / samples >= 0.95

    def test_generated_passwords_use_all_classes(self):
        for _ in range(20):
            assert evaluate(generate_password(length=18)).classes_count == 4
