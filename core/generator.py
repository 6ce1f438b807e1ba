"""Secure password generation.

Draws every character from the operating system's CSPRNG and guarantees
at least one lowercase, uppercase, digit and symbol character.
"""

import secrets
import string
from dataclasses import dataclass

from core.config import DEFAULT_PASSWORD_LENGTH, MIN_PASSWORD_LENGTH


LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()-_=+[]{};:,.<>?/|"

# one mandatory character per pool, drawn in this order
CHARACTER_POOLS = (LOWERCASE, UPPERCASE, DIGITS, SYMBOLS)
ALL_CHARACTERS = "".join(CHARACTER_POOLS)

# SystemRandom draws via randbelow, so index selection has no modulo bias
_rng = secrets.SystemRandom()


class InvalidLengthError(ValueError):
    """Requested length cannot hold one character of every class."""
    pass


@dataclass(frozen=True)
class GeneratorOptions:
    """Per-call generation options.

    Raises:
        InvalidLengthError: If length is not an integer of at least 4
    """

    length: int = DEFAULT_PASSWORD_LENGTH

    def __post_init__(self) -> None:
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise InvalidLengthError(
                f"Password length must be an integer, got {type(self.length).__name__}."
            )
        if self.length < MIN_PASSWORD_LENGTH:
            raise InvalidLengthError(
                f"Password length must be at least {MIN_PASSWORD_LENGTH} "
                "to include all character types."
            )


def generate(options: GeneratorOptions) -> str:
    """Generate a random password as described by options.

    Returns:
        Password of exactly options.length characters
    """
    # Guarantee one character from each class
    password_chars = [secrets.choice(pool) for pool in CHARACTER_POOLS]

    # Fill remaining length from combined pool
    remaining_length = options.length - len(password_chars)
    password_chars.extend(secrets.choice(ALL_CHARACTERS) for _ in range(remaining_length))

    # Fisher-Yates shuffle so the guaranteed characters are not up front
    _rng.shuffle(password_chars)

    return ''.join(password_chars)


def generate_password(length: int = DEFAULT_PASSWORD_LENGTH) -> str:
    """Generate a secure password of the given length.

    Raises:
        InvalidLengthError: If length is below 4 or not an integer
    """
    return generate(GeneratorOptions(length=length))
