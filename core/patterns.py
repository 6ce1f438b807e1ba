"""Weak pattern detection.

Flags known-common passwords, long runs of one repeated character, and
runs taken from ordered reference strings (digits, alphabet, keyboard rows).
"""

import re

from core.config import MIN_REPEAT_RUN, MIN_SEQUENCE_LENGTH


# common weak passwords (not exhaustive), stored lowercase
COMMON_PASSWORDS = frozenset({
    "123456", "123456789", "qwerty", "password", "1234567", "12345678", "12345", "111111",
    "123123", "abc123", "password1", "iloveyou", "admin", "welcome", "monkey", "letmein",
})

# ordered reference strings for sequence and keyboard-row detection
SEQUENCE_PATTERNS = (
    "0123456789",
    "abcdefghijklmnopqrstuvwxyz",
    "qwertyuiop",
    "asdfghjkl",
    "zxcvbnm",
)

# no substring longer than this can lie inside a reference string
_LONGEST_PATTERN = max(len(seq) for seq in SEQUENCE_PATTERNS)

_LOWER_RE = re.compile(r'[a-z]')
_UPPER_RE = re.compile(r'[A-Z]')
_DIGIT_RE = re.compile(r'[0-9]')
_SYMBOL_RE = re.compile(r'[^A-Za-z0-9]')


def is_common(password: str) -> bool:
    """Check for an exact, case-insensitive match in the common password list."""
    return password.lower() in COMMON_PASSWORDS


def has_repeated_chars(password: str, min_run: int = MIN_REPEAT_RUN) -> bool:
    """Check for any single character repeated min_run or more times in a row.

    Case-sensitive: "AAaa" is not a run.
    """
    if len(password) < min_run:
        return False
    return re.search(rf'(.)\1{{{min_run - 1},}}', password) is not None


def _in_any_pattern(fragment: str) -> bool:
    reversed_fragment = fragment[::-1]
    return any(
        fragment in seq or reversed_fragment in seq
        for seq in SEQUENCE_PATTERNS
    )


def has_sequential_chars(password: str, min_len: int = MIN_SEQUENCE_LENGTH) -> bool:
    """Check for a run of min_len+ characters taken from a reference sequence.

    Case-insensitive. Every substring of at least min_len characters is
    tested against each reference string, forwards and reversed, so
    "4321" and "zyxw" are caught as well as "abcd" and "qwer".

    Args:
        password: Candidate password
        min_len: Shortest run that counts as sequential

    Returns:
        True on the first matching substring, False otherwise
    """
    lowered = password.lower()
    n = len(lowered)
    if n < min_len:
        return False

    for start in range(n - min_len + 1):
        stop = min(n, start + _LONGEST_PATTERN)
        for end in range(start + min_len, stop + 1):
            if _in_any_pattern(lowered[start:end]):
                return True

    return False


def character_classes(password: str) -> tuple[bool, bool, bool, bool]:
    """Report which character classes are present.

    Returns:
        Tuple of (lower, upper, digits, symbols) presence flags. Anything
        outside [A-Za-z0-9] counts as a symbol.
    """
    return (
        _LOWER_RE.search(password) is not None,
        _UPPER_RE.search(password) is not None,
        _DIGIT_RE.search(password) is not None,
        _SYMBOL_RE.search(password) is not None,
    )
