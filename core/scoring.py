"""Password strength scoring.

Combines the entropy estimate, weak-pattern flags and length into a
0-100 score, a qualitative rating, and an ordered list of suggestions.

Scoring steps:
1. Entropy rounded to one decimal, mapped linearly so FULL_STRENGTH_BITS = 100
2. Penalty multipliers compounded in a fixed order (common, repeated,
   sequential, short)
3. Mixed-class bonus after penalties (+6 for 3 classes, +12 for all 4)
4. Rounded to the nearest integer and mapped to a rating
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from core.config import (
    FULL_STRENGTH_BITS,
    COMMON_PENALTY,
    REPEAT_PENALTY,
    SEQUENCE_PENALTY,
    SHORT_PENALTY,
    SHORT_PASSWORD_LENGTH,
    RECOMMENDED_LENGTH,
    CLASS_BONUS,
    EXCELLENT_THRESHOLD,
    STRONG_THRESHOLD,
    MODERATE_THRESHOLD,
    WEAK_THRESHOLD,
)
from core.entropy import entropy_bits, round_half_up
from core.patterns import (
    character_classes,
    has_repeated_chars,
    has_sequential_chars,
    is_common,
)


class Rating(str, Enum):
    """Qualitative strength rating, ordered weakest to strongest."""

    VERY_WEAK = "Very Weak"
    WEAK = "Weak"
    MODERATE = "Moderate"
    STRONG = "Strong"
    EXCELLENT = "Excellent"


# highest threshold first
RATING_THRESHOLDS = (
    (EXCELLENT_THRESHOLD, Rating.EXCELLENT),
    (STRONG_THRESHOLD, Rating.STRONG),
    (MODERATE_THRESHOLD, Rating.MODERATE),
    (WEAK_THRESHOLD, Rating.WEAK),
)

# Suggestion messages
COMMON_TIP = "Avoid common passwords (e.g., '123456', 'password'). Use unique passphrases or random strings."
LENGTH_TIP = "Increase length to 12+ characters, length multiplies strength."
LOWER_TIP = "Add lowercase letters."
UPPER_TIP = "Add uppercase letters."
DIGIT_TIP = "Add digits (0-9)."
SYMBOL_TIP = "Include symbols (e.g., !@#$%)."
REPEAT_TIP = "Avoid long repeated characters like 'aaaa' or '1111'."
SEQUENCE_TIP = "Avoid simple sequences like 'abcd', '1234', or keyboard patterns like 'qwerty'."
POSITIVE_TIP = "Looks good. Consider using a memorable passphrase or a password manager to store it."


@dataclass(frozen=True)
class CharacterClasses:
    """Which character classes a password uses."""

    lower: bool
    upper: bool
    digits: bool
    symbols: bool

    @property
    def count(self) -> int:
        return sum((self.lower, self.upper, self.digits, self.symbols))


@dataclass(frozen=True)
class PatternFlags:
    """Weakness flags and composition facts for one password."""

    is_common: bool
    repeated: bool
    sequential: bool
    length: int
    classes: CharacterClasses


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of a single evaluate() call."""

    entropy_bits: float
    score: int
    rating: Rating
    suggestions: tuple[str, ...]
    flags: PatternFlags
    classes_count: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the meter's wire shape (camelCase keys)."""
        classes = self.flags.classes
        return {
            "entropy": self.entropy_bits,
            "score": self.score,
            "rating": self.rating.value,
            "suggestions": list(self.suggestions),
            "flags": {
                "isCommon": self.flags.is_common,
                "repeated": self.flags.repeated,
                "sequential": self.flags.sequential,
                "length": self.flags.length,
                "classes": {
                    "lower": classes.lower,
                    "upper": classes.upper,
                    "digits": classes.digits,
                    "symbols": classes.symbols,
                },
            },
            "classesCount": self.classes_count,
        }


def _normalize_input(password: Any) -> str:
    if not password:
        return ""
    if isinstance(password, str):
        return password
    if isinstance(password, (bytes, bytearray)):
        return bytes(password).decode("utf-8", errors="replace")
    return str(password)


def detect_flags(password: str) -> PatternFlags:
    """Run every pattern check against password."""
    return PatternFlags(
        is_common=is_common(password),
        repeated=has_repeated_chars(password),
        sequential=has_sequential_chars(password),
        length=len(password),
        classes=CharacterClasses(*character_classes(password)),
    )


def apply_penalties(base: float, flags: PatternFlags) -> float:
    """Compound each applicable penalty multiplier onto base, in order."""
    penalties = (
        (flags.is_common, COMMON_PENALTY),
        (flags.repeated, REPEAT_PENALTY),
        (flags.sequential, SEQUENCE_PENALTY),
        (flags.length < SHORT_PASSWORD_LENGTH, SHORT_PENALTY),
    )
    for applies, multiplier in penalties:
        if applies:
            base *= multiplier
    return base


def apply_class_bonus(base: float, classes_count: int) -> float:
    """Add the mixed-class bonus, capped at 100 after each step."""
    if classes_count >= 3:
        base = min(100.0, base + CLASS_BONUS)
    if classes_count == 4:
        base = min(100.0, base + CLASS_BONUS)
    return base


def rating_for_score(score: int) -> Rating:
    """Map a 0-100 score to its rating."""
    for threshold, rating in RATING_THRESHOLDS:
        if score >= threshold:
            return rating
    return Rating.VERY_WEAK


def build_suggestions(flags: PatternFlags) -> tuple[str, ...]:
    """Collect improvement tips in fixed check order.

    Falls back to a single positive message when nothing applies.
    """
    checks = (
        (flags.is_common, COMMON_TIP),
        (flags.length < RECOMMENDED_LENGTH, LENGTH_TIP),
        (not flags.classes.lower, LOWER_TIP),
        (not flags.classes.upper, UPPER_TIP),
        (not flags.classes.digits, DIGIT_TIP),
        (not flags.classes.symbols, SYMBOL_TIP),
        (flags.repeated, REPEAT_TIP),
        (flags.sequential, SEQUENCE_TIP),
    )
    suggestions = tuple(tip for applies, tip in checks if applies)
    return suggestions or (POSITIVE_TIP,)


def evaluate(password: Any) -> EvaluationResult:
    """Score a candidate password.

    Never raises: None, empty or non-string input degrades to the
    weakest possible result.

    Args:
        password: Candidate password

    Returns:
        A new EvaluationResult
    """
    password = _normalize_input(password)
    bits = round_half_up(entropy_bits(password), 1)
    flags = detect_flags(password)
    classes_count = flags.classes.count

    base = min(100.0, max(0.0, bits / FULL_STRENGTH_BITS * 100))
    base = apply_penalties(base, flags)
    base = apply_class_bonus(base, classes_count)

    score = int(round_half_up(base))

    return EvaluationResult(
        entropy_bits=bits,
        score=score,
        rating=rating_for_score(score),
        suggestions=build_suggestions(flags),
        flags=flags,
        classes_count=classes_count,
    )
