"""Password Strength Meter Core Package.

Provides the scoring engine and the password generator:
- config: Centralized configuration constants
- patterns: Common password, repeated run and sequence detection
- entropy: Character pool and entropy estimation
- scoring: Score, rating and suggestions for a candidate password
- generator: Cryptographically secure password generation
- events: Structured event logging
"""

# Configuration constants
from core.config import (
    LOG_DIR,
    EVENT_LOG_FILE,
    MIN_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
    DEFAULT_PASSWORD_LENGTH,
    QUICK_GENERATE_LENGTH,
    MAX_EVALUATE_LENGTH,
)

# Pattern detection
from core.patterns import (
    COMMON_PASSWORDS,
    SEQUENCE_PATTERNS,
    is_common,
    has_repeated_chars,
    has_sequential_chars,
    character_classes,
)

# Entropy estimation
from core.entropy import pool_size, entropy_bits

# Scoring
from core.scoring import (
    Rating,
    CharacterClasses,
    PatternFlags,
    EvaluationResult,
    evaluate,
    rating_for_score,
    build_suggestions,
)

# Generation
from core.generator import (
    GeneratorOptions,
    InvalidLengthError,
    generate,
    generate_password,
)

# Event logging
from core.events import (
    log_event,
    summarize_result,
    get_events,
    count_events_by_status,
    count_ratings,
)

__all__ = [
    # Config
    "LOG_DIR",
    "EVENT_LOG_FILE",
    "MIN_PASSWORD_LENGTH",
    "MAX_PASSWORD_LENGTH",
    "DEFAULT_PASSWORD_LENGTH",
    "QUICK_GENERATE_LENGTH",
    "MAX_EVALUATE_LENGTH",
    # Patterns
    "COMMON_PASSWORDS",
    "SEQUENCE_PATTERNS",
    "is_common",
    "has_repeated_chars",
    "has_sequential_chars",
    "character_classes",
    # Entropy
    "pool_size",
    "entropy_bits",
    # Scoring
    "Rating",
    "CharacterClasses",
    "PatternFlags",
    "EvaluationResult",
    "evaluate",
    "rating_for_score",
    "build_suggestions",
    # Generator
    "GeneratorOptions",
    "InvalidLengthError",
    "generate",
    "generate_password",
    # Events
    "log_event",
    "summarize_result",
    "get_events",
    "count_events_by_status",
    "count_ratings",
]
