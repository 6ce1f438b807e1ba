"""Centralized configuration constants.

All configurable values in one place for easy maintenance.
Deployment settings can be overridden via environment variables; the
scoring calibration is fixed so scores stay reproducible.
"""

import os

# Base directories
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Directories
LOG_DIR = os.environ.get("LOG_DIR", "logs")
EVENT_LOG_FILE = os.path.join(LOG_DIR, "strength_events.jsonl")

# Log rotation
EVENT_LOG_MAX_BYTES = int(os.environ.get("EVENT_LOG_MAX_BYTES", 10 * 1024 * 1024))  # 10MB default
EVENT_LOG_BACKUP_COUNT = int(os.environ.get("EVENT_LOG_BACKUP_COUNT", 5))

# Entropy calibration
# 60 bits maps to a full-strength base score of 100
FULL_STRENGTH_BITS = 60

# Penalty multipliers, applied in this order on the running score
COMMON_PENALTY = 0.15
REPEAT_PENALTY = 0.6
SEQUENCE_PENALTY = 0.7
SHORT_PENALTY = 0.7

# Length thresholds
SHORT_PASSWORD_LENGTH = 8
RECOMMENDED_LENGTH = 12

# Mixed character class bonus (3+ classes, and again for all 4)
CLASS_BONUS = 6

# Rating thresholds (inclusive lower bounds)
EXCELLENT_THRESHOLD = 85
STRONG_THRESHOLD = 70
MODERATE_THRESHOLD = 50
WEAK_THRESHOLD = 30

# Pattern detection
MIN_REPEAT_RUN = 4
MIN_SEQUENCE_LENGTH = 4

# Password generation
MIN_PASSWORD_LENGTH = 4
MAX_PASSWORD_LENGTH = 128
DEFAULT_PASSWORD_LENGTH = 16
QUICK_GENERATE_LENGTH = 18

# Upper bound on candidates accepted by the REST API
MAX_EVALUATE_LENGTH = int(os.environ.get("MAX_EVALUATE_LENGTH", "1024"))

# HTTPS enforcement
# Set REQUIRE_HTTPS=true in production to reject non-HTTPS requests
REQUIRE_HTTPS = os.environ.get("REQUIRE_HTTPS", "false").lower() == "true"

# CORS origins allowed to call the API
# Example: CORS_ORIGINS=https://meter.example.com,http://localhost:3000
_cors_origins_env = os.environ.get("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
CORS_ORIGINS: list[str] = [
    origin.strip() for origin in _cors_origins_env.split(",") if origin.strip()
]

# Rate limiting (slowapi limit string)
RATE_LIMIT = os.environ.get("RATE_LIMIT", "100/minute")
