"""Structured strength-check event logging.

Writes one JSON object per line so evaluations and generations can be
audited or shipped to a log pipeline. Passwords are never recorded: only
the score, rating, length and pattern flags of a result are logged.

Includes log rotation to prevent disk exhaustion and manage retention.
"""

import json
import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from threading import Lock
from typing import Optional

from core.config import (
    LOG_DIR,
    EVENT_LOG_FILE,
    EVENT_LOG_MAX_BYTES,
    EVENT_LOG_BACKUP_COUNT,
)
from core.scoring import EvaluationResult


EVENT_SOURCE = "strength_meter"

# Module-level state
_event_logger = logging.getLogger("strength_meter.events")
_configure_lock = Lock()
_logging_configured = False


def _ensure_log_directory() -> None:
    """Create the log directory, owner-only (0700) on Unix systems."""
    if sys.platform != "win32":
        os.makedirs(LOG_DIR, mode=0o700, exist_ok=True)
    else:
        os.makedirs(LOG_DIR, exist_ok=True)


def _configure_logging() -> None:
    """Attach a rotating JSON-lines handler to the event logger on first use.

    If the log location is unusable, events are discarded rather than
    failing the evaluation or generation that triggered them.
    """
    global _logging_configured
    with _configure_lock:
        if _logging_configured:
            return

        try:
            _ensure_log_directory()
            handler = RotatingFileHandler(
                EVENT_LOG_FILE,
                maxBytes=EVENT_LOG_MAX_BYTES,
                backupCount=EVENT_LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
            # message is already a JSON document
            handler.setFormatter(logging.Formatter('%(message)s'))
        except OSError as e:
            logging.getLogger(__name__).warning(
                "Event log unavailable at %s: %s", EVENT_LOG_FILE, e
            )
            handler = logging.NullHandler()

        _event_logger.setLevel(logging.INFO)
        _event_logger.addHandler(handler)
        _event_logger.propagate = False

        _logging_configured = True


def reset_logging() -> None:
    """Detach and close the event handlers (used on shutdown and in tests)."""
    global _logging_configured
    with _configure_lock:
        for handler in list(_event_logger.handlers):
            _event_logger.removeHandler(handler)
            handler.close()
        _logging_configured = False


def summarize_result(result: EvaluationResult) -> dict:
    """Build a password-free summary of an evaluation for logging.

    Args:
        result: Evaluation to summarize

    Returns:
        Dictionary with score, rating, length and weakness flags
    """
    return {
        "score": result.score,
        "rating": result.rating.value,
        "entropy": result.entropy_bits,
        "length": result.flags.length,
        "classes_count": result.classes_count,
        "is_common": result.flags.is_common,
        "repeated": result.flags.repeated,
        "sequential": result.flags.sequential,
    }


def log_event(
    event_type: str,
    status: str,
    details: Optional[dict] = None
) -> None:
    """Log event in JSON format.

    Args:
        event_type: Type of event (e.g., 'evaluate', 'generate')
        status: Event status (e.g., 'SUCCESS', 'REJECTED')
        details: Optional additional event details (never a password)
    """
    _configure_logging()

    event = {
        "timestamp": datetime.now().isoformat(),
        "event_type": event_type,
        "status": status,
        "source": EVENT_SOURCE,
    }

    if details:
        event["details"] = details

    _event_logger.info(json.dumps(event))


def get_events(limit: int = 100, event_type: Optional[str] = None) -> list[dict]:
    """Read and parse logged events.

    Args:
        limit: Maximum number of events to return
        event_type: Optional filter by event type

    Returns:
        List of parsed event dictionaries, oldest first
    """
    if not os.path.isfile(EVENT_LOG_FILE):
        return []

    events = []
    with open(EVENT_LOG_FILE, "r", encoding="utf-8") as f:
        for line in f:
            try:
                event = json.loads(line)
            except json.JSONDecodeError:
                continue
            if event_type and event.get("event_type") != event_type:
                continue
            events.append(event)

    return events[-limit:]


def count_events_by_status(event_type: Optional[str] = None) -> dict[str, int]:
    """Count logged events grouped by status.

    Args:
        event_type: Optional filter by event type

    Returns:
        Dictionary mapping status to count
    """
    counts: dict[str, int] = {}
    for event in get_events(limit=10000, event_type=event_type):
        status = event.get("status", "UNKNOWN")
        counts[status] = counts.get(status, 0) + 1
    return counts


def count_ratings(event_type: Optional[str] = None) -> dict[str, int]:
    """Count logged results grouped by strength rating."""
    counts: dict[str, int] = {}
    for event in get_events(limit=10000, event_type=event_type):
        rating = event.get("details", {}).get("rating")
        if rating:
            counts[rating] = counts.get(rating, 0) + 1
    return counts
