"""Tests for structured event logging."""

import json
import os
import stat
import sys

import pytest

import core.events as events

from core import evaluate
from core.events import (
    count_events_by_status,
    count_ratings,
    get_events,
    log_event,
    summarize_result,
)


class TestLogEvent:
    """Test writing events."""

    def test_writes_json_line(self, event_log):
        log_event("evaluate", "SUCCESS", {"score": 42})
        lines = event_log.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        event = json.loads(lines[0])
        assert event["event_type"] == "evaluate"
        assert event["status"] == "SUCCESS"
        assert event["details"] == {"score": 42}
        assert "timestamp" in event

    def test_details_optional(self):
        log_event("generate", "REJECTED")
        assert "details" not in get_events()[-1]

    def test_creates_log_directory(self, event_log):
        assert not event_log.parent.exists()
        log_event("evaluate", "SUCCESS")
        assert event_log.exists()


class TestReadEvents:
    """Test reading events back."""

    def test_no_log_file(self):
        assert get_events() == []

    def test_limit(self):
        for i in range(5):
            log_event("evaluate", "SUCCESS", {"n": i})
        events = get_events(limit=2)
        assert [e["details"]["n"] for e in events] == [3, 4]

    def test_skips_corrupted_lines(self, event_log):
        log_event("evaluate", "SUCCESS")
        with open(event_log, "a", encoding="utf-8") as f:
            f.write("not json\n")
        log_event("evaluate", "SUCCESS")
        assert len(get_events()) == 2

    def test_count_by_status(self):
        log_event("evaluate", "SUCCESS")
        log_event("evaluate", "SUCCESS")
        log_event("generate", "REJECTED")
        assert count_events_by_status() == {"SUCCESS": 2, "REJECTED": 1}
        assert count_events_by_status("generate") == {"REJECTED": 1}


class TestSummarizeResult:
    """Test password-free result summaries."""

    def test_summary_fields(self):
        summary = summarize_result(evaluate("password"))
        assert summary["score"] == 9
        assert summary["rating"] == "Very Weak"
        assert summary["length"] == 8
        assert summary["is_common"] is True

    def test_summary_has_no_password(self):
        secret = "Hx7!unlikely"
        summary = summarize_result(evaluate(secret))
        assert secret not in json.dumps(summary)


class TestUnusableLogLocation:
    """Test that logging problems never reach the caller."""

    @pytest.fixture
    def blocked_log(self, tmp_path, monkeypatch):
        blocker = tmp_path / "not_a_directory"
        blocker.write_text("")
        monkeypatch.setattr(events, "LOG_DIR", str(blocker / "logs"))
        monkeypatch.setattr(events, "EVENT_LOG_FILE", str(blocker / "logs" / "strength_events.jsonl"))
        events.reset_logging()
        return blocker

    def test_log_event_does_not_raise(self, blocked_log):
        log_event("evaluate", "SUCCESS", {"score": 1})
        log_event("evaluate", "SUCCESS", {"score": 2})
        assert get_events() == []

    def test_configured_once(self, blocked_log, monkeypatch):
        log_event("evaluate", "SUCCESS")

        def fail(*args, **kwargs):
            raise AssertionError("log directory creation retried")

        monkeypatch.setattr(events, "_ensure_log_directory", fail)
        log_event("evaluate", "SUCCESS")


@pytest.mark.skipif(sys.platform == "win32", reason="Unix permissions only")
class TestLogDirectoryPermissions:
    """Test owner-only log directory."""

    def test_directory_is_owner_only(self, event_log):
        old_umask = os.umask(0)
        try:
            log_event("evaluate", "SUCCESS")
        finally:
            os.umask(old_umask)
        mode = stat.S_IMODE(os.stat(event_log.parent).st_mode)
        assert mode == 0o700


class TestFilters:
    """Test event type filtering and rating counts."""

    def test_filter_by_type(self):
        log_event("evaluate", "SUCCESS")
        log_event("generate", "SUCCESS")
        log_event("evaluate", "SUCCESS")
        assert len(get_events(event_type="evaluate")) == 2
        assert len(get_events(event_type="generate")) == 1

    def test_count_ratings(self):
        log_event("evaluate", "SUCCESS", summarize_result(evaluate("password")))
        log_event("evaluate", "SUCCESS", summarize_result(evaluate("Tr0ub4dor&3#Xy9!")))
        log_event("generate", "SUCCESS", summarize_result(evaluate("Tr0ub4dor&3#Xy9!")))
        log_event("generate", "REJECTED")
        assert count_ratings() == {"Very Weak": 1, "Excellent": 2}
        assert count_ratings("generate") == {"Excellent": 1}
