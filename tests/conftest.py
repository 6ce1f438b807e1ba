"""Shared fixtures."""

import pytest

import core.events as events


@pytest.fixture(autouse=True)
def event_log(tmp_path, monkeypatch):
    """Redirect the event log into a temporary directory."""
    log_dir = tmp_path / "logs"
    monkeypatch.setattr(events, "LOG_DIR", str(log_dir))
    monkeypatch.setattr(events, "EVENT_LOG_FILE", str(log_dir / "strength_events.jsonl"))
    events.reset_logging()
    yield log_dir / "strength_events.jsonl"
    events.reset_logging()
