"""
Test configuration and fixtures for the jsonmaplayout test suite.
"""
import logging

import pytest

from jsonmaplayout import context
from jsonmaplayout.events import LogEvent, SourceLocation
from jsonmaplayout.markers import marker_for
from jsonmaplayout.messages import SimpleMapMessage


@pytest.fixture(autouse=True)
def clean_context():
    """Every test starts and ends with an empty logging context."""
    context.clear()
    yield
    context.clear()


@pytest.fixture
def alice_message():
    return SimpleMapMessage({"user": "alice", "status": 200})


@pytest.fixture
def alice_event(alice_message):
    return LogEvent(message=alice_message)


@pytest.fixture
def full_event(alice_message):
    """Map message event with every metadata field populated."""
    try:
        raise ValueError("boom")
    except ValueError as e:
        error = e
    return LogEvent(
        message=alice_message,
        context_data={"request_id": "r-1"},
        logger_name="app.http",
        level="ERROR",
        time_millis=1700000000500,
        thread_name="worker-1",
        marker=marker_for("AUDIT"),
        source=SourceLocation(module="handlers", function="serve", file="/srv/handlers.py", line=42),
        thrown=error,
    )


@pytest.fixture
def make_record():
    """Factory for LogRecords with a fixed timestamp."""

    def _make(msg, *args, level=logging.INFO, name="test.logger", exc_info=None, **attrs):
        record = logging.LogRecord(name, level, "/srv/app/module.py", 7, msg, args, exc_info, func="handler")
        record.created = 1700000000.5
        for key, value in attrs.items():
            setattr(record, key, value)
        return record

    return _make


@pytest.fixture
def isolated_logger():
    """Logger that does not propagate; handlers are removed afterwards."""
    log = logging.getLogger("jsonmaplayout.tests.isolated")
    log.propagate = False
    log.setLevel(logging.DEBUG)
    yield log
    for h in list(log.handlers):
        log.removeHandler(h)
    log.propagate = True
    log.setLevel(logging.NOTSET)
