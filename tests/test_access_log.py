"""
Tests for access events and their loggers.
"""

from structlog.testing import capture_logs

from core.access_log import (
    AccessEvent,
    AccessOutcome,
    RecordingAccessLogger,
    StructlogAccessLogger,
)


def _event(**overrides):
    fields = {
        "operation": "get",
        "outcome": AccessOutcome.SUCCESS,
        "duration_ms": 1.23456,
        "record_id": "1",
        "method": "GET",
        "path": "/teas/1",
        "status_code": 200,
    }
    fields.update(overrides)
    return AccessEvent(**fields)


def test_event_to_dict_uses_plain_outcome():
    """Test serialized events carry the outcome as a plain string."""
    data = _event(outcome=AccessOutcome.NOT_FOUND).to_dict()

    assert data["outcome"] == "not_found"
    assert data["operation"] == "get"
    assert data["status_code"] == 200


def test_recording_logger_keeps_order():
    """Test the recording logger keeps events oldest first."""
    access_logger = RecordingAccessLogger()

    access_logger.emit(_event(operation="create"))
    access_logger.emit(_event(operation="delete"))

    assert [e.operation for e in access_logger.events] == ["create", "delete"]

    access_logger.clear()
    assert access_logger.events == []


def test_structlog_logger_writes_event_fields():
    """Test the structlog logger writes one line with every event field."""
    with capture_logs() as logs:
        StructlogAccessLogger().emit(_event())

    assert len(logs) == 1
    entry = logs[0]
    assert entry["event"] == "Request handled"
    assert entry["log_level"] == "info"
    assert entry["operation"] == "get"
    assert entry["outcome"] == "success"
    assert entry["path"] == "/teas/1"
    assert entry["duration_ms"] == 1.235


def test_structlog_logger_warns_on_error():
    """Test error outcomes are logged at warning level."""
    with capture_logs() as logs:
        StructlogAccessLogger().emit(
            _event(outcome=AccessOutcome.ERROR, status_code=500)
        )

    assert logs[0]["log_level"] == "warning"
    assert logs[0]["status_code"] == 500
