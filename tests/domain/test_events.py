from __future__ import annotations

from datetime import datetime, timezone

import pytest

from lib_log_udp.domain.events import LogEvent
from lib_log_udp.domain.levels import LogLevel


def test_timestamp_parts_split_seconds_and_nanoseconds() -> None:
    event = LogEvent(LogLevel.INFO, "hello", 1_700_000_000_123_456_789)
    assert event.seconds == 1_700_000_000
    assert event.nanoseconds == 123_456_789


def test_timestamp_property_is_aware_utc() -> None:
    event = LogEvent(LogLevel.INFO, "hello", 1_700_000_000_123_456_789)
    assert event.timestamp == datetime(2023, 11, 14, 22, 13, 20, 123456, tzinfo=timezone.utc)
    assert event.timestamp.tzinfo is timezone.utc


def test_negative_timestamp_is_rejected() -> None:
    with pytest.raises(ValueError, match="must not be negative"):
        LogEvent(LogLevel.INFO, "hello", -1)


def test_defaults_describe_root_logger_without_location() -> None:
    event = LogEvent(LogLevel.ERROR, "", 0)
    assert event.logger_name == "root"
    assert event.module is None
    assert event.line is None
    assert event.message == ""


def test_event_is_frozen() -> None:
    event = LogEvent(LogLevel.INFO, "hello", 0)
    with pytest.raises(AttributeError):
        event.message = "changed"  # type: ignore[misc]
