from __future__ import annotations

import logging

import pytest

from lib_log_udp.domain.levels import LogLevel, register_trace_level


@pytest.mark.parametrize(
    "name, expected",
    [
        ("trace", LogLevel.TRACE),
        ("debug", LogLevel.DEBUG),
        ("INFO", LogLevel.INFO),
        ("Warning", LogLevel.WARNING),
        ("warn", LogLevel.WARNING),
        ("error", LogLevel.ERROR),
        ("CRITICAL", LogLevel.CRITICAL),
        ("fatal", LogLevel.CRITICAL),
        ("  info  ", LogLevel.INFO),
    ],
)
def test_from_name_accepts_case_insensitive_matches(name: str, expected: LogLevel) -> None:
    assert LogLevel.from_name(name) is expected


def test_from_name_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        LogLevel.from_name("verbose")


@pytest.mark.parametrize("number", [-5, 0, 15, 25, 55])
def test_from_numeric_rejects_non_standard_levels(number: int) -> None:
    with pytest.raises(ValueError, match="Unsupported log level numeric"):
        LogLevel.from_numeric(number)


@pytest.mark.parametrize(
    "level, expected",
    [
        (logging.DEBUG, LogLevel.DEBUG),
        (logging.INFO, LogLevel.INFO),
        (logging.WARNING, LogLevel.WARNING),
        (logging.ERROR, LogLevel.ERROR),
        (logging.CRITICAL, LogLevel.CRITICAL),
        (5, LogLevel.TRACE),
        (1, LogLevel.TRACE),
        (25, LogLevel.INFO),
        (45, LogLevel.ERROR),
        (100, LogLevel.CRITICAL),
    ],
)
def test_from_python_level_picks_closest_member_at_or_below(level: int, expected: LogLevel) -> None:
    assert LogLevel.from_python_level(level) is expected


@pytest.mark.parametrize("level", [member for member in LogLevel if member is not LogLevel.TRACE])
def test_to_python_level_returns_logging_constant(level: LogLevel) -> None:
    assert level.to_python_level() == getattr(logging, level.name)


def test_ordering_runs_from_verbose_to_severe() -> None:
    ordered = list(LogLevel)
    assert ordered == [LogLevel.TRACE, LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARNING, LogLevel.ERROR, LogLevel.CRITICAL]
    for lower, higher in zip(ordered, ordered[1:]):
        assert higher.is_at_least(lower)
        assert not lower.is_at_least(higher)


@pytest.mark.parametrize("level", list(LogLevel))
def test_level_is_at_least_itself(level: LogLevel) -> None:
    assert level.is_at_least(level)


@pytest.mark.parametrize("level", list(LogLevel))
def test_token_is_upper_case_name(level: LogLevel) -> None:
    assert level.token == level.name
    assert level.token.isupper()
    assert level.severity == level.name.lower()


def test_register_trace_level_names_level_five() -> None:
    register_trace_level()
    assert logging.getLevelName(5) == "TRACE"
