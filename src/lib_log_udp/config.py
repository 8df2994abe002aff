"""Optional ``.env`` loading for the command line entry points.

The library core never reads configuration from the environment; only the
CLI picks its option defaults from ``LOG_UDP_*`` variables. This module lets
those variables live in a ``.env`` file next to the project.
"""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

LOGGER = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LOG_UDP_USE_DOTENV"
#: Environment toggle read when ``--use-dotenv`` is not given explicitly.

DESTINATION_ENV_VAR = "LOG_UDP_DESTINATION"
LEVEL_ENV_VAR = "LOG_UDP_LEVEL"
LISTEN_PORT_ENV_VAR = "LOG_UDP_LISTEN_PORT"

_TRUTHY = {"1", "true", "yes", "on"}

_LOADED_PATH: Path | None = None


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Decide whether to load ``.env``; an explicit CLI flag beats the environment.

    Examples
    --------
    >>> should_use_dotenv(explicit=None, env_value="yes")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(explicit=None, env_value=None)
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` found walking up from the working directory.

    Existing environment variables keep precedence over file entries. The
    file is loaded once per process; later calls return the same path.
    """

    global _LOADED_PATH
    if _LOADED_PATH is not None:
        return _LOADED_PATH
    found = find_dotenv(usecwd=True)
    if not found:
        LOGGER.debug("no .env file found")
        return None
    candidate = Path(found)
    load_dotenv(candidate, override=False)
    _LOADED_PATH = candidate.resolve()
    return _LOADED_PATH


def _reset_dotenv_state_for_testing() -> None:
    global _LOADED_PATH
    _LOADED_PATH = None


__all__ = [
    "DESTINATION_ENV_VAR",
    "DOTENV_ENV_VAR",
    "LEVEL_ENV_VAR",
    "LISTEN_PORT_ENV_VAR",
    "enable_dotenv",
    "should_use_dotenv",
]
