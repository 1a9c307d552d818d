# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for readycheck."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"readycheck/{__version__} (deployment health poller)"
DEFAULT_LOG_LEVEL = "WARNING"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _str_env(name: str, default: str | None) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass
class HttpSettings:
    """HTTP client defaults."""

    timeout: float = 5.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        timeout = _float_env("READYCHECK_HTTP_TIMEOUT", cls.timeout)
        if timeout <= 0:
            timeout = cls.timeout
        return cls(
            timeout=timeout,
            user_agent=os.getenv("READYCHECK_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("READYCHECK_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("READYCHECK_HTTP_VERIFY_SSL", cls.verify_ssl),
        )


@dataclass
class PollSettings:
    """
    Default polling session parameters.

    Values are not validated here; ProbeRequest validation rejects out-of-range
    values when a session starts.
    """

    max_attempts: int = 30
    interval_ms: int = 2000
    probe_timeout_ms: int = 5000
    backoff_factor: float = 1.0
    expected_status: int = 200
    max_workers: int = 8
    base_url: str | None = None

    @classmethod
    def from_env(cls) -> "PollSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_workers = _int_env("READYCHECK_MAX_WORKERS", cls.max_workers)
        if max_workers <= 0:
            max_workers = cls.max_workers
        return cls(
            max_attempts=_int_env("READYCHECK_MAX_ATTEMPTS", cls.max_attempts),
            interval_ms=_int_env("READYCHECK_INTERVAL_MS", cls.interval_ms),
            probe_timeout_ms=_int_env("READYCHECK_PROBE_TIMEOUT_MS", cls.probe_timeout_ms),
            backoff_factor=_float_env("READYCHECK_BACKOFF", cls.backoff_factor),
            expected_status=_int_env("READYCHECK_EXPECTED_STATUS", cls.expected_status),
            max_workers=max_workers,
            base_url=_str_env("READYCHECK_BASE_URL", cls.base_url),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


def load_poll_settings() -> PollSettings:
    """Load polling defaults from environment."""
    return PollSettings.from_env()


def load_log_level() -> str:
    """Return READYCHECK_LOG_LEVEL (upper-cased), read at call time."""
    return (_str_env("READYCHECK_LOG_LEVEL", DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
