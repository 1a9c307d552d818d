# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe request/outcome models."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..config import PollSettings
from ..errors import ErrorCategory, InvalidConfiguration
from ..http.url import is_valid_target

DEFAULT_PROBE_TIMEOUT_MS = 5000


def _is_finite_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


class AttemptKind(str, Enum):
    RESPONDED = "RESPONDED"
    TIMED_OUT = "TIMED_OUT"
    NETWORK_ERROR = "NETWORK_ERROR"


class FailureKind(str, Enum):
    TIMED_OUT = "TIMED_OUT"
    NETWORK_ERROR = "NETWORK_ERROR"
    BUDGET_EXHAUSTED = "BUDGET_EXHAUSTED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class ProbeFailure:
    """Classification carried in ProbeOutcome.last_error."""

    kind: FailureKind
    reason: str = ""
    category: ErrorCategory | None = None
    status_code: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "reason": self.reason,
            "category": self.category.value if self.category is not None else None,
            "status_code": self.status_code,
        }


SuccessPredicate = Callable[[int, ProbeFailure | None], bool]


@dataclass(frozen=True)
class AttemptResult:
    """Classification of a single probe."""

    attempt: int
    kind: AttemptKind
    status_code: int | None = None
    reason: str = ""
    category: ErrorCategory | None = None
    elapsed_ms: int = 0
    healthy: bool = False

    def as_failure(self) -> ProbeFailure | None:
        """Return the failure this attempt represents on its own, if any."""
        if self.kind == AttemptKind.TIMED_OUT:
            return ProbeFailure(FailureKind.TIMED_OUT, reason=self.reason, category=self.category)
        if self.kind == AttemptKind.NETWORK_ERROR:
            return ProbeFailure(FailureKind.NETWORK_ERROR, reason=self.reason, category=self.category)
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "attempt": self.attempt,
            "kind": self.kind.value,
            "status_code": self.status_code,
            "reason": self.reason,
            "category": self.category.value if self.category is not None else None,
            "elapsed_ms": self.elapsed_ms,
            "healthy": self.healthy,
        }


@dataclass(frozen=True)
class ProbeRequest:
    """
    Immutable configuration for one polling session.

    `success_predicate` receives the response status and, for symmetry with
    callers that classify errors themselves, an optional failure (always None
    for responses that reached the predicate). When omitted, the status must
    equal `expected_status`.
    """

    target: str
    max_attempts: int = 30
    interval_ms: int = 2000
    success_predicate: SuccessPredicate | None = field(default=None, compare=False)
    expected_status: int = 200
    probe_timeout_ms: int = DEFAULT_PROBE_TIMEOUT_MS
    backoff_factor: float = 1.0
    method: str = "GET"
    headers: dict[str, str] | None = field(default=None, compare=False)

    @classmethod
    def from_settings(cls, target: str, settings: PollSettings, **overrides: Any) -> ProbeRequest:
        """Build a request from PollSettings; keyword overrides win."""
        values: dict[str, Any] = {
            "max_attempts": settings.max_attempts,
            "interval_ms": settings.interval_ms,
            "probe_timeout_ms": settings.probe_timeout_ms,
            "backoff_factor": settings.backoff_factor,
            "expected_status": settings.expected_status,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(target=target, **values)

    def validate(self) -> None:
        """Raise InvalidConfiguration for out-of-range values or a malformed target."""
        if isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int) or self.max_attempts < 1:
            raise InvalidConfiguration(f"max_attempts must be an integer >= 1, got {self.max_attempts!r}")
        # NaN compares False against every bound, so finiteness is checked first.
        if not _is_finite_number(self.interval_ms) or self.interval_ms < 0:
            raise InvalidConfiguration(f"interval_ms must be a finite number >= 0, got {self.interval_ms!r}")
        if not _is_finite_number(self.probe_timeout_ms) or self.probe_timeout_ms <= 0:
            raise InvalidConfiguration(f"probe_timeout_ms must be a finite number > 0, got {self.probe_timeout_ms!r}")
        if not _is_finite_number(self.backoff_factor) or self.backoff_factor < 1.0:
            raise InvalidConfiguration(f"backoff_factor must be a finite number >= 1.0, got {self.backoff_factor!r}")
        if self.success_predicate is not None and not callable(self.success_predicate):
            raise InvalidConfiguration("success_predicate must be callable")
        if not is_valid_target(self.target):
            raise InvalidConfiguration(f"target must be an absolute http(s) URL, got {self.target!r}")

    def interval_before(self, next_attempt: int) -> float:
        """Seconds to wait before `next_attempt` (2-based; the first attempt never waits)."""
        return (self.interval_ms / 1000.0) * (self.backoff_factor ** max(0, next_attempt - 2))

    def is_healthy(self, status_code: int) -> bool:
        if self.success_predicate is None:
            return status_code == self.expected_status
        return bool(self.success_predicate(status_code, None))


@dataclass(frozen=True)
class ProbeOutcome:
    """Result of a polling session."""

    success: bool
    attempts_used: int
    elapsed_ms: int
    last_error: ProbeFailure | None = None
    target: str = ""
    cancelled: bool = False
    attempts: tuple[AttemptResult, ...] = ()

    @property
    def last_status_code(self) -> int | None:
        for item in reversed(self.attempts):
            if item.status_code is not None:
                return item.status_code
        return None

    @property
    def reason(self) -> str:
        """Short human-readable summary for reports."""
        if self.success:
            return f"healthy after {self.attempts_used} attempt(s)"
        if self.last_error is not None and self.last_error.reason:
            return self.last_error.reason
        return "not ready"

    def to_dict(self) -> dict[str, Any]:
        return {
            "target": self.target,
            "success": self.success,
            "attempts_used": self.attempts_used,
            "elapsed_ms": self.elapsed_ms,
            "cancelled": self.cancelled,
            "last_error": self.last_error.to_dict() if self.last_error is not None else None,
            "attempts": [item.to_dict() for item in self.attempts],
        }
