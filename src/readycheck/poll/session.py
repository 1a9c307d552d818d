# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Decision state for one polling session.

The sync and async pollers differ only in how they probe and how they sleep;
every stop/continue decision and the final ProbeOutcome come from here so both
flavours behave identically for the same sequence of probe results.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from ..http.url import redact_target
from ..models import AttemptResult, FailureKind, ProbeFailure, ProbeOutcome, ProbeRequest
from .cancel import CancellationToken

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class PollSession:
    def __init__(
        self,
        request: ProbeRequest,
        *,
        clock: Clock | None = None,
        cancel_token: CancellationToken | None = None,
    ):
        request.validate()
        self.request = request
        self._clock = clock or time.monotonic
        self._cancel_token = cancel_token
        self._started = self._clock()
        self._attempts: list[AttemptResult] = []
        self._last_error: ProbeFailure | None = None
        self._label = redact_target(request.target)

    @property
    def next_attempt(self) -> int:
        return len(self._attempts) + 1

    @property
    def exhausted(self) -> bool:
        return len(self._attempts) >= self.request.max_attempts

    @property
    def cancelled(self) -> bool:
        return self._cancel_token is not None and self._cancel_token.cancelled

    def now_ms(self) -> int:
        return max(0, int(round((self._clock() - self._started) * 1000)))

    def record(self, result: AttemptResult) -> bool:
        """Record an attempt; return True when the session should stop."""
        self._attempts.append(result)
        max_attempts = self.request.max_attempts
        if result.healthy:
            logger.debug("Poll attempt %d/%d for %s: %s (healthy)", result.attempt, max_attempts, self._label, result.reason)
            return True

        logger.debug("Poll attempt %d/%d for %s: %s", result.attempt, max_attempts, self._label, result.reason)
        failure = result.as_failure()
        if failure is None:
            failure = ProbeFailure(
                FailureKind.BUDGET_EXHAUSTED,
                reason=(
                    f"{self._label} did not return an accepted status after {max_attempts} attempt(s)"
                    f" (last status {result.status_code})"
                ),
                status_code=result.status_code,
            )
        self._last_error = failure
        return self.exhausted

    def delay_before_next(self) -> float:
        """Seconds to sleep before the next attempt."""
        return self.request.interval_before(self.next_attempt)

    def outcome(self) -> ProbeOutcome:
        attempts = tuple(self._attempts)
        success = bool(attempts) and attempts[-1].healthy
        outcome = ProbeOutcome(
            success=success,
            attempts_used=len(attempts),
            elapsed_ms=self.now_ms(),
            last_error=None if success else self._last_error,
            target=self.request.target,
            attempts=attempts,
        )
        if success:
            logger.info("%s healthy after %d attempt(s) in %d ms", self._label, outcome.attempts_used, outcome.elapsed_ms)
        else:
            logger.info("%s not ready after %d attempt(s): %s", self._label, outcome.attempts_used, outcome.reason)
        return outcome

    def cancelled_outcome(self) -> ProbeOutcome:
        reason = self._cancel_token.reason if self._cancel_token is not None else ""
        logger.info("Polling %s cancelled after %d attempt(s)", self._label, len(self._attempts))
        return ProbeOutcome(
            success=False,
            attempts_used=len(self._attempts),
            elapsed_ms=self.now_ms(),
            last_error=ProbeFailure(
                FailureKind.CANCELLED,
                reason=reason or "cancelled",
                status_code=self._last_error.status_code if self._last_error is not None else None,
            ),
            target=self.request.target,
            cancelled=True,
            attempts=tuple(self._attempts),
        )


__all__ = ["Clock", "PollSession"]
