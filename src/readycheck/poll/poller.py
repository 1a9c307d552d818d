# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Synchronous health poller."""

from __future__ import annotations

import time
from collections.abc import Callable

from ..http.client import HttpClient, create_default_http_client
from ..models import ProbeOutcome, ProbeRequest
from .cancel import CancellationToken
from .probe import build_http_request, classify_response, probe_once
from .session import Clock, PollSession


class HealthPoller:
    """
    Bounded retry loop against one target per `poll` call.

    The poller holds no per-session state, so one instance may serve concurrent
    sessions as long as the client it wraps is thread-safe (httpx.Client is).
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        *,
        sleep: Callable[[float], None] | None = None,
        clock: Clock | None = None,
    ):
        self.http_client = http_client
        self._sleep = sleep or time.sleep
        self._clock = clock or time.monotonic

    def poll(self, request: ProbeRequest, *, cancel_token: CancellationToken | None = None) -> ProbeOutcome:
        session = PollSession(request, clock=self._clock, cancel_token=cancel_token)
        owns_client = self.http_client is None
        client = self.http_client or create_default_http_client()
        try:
            return self._run(session, client)
        finally:
            if owns_client:
                client.close()

    def _run(self, session: PollSession, client: HttpClient) -> ProbeOutcome:
        http_request = build_http_request(session.request)
        while True:
            if session.cancelled:
                return session.cancelled_outcome()
            attempt = session.next_attempt
            started = self._clock()
            response = probe_once(client, http_request)
            finished = self._clock()
            result = classify_response(session.request, attempt, response, int((finished - started) * 1000))
            if session.record(result):
                return session.outcome()
            if session.cancelled:
                return session.cancelled_outcome()
            self._sleep(session.delay_before_next())


def poll(
    request: ProbeRequest,
    *,
    client: HttpClient | None = None,
    cancel_token: CancellationToken | None = None,
) -> ProbeOutcome:
    """
    Poll `request.target` until it is healthy or the attempt budget runs out.

    Raises InvalidConfiguration before any network activity when the request is
    out of range. Every other result, including exhaustion, is returned as a
    ProbeOutcome.
    """
    return HealthPoller(client).poll(request, cancel_token=cancel_token)


__all__ = ["HealthPoller", "poll"]
