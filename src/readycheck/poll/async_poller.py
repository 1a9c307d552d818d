# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Asynchronous health poller; the interval is an asyncio suspension point."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable

from ..http.client import AsyncHttpClient, create_default_async_http_client
from ..models import ProbeOutcome, ProbeRequest
from .cancel import CancellationToken
from .probe import aprobe_once, build_http_request, classify_response
from .session import Clock, PollSession


class AsyncHealthPoller:
    """Coroutine counterpart of HealthPoller with identical stop/continue decisions."""

    def __init__(
        self,
        http_client: AsyncHttpClient | None = None,
        *,
        sleep: Callable[[float], Awaitable[None]] | None = None,
        clock: Clock | None = None,
    ):
        self.http_client = http_client
        self._sleep = sleep or asyncio.sleep
        self._clock = clock or time.monotonic

    async def poll(self, request: ProbeRequest, *, cancel_token: CancellationToken | None = None) -> ProbeOutcome:
        session = PollSession(request, clock=self._clock, cancel_token=cancel_token)
        owns_client = self.http_client is None
        client = self.http_client or create_default_async_http_client()
        try:
            return await self._run(session, client)
        finally:
            if owns_client:
                await client.aclose()

    async def _run(self, session: PollSession, client: AsyncHttpClient) -> ProbeOutcome:
        http_request = build_http_request(session.request)
        while True:
            if session.cancelled:
                return session.cancelled_outcome()
            attempt = session.next_attempt
            started = self._clock()
            response = await aprobe_once(client, http_request)
            finished = self._clock()
            result = classify_response(session.request, attempt, response, int((finished - started) * 1000))
            if session.record(result):
                return session.outcome()
            if session.cancelled:
                return session.cancelled_outcome()
            await self._sleep(session.delay_before_next())


async def apoll(
    request: ProbeRequest,
    *,
    client: AsyncHttpClient | None = None,
    cancel_token: CancellationToken | None = None,
) -> ProbeOutcome:
    """Async variant of `poll`; raises InvalidConfiguration before any probe."""
    return await AsyncHealthPoller(client).poll(request, cancel_token=cancel_token)


__all__ = ["AsyncHealthPoller", "apoll"]
