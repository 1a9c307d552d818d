# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Run independent polling sessions concurrently (one session per target)."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from ..config import load_poll_settings
from ..http.client import AsyncHttpClient, HttpClient, create_default_async_http_client, create_default_http_client
from ..models import ProbeOutcome, ProbeRequest
from .async_poller import AsyncHealthPoller
from .cancel import CancellationToken
from .poller import HealthPoller


def poll_many(
    requests: Sequence[ProbeRequest],
    *,
    client: HttpClient | None = None,
    max_workers: int | None = None,
    cancel_token: CancellationToken | None = None,
) -> list[ProbeOutcome]:
    """
    Poll several targets on a thread pool; outcomes follow input order.

    Every request is validated up front so a single bad entry fails the batch
    before any probe is sent.
    """
    for request in requests:
        request.validate()
    if not requests:
        return []

    owns_client = client is None
    shared_client = client or create_default_http_client()
    poller = HealthPoller(shared_client)
    workers = max(1, min(max_workers or load_poll_settings().max_workers, len(requests)))
    try:
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="readycheck") as pool:
            futures = [pool.submit(poller.poll, request, cancel_token=cancel_token) for request in requests]
            return [future.result() for future in futures]
    finally:
        if owns_client:
            shared_client.close()


async def apoll_many(
    requests: Sequence[ProbeRequest],
    *,
    client: AsyncHttpClient | None = None,
    cancel_token: CancellationToken | None = None,
) -> list[ProbeOutcome]:
    """Gather async polling sessions; outcomes follow input order."""
    for request in requests:
        request.validate()
    if not requests:
        return []

    owns_client = client is None
    shared_client = client or create_default_async_http_client()
    poller = AsyncHealthPoller(shared_client)
    try:
        return list(await asyncio.gather(*(poller.poll(request, cancel_token=cancel_token) for request in requests)))
    finally:
        if owns_client:
            await shared_client.aclose()


__all__ = ["apoll_many", "poll_many"]
