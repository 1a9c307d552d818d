# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level readycheck facade for polling one or more deployment targets."""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import suppress
from typing import Any

from .config import load_http_settings, load_poll_settings
from .http.client import HttpClient, create_default_http_client
from .models import ProbeOutcome, ProbeRequest
from .poll.cancel import CancellationToken
from .poll.poller import HealthPoller
from .poll.runner import poll_many


class ReadyCheck:
    """
    Convenience wrapper that shares one HTTP client across polling sessions.

    Request defaults come from PollSettings; keyword overrides passed to `poll`
    or `poll_many` take precedence.
    """

    def __init__(self, http_client: HttpClient | None = None):
        self.http_settings = load_http_settings()
        self.poll_settings = load_poll_settings()
        self.http_client = http_client or create_default_http_client(self.http_settings)
        self.poller = HealthPoller(self.http_client)

    def build_request(self, target: str, **overrides: Any) -> ProbeRequest:
        return ProbeRequest.from_settings(target, self.poll_settings, **overrides)

    def poll(
        self,
        target: str,
        *,
        cancel_token: CancellationToken | None = None,
        **overrides: Any,
    ) -> ProbeOutcome:
        return self.poller.poll(self.build_request(target, **overrides), cancel_token=cancel_token)

    def poll_many(
        self,
        targets: Sequence[str],
        *,
        cancel_token: CancellationToken | None = None,
        **overrides: Any,
    ) -> list[ProbeOutcome]:
        requests = [self.build_request(target, **overrides) for target in targets]
        return poll_many(
            requests,
            client=self.http_client,
            max_workers=self.poll_settings.max_workers,
            cancel_token=cancel_token,
        )

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> ReadyCheck:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
