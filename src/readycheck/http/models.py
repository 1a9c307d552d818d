# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used by the probe primitive."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..errors import ErrorCategory, categorize_exception

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """
    Normalized request representation consumed by HttpClient implementations.

    `timeout` and `allow_redirects` left as None defer to the client's HttpSettings.
    """

    url: str
    method: str = "GET"
    headers: Headers | None = None
    timeout: float | None = None
    allow_redirects: bool | None = None


@dataclass
class HttpResponse:
    """
    Normalized HTTP response.

    `ok` means the server answered at all; whether the status counts as healthy
    is decided by the poller's success predicate, not here. Transports that time
    the exchange themselves report it as `meta["elapsed_ms"]`.
    """

    ok: bool
    status_code: int | None = None
    error_message: str | None = None
    error_category: ErrorCategory | None = None
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def elapsed_ms(self) -> int | None:
        value = self.meta.get("elapsed_ms")
        return int(value) if isinstance(value, (int, float)) and value >= 0 else None

    @classmethod
    def from_exception(cls, exc: BaseException) -> HttpResponse:
        """Build a failed response from a transport exception."""
        return cls(
            ok=False,
            error_message=str(exc) or type(exc).__name__,
            error_category=categorize_exception(exc),
        )
