# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
readycheck package entrypoint.

This package polls freshly deployed HTTP endpoints until they report healthy,
so callers can hold back a deployment URL until it actually serves traffic.
HTTP behavior is abstracted behind an injectable client interface, and session
inputs and results are modeled with typed dataclasses.
"""

from .config import HttpSettings, PollSettings, load_http_settings, load_poll_settings
from .errors import ErrorCategory, InvalidConfiguration
from .http import (
    AsyncHttpClient,
    AsyncHttpxClient,
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    create_default_async_http_client,
    create_default_http_client,
)
from .log import setup_logging
from .models import AttemptKind, AttemptResult, FailureKind, ProbeFailure, ProbeOutcome, ProbeRequest
from .poll import (
    AsyncHealthPoller,
    CancellationToken,
    HealthPoller,
    any_status,
    apoll,
    apoll_many,
    expect_status,
    poll,
    poll_many,
    status_in_range,
)
from .runtime import ReadyCheck
from .version import __version__

__all__ = [
    "AsyncHealthPoller",
    "AsyncHttpClient",
    "AsyncHttpxClient",
    "AttemptKind",
    "AttemptResult",
    "CancellationToken",
    "ErrorCategory",
    "FailureKind",
    "HealthPoller",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "InvalidConfiguration",
    "PollSettings",
    "ProbeFailure",
    "ProbeOutcome",
    "ProbeRequest",
    "ReadyCheck",
    "any_status",
    "apoll",
    "apoll_many",
    "create_default_async_http_client",
    "create_default_http_client",
    "expect_status",
    "load_http_settings",
    "load_poll_settings",
    "poll",
    "poll_many",
    "setup_logging",
    "status_in_range",
    "__version__",
]
