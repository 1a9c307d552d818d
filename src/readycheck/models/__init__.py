# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for readycheck."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .probe import (
    AttemptKind,
    AttemptResult,
    FailureKind,
    ProbeFailure,
    ProbeOutcome,
    ProbeRequest,
    SuccessPredicate,
)

__all__ = [
    "AttemptKind",
    "AttemptResult",
    "FailureKind",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "ProbeFailure",
    "ProbeOutcome",
    "ProbeRequest",
    "SuccessPredicate",
]
