# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single-probe primitive: issue one request and classify what came back."""

from __future__ import annotations

from ..errors import ErrorCategory, error_category_to_reason
from ..http.client import AsyncHttpClient, HttpClient
from ..http.models import HttpRequest, HttpResponse
from ..models import AttemptKind, AttemptResult, ProbeRequest


def build_http_request(request: ProbeRequest) -> HttpRequest:
    return HttpRequest(
        url=request.target,
        method=request.method,
        headers=dict(request.headers) if request.headers else None,
        timeout=request.probe_timeout_ms / 1000.0,
    )


def classify_response(request: ProbeRequest, attempt: int, response: HttpResponse, elapsed_ms: int) -> AttemptResult:
    """
    Map a normalized response onto Responded / TimedOut / NetworkError.

    The success predicate runs for responses with a status code only; transport
    failures are never healthy. Transport-reported timing wins over the
    caller's measurement around the request.
    """
    if response.elapsed_ms is not None:
        elapsed_ms = response.elapsed_ms
    if response.status_code is not None:
        healthy = request.is_healthy(response.status_code)
        return AttemptResult(
            attempt=attempt,
            kind=AttemptKind.RESPONDED,
            status_code=response.status_code,
            reason=f"HTTP {response.status_code}",
            elapsed_ms=elapsed_ms,
            healthy=healthy,
        )

    category = response.error_category or ErrorCategory.UNKNOWN_ERROR
    detail = response.error_message or error_category_to_reason(category)
    if category == ErrorCategory.TIMEOUT:
        kind = AttemptKind.TIMED_OUT
        detail = f"{error_category_to_reason(category)} after {request.probe_timeout_ms} ms"
    else:
        kind = AttemptKind.NETWORK_ERROR
    return AttemptResult(
        attempt=attempt,
        kind=kind,
        reason=detail,
        category=category,
        elapsed_ms=elapsed_ms,
    )


def probe_once(client: HttpClient, request: HttpRequest) -> HttpResponse:
    try:
        return client.request(request)
    except Exception as exc:  # noqa: BLE001
        return HttpResponse.from_exception(exc)


async def aprobe_once(client: AsyncHttpClient, request: HttpRequest) -> HttpResponse:
    try:
        return await client.request(request)
    except Exception as exc:  # noqa: BLE001
        return HttpResponse.from_exception(exc)


__all__ = ["aprobe_once", "build_http_request", "classify_response", "probe_once"]
