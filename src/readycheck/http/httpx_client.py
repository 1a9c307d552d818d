# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementations."""

from __future__ import annotations

import time

import httpx

from ..config import HttpSettings, load_http_settings
from .client import AsyncHttpClient, HttpClient
from .models import HttpRequest, HttpResponse


def _prepare_headers(request: HttpRequest, settings: HttpSettings) -> dict[str, str]:
    headers = dict(request.headers or {})
    headers.setdefault("User-Agent", settings.user_agent)
    return headers


def _follow_redirects(request: HttpRequest, settings: HttpSettings) -> bool:
    return settings.allow_redirects if request.allow_redirects is None else request.allow_redirects


def _to_response(resp: httpx.Response, started: float) -> HttpResponse:
    return HttpResponse(
        ok=True,
        status_code=resp.status_code,
        meta={"elapsed_ms": int((time.monotonic() - started) * 1000)},
    )


class HttpxClient(HttpClient):
    """
    Synchronous httpx client wrapper.

    Responses are streamed and closed without reading the body; a health probe
    only needs the status line.
    """

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        timeout = request.timeout if request.timeout is not None else self.settings.timeout
        started = time.monotonic()
        try:
            with self._client.stream(
                request.method,
                request.url,
                headers=_prepare_headers(request, self.settings),
                timeout=timeout,
                follow_redirects=_follow_redirects(request, self.settings),
            ) as resp:
                return _to_response(resp, started)
        except Exception as exc:  # noqa: BLE001
            return HttpResponse.from_exception(exc)

    def close(self) -> None:
        self._client.close()


class AsyncHttpxClient(AsyncHttpClient):
    """Asynchronous httpx client wrapper."""

    def __init__(self, settings: HttpSettings | None = None, client: httpx.AsyncClient | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.AsyncClient(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    async def request(self, request: HttpRequest) -> HttpResponse:
        timeout = request.timeout if request.timeout is not None else self.settings.timeout
        started = time.monotonic()
        try:
            async with self._client.stream(
                request.method,
                request.url,
                headers=_prepare_headers(request, self.settings),
                timeout=timeout,
                follow_redirects=_follow_redirects(request, self.settings),
            ) as resp:
                return _to_response(resp, started)
        except Exception as exc:  # noqa: BLE001
            return HttpResponse.from_exception(exc)

    async def aclose(self) -> None:
        await self._client.aclose()
