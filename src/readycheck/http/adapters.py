# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Programmable clients that satisfy the HttpClient protocols without a network."""

from __future__ import annotations

from collections.abc import Iterable

from .client import AsyncHttpClient, HttpClient
from .models import HttpRequest, HttpResponse

ScriptedResult = HttpResponse | BaseException


class StubHttpClient(HttpClient):
    """
    Deterministic, programmable HttpClient for tests.

    Each URL maps to a script of responses (or exceptions to raise) consumed in
    order; the final entry repeats once the script runs out.
    """

    def __init__(self, responses: dict[str, Iterable[ScriptedResult]] | None = None):
        self._scripts: dict[str, list[ScriptedResult]] = {url: list(items) for url, items in (responses or {}).items()}
        self._cursor: dict[str, int] = {}
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, url: str, *results: ScriptedResult) -> None:
        self._scripts.setdefault(url, []).extend(results)

    def calls_for(self, url: str) -> int:
        return sum(1 for item in self.requests if item.url == url)

    def _next(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        script = self._scripts.get(request.url)
        if not script:
            return HttpResponse(ok=False, status_code=None, error_message="No stubbed response configured")
        index = self._cursor.get(request.url, 0)
        self._cursor[request.url] = index + 1
        result = script[min(index, len(script) - 1)]
        if isinstance(result, BaseException):
            raise result
        return result

    def request(self, request: HttpRequest) -> HttpResponse:
        return self._next(request)

    def close(self) -> None:
        self.closed = True


class AsyncStubHttpClient(StubHttpClient, AsyncHttpClient):
    """Coroutine flavour of StubHttpClient."""

    async def request(self, request: HttpRequest) -> HttpResponse:  # type: ignore[override]
        return self._next(request)

    async def aclose(self) -> None:
        self.closed = True
