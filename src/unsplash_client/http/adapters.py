# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-memory HttpClient for tests and offline use."""

from __future__ import annotations

import threading

from .client import HttpClient
from .models import HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """
    Deterministic, programmable HttpClient.

    Responses are keyed by full request URL (query string included). Unknown URLs get a
    404 with an Unsplash-style error body. Every request is recorded in ``requests``.
    """

    def __init__(self, responses: dict[str, HttpResponse] | None = None):
        self._responses = dict(responses or {})
        self._lock = threading.Lock()
        self.requests: list[HttpRequest] = []
        self.closed = False

    @property
    def calls(self) -> int:
        return len(self.requests)

    def add(self, url: str, response: HttpResponse) -> None:
        self._responses[url] = response

    def request(self, request: HttpRequest) -> HttpResponse:
        with self._lock:
            self.requests.append(request)
        if request.url in self._responses:
            return self._responses[request.url]
        return HttpResponse(
            status_code=404,
            headers={"content-type": "application/json"},
            content=b'{"errors":["Couldn\'t find resource"]}',
            url=request.url,
        )

    def close(self) -> None:
        self.closed = True
