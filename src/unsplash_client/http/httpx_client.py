# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import httpx

from ..config import HttpSettings, load_http_settings
from .client import HttpClient
from .models import HttpRequest, HttpResponse
from .response import normalize_response


class HttpxClient(HttpClient):
    """
    Synchronous httpx client wrapper.

    Pass a pre-configured ``httpx.Client`` to control timeouts, proxies, transports or
    auth; otherwise one is built from ``settings``. Transport exceptions are not caught.
    """

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = httpx.Headers(self.settings.default_headers())
        headers.update(request.headers or {})

        # Leaving the stream context always closes the body and releases the connection.
        with self._client.stream(
            request.method,
            request.url,
            headers=headers,
            content=request.body,
        ) as resp:
            return normalize_response(resp)

    def close(self) -> None:
        self._client.close()
