# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Response normalizer: buffers an httpx response into an HttpResponse."""

from __future__ import annotations

import httpx

from ..errors import ResponseReadError
from .headers import normalize_headers
from .models import HttpResponse


def normalize_response(raw: httpx.Response) -> HttpResponse:
    """
    Read the whole body of ``raw`` and wrap it with its status and headers.

    Stream misuse (already consumed/closed) and OS-level read failures raise
    ResponseReadError. Transport errors raised while reading (httpx.ReadError,
    httpx.ReadTimeout, ...) propagate unchanged.
    """
    try:
        content = raw.read()
    except (httpx.StreamError, OSError) as exc:
        raise ResponseReadError(f"Failed to read response body: {exc}") from exc

    try:
        url: str | None = str(raw.url)
    except RuntimeError:
        # Responses constructed without a request (tests, custom adapters) have no URL.
        url = None

    return HttpResponse(
        status_code=raw.status_code,
        headers=normalize_headers(raw.headers),
        content=bytes(content),
        url=url,
    )


__all__ = ["normalize_response"]
