# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request builder producing immutable HttpRequest values."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode, urlsplit, urlunsplit

from ..errors import UnsupportedMethodError
from .headers import header_value
from .models import HttpRequest

GET = "GET"
POST = "POST"
PUT = "PUT"
DELETE = "DELETE"

SUPPORTED_METHODS = frozenset({GET, POST, PUT, DELETE})


def _param_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_param_value(item) for item in value)
    return str(value)


def encode_query(params: Mapping[str, Any] | None) -> str:
    """Encode query parameters, dropping None-valued entries."""
    if not params:
        return ""
    return urlencode([(key, _param_value(value)) for key, value in params.items() if value is not None])


def _with_query(url: str, params: Mapping[str, Any] | None) -> str:
    query = encode_query(params)
    if not query:
        return url
    parts = urlsplit(url)
    merged = f"{parts.query}&{query}" if parts.query else query
    return urlunsplit((parts.scheme, parts.netloc, parts.path, merged, parts.fragment))


def _encode_body(body: Any) -> tuple[bytes | None, bool]:
    """Return (payload, is_json)."""
    if body is None:
        return None, False
    if isinstance(body, bytes):
        return body, False
    if isinstance(body, str):
        return body.encode("utf-8"), False
    to_payload = getattr(body, "to_payload", None)
    if callable(to_payload):
        body = to_payload()
    return json.dumps(body, separators=(",", ":")).encode("utf-8"), True


def build_request(
    method: str,
    url: str,
    body: Any = None,
    headers: Mapping[str, str] | None = None,
    params: Mapping[str, Any] | None = None,
) -> HttpRequest:
    """
    Build an HttpRequest.

    ``method`` is checked against the verbs the API uses. ``body`` may be raw bytes/str, a
    mapping, or an option object exposing ``to_payload()``; the latter two are sent as JSON.
    ``params`` are appended to the URL's query string.
    """
    verb = method.upper() if isinstance(method, str) else method
    if verb not in SUPPORTED_METHODS:
        raise UnsupportedMethodError(method)

    payload, is_json = _encode_body(body)
    request_headers: dict[str, str] = dict(headers or {})
    if not header_value(request_headers, "Accept"):
        request_headers["Accept"] = "application/json"
    if is_json and not header_value(request_headers, "Content-Type"):
        request_headers["Content-Type"] = "application/json"

    return HttpRequest(
        url=_with_query(url, params),
        method=verb,
        headers=request_headers,
        body=payload,
    )


__all__ = ["DELETE", "GET", "POST", "PUT", "SUPPORTED_METHODS", "build_request", "encode_query"]
