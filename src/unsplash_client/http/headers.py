# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header normalization utilities.

HTTP header field names are case-insensitive (RFC 9110). Normalized responses store
headers as plain lowercase-keyed dicts so lookups behave the same across HttpClient
implementations.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qs, urlsplit

_LINK_PART_RE = re.compile(r'<(?P<url>[^>]*)>\s*;\s*rel="?(?P<rel>[^";]+)"?')


def _coerce_headers_mapping(headers: Any) -> Mapping[object, object] | None:
    """
    Best-effort coercion of "dict-like" header containers into a Mapping.

    Accepts plain dicts, httpx.Headers (via ``.items()``) and iterables of pairs.
    """
    if not headers:
        return None
    if isinstance(headers, Mapping):
        return headers

    items = getattr(headers, "items", None)
    if callable(items):
        return dict(items())

    return dict(headers)


def normalize_headers(headers: Mapping[object, object] | None) -> dict[str, str]:
    """Return a lowercase-keyed copy of a header mapping."""
    coerced = _coerce_headers_mapping(headers)
    if not coerced:
        return {}
    out: dict[str, str] = {}
    for key, value in coerced.items():
        if key is None:
            continue
        name = str(key).strip().lower()
        if not name:
            continue
        out[name] = "" if value is None else str(value)
    return out


def header_value(headers: Mapping[object, object] | None, name: str, default: str = "") -> str:
    """Return a header value using case-insensitive key matching."""
    if not headers or not name:
        return default

    coerced = _coerce_headers_mapping(headers)
    if not coerced:
        return default

    lower = str(name).lower()
    for key, value in coerced.items():
        if key is None:
            continue
        if str(key).lower() == lower:
            return default if value is None else str(value).strip()

    return default


def int_header(headers: Mapping[object, object] | None, name: str) -> int | None:
    """Return an integer header value, or None when absent or not a number."""
    raw = header_value(headers, name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def parse_link_header(value: str | None) -> dict[str, str]:
    """
    Parse an RFC 8288 ``Link`` header into ``{rel: url}``.

    ``<https://api.unsplash.com/photos?page=2>; rel="next"`` -> ``{"next": "https://..."}``
    """
    if not value:
        return {}
    links: dict[str, str] = {}
    for match in _LINK_PART_RE.finditer(value):
        for rel in match.group("rel").split():
            links[rel.lower()] = match.group("url").strip()
    return links


def page_from_url(url: str | None) -> int | None:
    """Extract the ``page`` query parameter from a pagination URL."""
    if not url:
        return None
    values = parse_qs(urlsplit(url).query).get("page")
    if not values:
        return None
    try:
        return int(values[0])
    except ValueError:
        return None


__all__ = ["header_value", "int_header", "normalize_headers", "page_from_url", "parse_link_header"]
