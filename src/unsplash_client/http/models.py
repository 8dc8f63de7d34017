# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across unsplash-client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .headers import header_value, int_header, page_from_url, parse_link_header

Headers = dict[str, str]


@dataclass(frozen=True)
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None

    def __post_init__(self) -> None:
        # Read-only copy so a built request cannot be altered afterwards.
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


@dataclass(frozen=True)
class HttpResponse:
    """
    Normalized HTTP response with a fully buffered body.

    A non-2xx ``status_code`` is data, not an error: services decode and return the body
    regardless, and callers decide what a 4xx/5xx means for them.
    """

    status_code: int
    headers: Headers = field(default_factory=dict)
    content: bytes = b""
    url: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def header(self, name: str, default: str = "") -> str:
        return header_value(self.headers, name, default)

    @property
    def links(self) -> dict[str, str]:
        return parse_link_header(self.header("link"))

    @property
    def first_page(self) -> int | None:
        return page_from_url(self.links.get("first"))

    @property
    def prev_page(self) -> int | None:
        return page_from_url(self.links.get("prev"))

    @property
    def next_page(self) -> int | None:
        return page_from_url(self.links.get("next"))

    @property
    def last_page(self) -> int | None:
        return page_from_url(self.links.get("last"))

    @property
    def has_next_page(self) -> bool:
        return "next" in self.links

    @property
    def total(self) -> int | None:
        return int_header(self.headers, "x-total")

    @property
    def per_page(self) -> int | None:
        return int_header(self.headers, "x-per-page")

    @property
    def rate_limit(self) -> int | None:
        return int_header(self.headers, "x-ratelimit-limit")

    @property
    def rate_limit_remaining(self) -> int | None:
        return int_header(self.headers, "x-ratelimit-remaining")
