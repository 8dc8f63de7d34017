# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared request/execute/decode pipeline for resource services."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar
from urllib.parse import quote, urljoin

from ..errors import IllegalArgumentError, JSONUnmarshallingError
from ..http.client import HttpClient
from ..http.models import HttpRequest, HttpResponse
from ..http.request import GET, build_request
from ..models.fields import SchemaError, expect_list

logger = logging.getLogger(__name__)

T = TypeVar("T")
Decoder = Callable[[Mapping[str, Any]], T]


def require_id(name: str, value: object) -> str:
    """Return ``value`` as a stripped identifier, rejecting empty ones."""
    if value is None or isinstance(value, bool):
        raise IllegalArgumentError(f"{name} cannot be empty")
    text = str(value).strip()
    if not text:
        raise IllegalArgumentError(f"{name} cannot be empty")
    if text in {".", ".."}:
        raise IllegalArgumentError(f"{name} is not a valid identifier: {text!r}")
    return text


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal: {name}")


def _load_json(response: HttpResponse) -> Any:
    try:
        return json.loads(response.content, parse_constant=_reject_constant)
    except (ValueError, UnicodeDecodeError) as exc:
        raise JSONUnmarshallingError(str(exc)) from exc
    except RecursionError as exc:
        raise JSONUnmarshallingError("response body is nested too deeply") from exc


def decode_one(response: HttpResponse, decode: Decoder[T]) -> T:
    """Decode the response body as a single resource."""
    data = _load_json(response)
    try:
        return decode(data)
    except SchemaError as exc:
        raise JSONUnmarshallingError(str(exc)) from exc
    except RecursionError as exc:
        raise JSONUnmarshallingError("response body is nested too deeply") from exc


def decode_many(response: HttpResponse, decode: Decoder[T]) -> list[T]:
    """Decode the response body as a JSON array of resources."""
    data = _load_json(response)
    try:
        return [decode(item) for item in expect_list(data, "list")]
    except SchemaError as exc:
        raise JSONUnmarshallingError(str(exc)) from exc
    except RecursionError as exc:
        raise JSONUnmarshallingError("response body is nested too deeply") from exc


class Service:
    """
    Base for resource services.

    Holds a reference to the shared HttpClient; carries no other state, so one instance
    may serve concurrent callers as long as the client itself is thread-safe.
    """

    def __init__(self, http_client: HttpClient, base_url: str):
        self.http_client = http_client
        self.base_url = base_url

    def endpoint(self, *segments: str) -> str:
        return urljoin(self.base_url, "/".join(quote(segment, safe="") for segment in segments))

    def execute(self, request: HttpRequest | None) -> HttpResponse:
        """Send ``request`` through the shared client exactly once."""
        if request is None:
            raise IllegalArgumentError("Request object cannot be None")
        response = self.http_client.request(request)
        logger.debug("%s %s -> %s", request.method, request.url, response.status_code)
        return response

    def send(
        self,
        *segments: str,
        method: str = GET,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> HttpResponse:
        request = build_request(method, self.endpoint(*segments), body=body, params=params)
        return self.execute(request)

    def fetch_one(
        self,
        decode: Decoder[T],
        *segments: str,
        method: str = GET,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> tuple[T, HttpResponse]:
        response = self.send(*segments, method=method, params=params, body=body)
        return decode_one(response, decode), response

    def fetch_many(
        self,
        decode: Decoder[T],
        *segments: str,
        params: Mapping[str, Any] | None = None,
    ) -> tuple[list[T], HttpResponse]:
        response = self.send(*segments, params=params)
        return decode_many(response, decode), response


def option_params(opt: Any) -> dict[str, Any] | None:
    """Validate an option object and return its query parameters."""
    if opt is None:
        return None
    opt.validate()
    return opt.to_params()


__all__ = ["Service", "decode_many", "decode_one", "option_params", "require_id"]
