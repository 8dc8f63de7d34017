# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client
from .headers import header_value, normalize_headers, parse_link_header
from .httpx_client import HttpxClient
from .models import Headers, HttpRequest, HttpResponse
from .request import DELETE, GET, POST, PUT, SUPPORTED_METHODS, build_request
from .response import normalize_response

__all__ = [
    "DELETE",
    "GET",
    "POST",
    "PUT",
    "SUPPORTED_METHODS",
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "StubHttpClient",
    "build_request",
    "create_default_http_client",
    "header_value",
    "normalize_headers",
    "normalize_response",
    "parse_link_header",
]
