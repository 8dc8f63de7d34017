# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
unsplash-client package entrypoint.

A synchronous client for the Unsplash web API. HTTP behavior is abstracted behind an
injectable client interface, and API resources are modeled with typed dataclasses whose
fields are None when the payload omits them.
"""

from .api import Unsplash
from .config import HttpSettings, load_http_settings
from .errors import (
    ErrorCategory,
    IllegalArgumentError,
    InvalidOptionError,
    JSONUnmarshallingError,
    ResponseReadError,
    UnsplashError,
    UnsupportedMethodError,
    categorize_exception,
)
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    build_request,
    create_default_http_client,
)
from .log import setup_logging
from .models import (
    Collection,
    CollectionOpt,
    CollectionSearchResult,
    GlobalStats,
    ListOpt,
    MonthStats,
    Photo,
    PhotoOpt,
    PhotoSearchResult,
    ProfileImageOpt,
    RandomPhotoOpt,
    SearchOpt,
    Statistics,
    StatsOpt,
    User,
    UserSearchResult,
)
from .version import __version__

__all__ = [
    "Collection",
    "CollectionOpt",
    "CollectionSearchResult",
    "ErrorCategory",
    "GlobalStats",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "IllegalArgumentError",
    "InvalidOptionError",
    "JSONUnmarshallingError",
    "ListOpt",
    "MonthStats",
    "Photo",
    "PhotoOpt",
    "PhotoSearchResult",
    "ProfileImageOpt",
    "RandomPhotoOpt",
    "ResponseReadError",
    "SearchOpt",
    "Statistics",
    "StatsOpt",
    "StubHttpClient",
    "Unsplash",
    "UnsplashError",
    "UnsupportedMethodError",
    "User",
    "UserSearchResult",
    "build_request",
    "categorize_exception",
    "create_default_http_client",
    "load_http_settings",
    "setup_logging",
    "__version__",
]
