# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for unsplash-client."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .fields import SchemaError
from .options import (
    CollectionOpt,
    ListOpt,
    PhotoOpt,
    ProfileImageOpt,
    RandomPhotoOpt,
    SearchOpt,
    StatsOpt,
)
from .resources import (
    Collection,
    CollectionLinks,
    DownloadLink,
    Exif,
    Location,
    Photo,
    PhotoLinks,
    PhotoURLs,
    Position,
    ProfileImage,
    Tag,
    User,
    UserBadge,
    UserLinks,
)
from .search import CollectionSearchResult, PhotoSearchResult, UserSearchResult
from .stats import GlobalStats, MonthStats, StatHistory, StatSeries, StatValue, Statistics

__all__ = [
    "Collection",
    "CollectionLinks",
    "CollectionOpt",
    "CollectionSearchResult",
    "DownloadLink",
    "Exif",
    "GlobalStats",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "ListOpt",
    "Location",
    "MonthStats",
    "Photo",
    "PhotoLinks",
    "PhotoOpt",
    "PhotoSearchResult",
    "PhotoURLs",
    "Position",
    "ProfileImage",
    "ProfileImageOpt",
    "RandomPhotoOpt",
    "SchemaError",
    "SearchOpt",
    "StatHistory",
    "StatSeries",
    "StatValue",
    "Statistics",
    "StatsOpt",
    "Tag",
    "User",
    "UserBadge",
    "UserLinks",
    "UserSearchResult",
]
