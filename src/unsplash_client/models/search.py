# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Search result wrappers.

``results`` is None when the payload has no ``results`` member and ``[]`` when the search
matched nothing.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .fields import expect_mapping, opt_int, opt_list
from .resources import Collection, Photo, User


@dataclass(frozen=True)
class UserSearchResult:
    total: int | None = None
    total_pages: int | None = None
    results: list[User] | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> UserSearchResult:
        data = expect_mapping(data, "UserSearchResult")
        return cls(
            total=opt_int(data, "total", "UserSearchResult"),
            total_pages=opt_int(data, "total_pages", "UserSearchResult"),
            results=opt_list(data, "results", "UserSearchResult", User.from_mapping),
        )


@dataclass(frozen=True)
class PhotoSearchResult:
    total: int | None = None
    total_pages: int | None = None
    results: list[Photo] | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> PhotoSearchResult:
        data = expect_mapping(data, "PhotoSearchResult")
        return cls(
            total=opt_int(data, "total", "PhotoSearchResult"),
            total_pages=opt_int(data, "total_pages", "PhotoSearchResult"),
            results=opt_list(data, "results", "PhotoSearchResult", Photo.from_mapping),
        )


@dataclass(frozen=True)
class CollectionSearchResult:
    total: int | None = None
    total_pages: int | None = None
    results: list[Collection] | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CollectionSearchResult:
        data = expect_mapping(data, "CollectionSearchResult")
        return cls(
            total=opt_int(data, "total", "CollectionSearchResult"),
            total_pages=opt_int(data, "total_pages", "CollectionSearchResult"),
            results=opt_list(data, "results", "CollectionSearchResult", Collection.from_mapping),
        )


__all__ = ["CollectionSearchResult", "PhotoSearchResult", "UserSearchResult"]
