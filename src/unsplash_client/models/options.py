# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request option dataclasses.

Each option validates itself before a request is built and renders the query parameters
(or JSON payload) the endpoint expects. Unset optional values are left out of the request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..errors import InvalidOptionError

ORDER_BY_VALUES = frozenset({"latest", "oldest", "popular"})
ORIENTATION_VALUES = frozenset({"landscape", "portrait", "squarish"})
STATS_RESOLUTIONS = frozenset({"days"})
MAX_RANDOM_COUNT = 30
MAX_STATS_QUANTITY = 30


def _require_positive(name: str, value: int | None) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidOptionError(f"{name} must be a positive integer, got {value!r}")


def _join(values: list[Any] | tuple[Any, ...] | None) -> str | None:
    if not values:
        return None
    return ",".join(str(value) for value in values)


@dataclass
class ListOpt:
    """Pagination and ordering for list endpoints."""

    page: int = 1
    per_page: int = 10
    order_by: str = "latest"

    def validate(self) -> None:
        _require_positive("page", self.page)
        _require_positive("per_page", self.per_page)
        if self.order_by not in ORDER_BY_VALUES:
            raise InvalidOptionError(f"order_by must be one of {sorted(ORDER_BY_VALUES)}, got {self.order_by!r}")

    def to_params(self) -> dict[str, Any]:
        return {"page": self.page, "per_page": self.per_page, "order_by": self.order_by}


@dataclass
class SearchOpt:
    query: str = ""
    page: int = 1
    per_page: int = 10
    collections: list[str] | None = None
    orientation: str | None = None

    def validate(self) -> None:
        if not isinstance(self.query, str) or not self.query.strip():
            raise InvalidOptionError("query is required for search")
        _require_positive("page", self.page)
        _require_positive("per_page", self.per_page)
        if self.orientation is not None and self.orientation not in ORIENTATION_VALUES:
            raise InvalidOptionError(
                f"orientation must be one of {sorted(ORIENTATION_VALUES)}, got {self.orientation!r}"
            )

    def to_params(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "page": self.page,
            "per_page": self.per_page,
            "collections": _join(self.collections),
            "orientation": self.orientation,
        }


@dataclass
class ProfileImageOpt:
    """Custom profile image dimensions for ``users/{username}``."""

    width: int | None = None
    height: int | None = None

    def validate(self) -> None:
        _require_positive("width", self.width)
        _require_positive("height", self.height)

    def to_params(self) -> dict[str, Any]:
        return {"w": self.width, "h": self.height}


@dataclass
class PhotoOpt:
    """Custom size and crop rectangle (x, y, width, height) for ``photos/{id}``."""

    width: int | None = None
    height: int | None = None
    rect: tuple[int, int, int, int] | None = None

    def validate(self) -> None:
        _require_positive("width", self.width)
        _require_positive("height", self.height)
        if self.rect is None:
            return
        if len(self.rect) != 4 or any(isinstance(v, bool) or not isinstance(v, int) or v < 0 for v in self.rect):
            raise InvalidOptionError(f"rect must be four non-negative integers, got {self.rect!r}")

    def to_params(self) -> dict[str, Any]:
        return {"w": self.width, "h": self.height, "rect": _join(self.rect)}


@dataclass
class RandomPhotoOpt:
    count: int = 1
    collections: list[str] | None = None
    featured: bool = False
    username: str | None = None
    query: str | None = None
    width: int | None = None
    height: int | None = None
    orientation: str | None = None

    def validate(self) -> None:
        _require_positive("count", self.count)
        if self.count > MAX_RANDOM_COUNT:
            raise InvalidOptionError(f"count must be at most {MAX_RANDOM_COUNT}, got {self.count}")
        _require_positive("width", self.width)
        _require_positive("height", self.height)
        if self.orientation is not None and self.orientation not in ORIENTATION_VALUES:
            raise InvalidOptionError(
                f"orientation must be one of {sorted(ORIENTATION_VALUES)}, got {self.orientation!r}"
            )
        # The API rejects a collection filter combined with a query.
        if self.collections and self.query:
            raise InvalidOptionError("collections and query cannot be combined")

    def to_params(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "collections": _join(self.collections),
            "featured": True if self.featured else None,
            "username": self.username,
            "query": self.query,
            "w": self.width,
            "h": self.height,
            "orientation": self.orientation,
        }


@dataclass
class StatsOpt:
    resolution: str = "days"
    quantity: int = 30

    def validate(self) -> None:
        if self.resolution not in STATS_RESOLUTIONS:
            raise InvalidOptionError(f"resolution must be one of {sorted(STATS_RESOLUTIONS)}, got {self.resolution!r}")
        _require_positive("quantity", self.quantity)
        if self.quantity > MAX_STATS_QUANTITY:
            raise InvalidOptionError(f"quantity must be at most {MAX_STATS_QUANTITY}, got {self.quantity}")

    def to_params(self) -> dict[str, Any]:
        return {"resolution": self.resolution, "quantity": self.quantity}


@dataclass
class CollectionOpt:
    """Payload for creating or updating a collection."""

    title: str | None = None
    description: str | None = None
    private: bool | None = None

    def validate(self, *, require_title: bool = False) -> None:
        if require_title and (not isinstance(self.title, str) or not self.title.strip()):
            raise InvalidOptionError("title is required to create a collection")

    def to_payload(self) -> dict[str, Any]:
        payload = {"title": self.title, "description": self.description, "private": self.private}
        return {key: value for key, value in payload.items() if value is not None}


__all__ = [
    "CollectionOpt",
    "ListOpt",
    "PhotoOpt",
    "ProfileImageOpt",
    "RandomPhotoOpt",
    "SearchOpt",
    "StatsOpt",
]
