# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclasses for site-wide and per-resource statistics."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .fields import expect_mapping, opt_int, opt_list, opt_model, opt_str


@dataclass(frozen=True)
class GlobalStats:
    """Totals since the service launched (``stats/total``)."""

    total_photos: int | None = None
    photo_downloads: int | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> GlobalStats:
        data = expect_mapping(data, "GlobalStats")
        return cls(
            total_photos=opt_int(data, "total_photos", "GlobalStats"),
            photo_downloads=opt_int(data, "photo_downloads", "GlobalStats"),
        )


@dataclass(frozen=True)
class MonthStats:
    """Rolling 30-day totals (``stats/month``)."""

    downloads: int | None = None
    views: int | None = None
    likes: int | None = None
    new_photos: int | None = None
    new_photographers: int | None = None
    new_pixels: int | None = None
    new_developers: int | None = None
    new_applications: int | None = None
    new_requests: int | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> MonthStats:
        data = expect_mapping(data, "MonthStats")
        return cls(**{name: opt_int(data, name, "MonthStats") for name in cls.__dataclass_fields__})


@dataclass(frozen=True)
class StatValue:
    date: str | None = None
    value: int | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> StatValue:
        data = expect_mapping(data, "StatValue")
        return cls(
            date=opt_str(data, "date", "StatValue"),
            value=opt_int(data, "value", "StatValue"),
        )


@dataclass(frozen=True)
class StatHistory:
    change: int | None = None
    resolution: str | None = None
    quantity: int | None = None
    values: list[StatValue] | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> StatHistory:
        data = expect_mapping(data, "StatHistory")
        return cls(
            change=opt_int(data, "change", "StatHistory"),
            resolution=opt_str(data, "resolution", "StatHistory"),
            quantity=opt_int(data, "quantity", "StatHistory"),
            values=opt_list(data, "values", "StatHistory", StatValue.from_mapping),
        )


@dataclass(frozen=True)
class StatSeries:
    total: int | None = None
    historical: StatHistory | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> StatSeries:
        data = expect_mapping(data, "StatSeries")
        return cls(
            total=opt_int(data, "total", "StatSeries"),
            historical=opt_model(data, "historical", "StatSeries", StatHistory.from_mapping),
        )


@dataclass(frozen=True)
class Statistics:
    """Download/view/like history of one user (``username`` set) or one photo (``id`` set)."""

    id: str | None = None
    username: str | None = None
    downloads: StatSeries | None = None
    views: StatSeries | None = None
    likes: StatSeries | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Statistics:
        data = expect_mapping(data, "Statistics")
        return cls(
            id=opt_str(data, "id", "Statistics"),
            username=opt_str(data, "username", "Statistics"),
            downloads=opt_model(data, "downloads", "Statistics", StatSeries.from_mapping),
            views=opt_model(data, "views", "Statistics", StatSeries.from_mapping),
            likes=opt_model(data, "likes", "Statistics", StatSeries.from_mapping),
        )


__all__ = ["GlobalStats", "MonthStats", "StatHistory", "StatSeries", "StatValue", "Statistics"]
