# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Photo listing, lookup, random selection, statistics and likes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..http.models import HttpResponse
from ..http.request import DELETE, POST
from ..models.fields import expect_mapping, opt_model
from ..models.options import ListOpt, PhotoOpt, RandomPhotoOpt, StatsOpt
from ..models.resources import DownloadLink, Photo
from ..models.stats import Statistics
from .base import Service, decode_one, option_params, require_id


def _liked_photo(data: Mapping[str, Any]) -> Photo | None:
    # Like/unlike answer with {"photo": {...}, "user": {...}}.
    return opt_model(expect_mapping(data, "LikeResponse"), "photo", "LikeResponse", Photo.from_mapping)


class PhotosService(Service):
    def all(self, opt: ListOpt | None = None) -> tuple[list[Photo], HttpResponse]:
        """Return one page of the editorial photo feed."""
        return self.fetch_many(Photo.from_mapping, "photos", params=option_params(opt))

    def curated(self, opt: ListOpt | None = None) -> tuple[list[Photo], HttpResponse]:
        return self.fetch_many(Photo.from_mapping, "photos", "curated", params=option_params(opt))

    def photo(self, photo_id: str, opt: PhotoOpt | None = None) -> tuple[Photo, HttpResponse]:
        pid = require_id("photo_id", photo_id)
        return self.fetch_one(Photo.from_mapping, "photos", pid, params=option_params(opt))

    def random(self, opt: RandomPhotoOpt | None = None) -> tuple[list[Photo], HttpResponse]:
        """
        Return random photos.

        ``count`` is always sent so the API answers with an array, even for a single photo.
        """
        params = option_params(opt or RandomPhotoOpt())
        return self.fetch_many(Photo.from_mapping, "photos", "random", params=params)

    def statistics(self, photo_id: str, opt: StatsOpt | None = None) -> tuple[Statistics, HttpResponse]:
        pid = require_id("photo_id", photo_id)
        return self.fetch_one(Statistics.from_mapping, "photos", pid, "statistics", params=option_params(opt))

    def download_link(self, photo_id: str) -> tuple[DownloadLink, HttpResponse]:
        """Return the download URL for a photo (this also counts as a download)."""
        pid = require_id("photo_id", photo_id)
        return self.fetch_one(DownloadLink.from_mapping, "photos", pid, "download")

    def like(self, photo_id: str) -> tuple[Photo | None, HttpResponse]:
        """Like a photo on behalf of the authenticated user. Requires the write_likes scope."""
        pid = require_id("photo_id", photo_id)
        response = self.send("photos", pid, "like", method=POST)
        return decode_one(response, _liked_photo), response

    def unlike(self, photo_id: str) -> tuple[Photo | None, HttpResponse]:
        pid = require_id("photo_id", photo_id)
        response = self.send("photos", pid, "like", method=DELETE)
        return decode_one(response, _liked_photo), response
