# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Public user profiles and their photos, likes, collections and statistics."""

from __future__ import annotations

from typing import Any

from ..http.models import HttpResponse
from ..models.fields import expect_mapping, opt_str
from ..models.options import ListOpt, ProfileImageOpt, StatsOpt
from ..models.resources import Collection, Photo, User
from ..models.stats import Statistics
from .base import Service, decode_one, option_params, require_id


def _portfolio_url(data: Any) -> str | None:
    return opt_str(expect_mapping(data, "Portfolio"), "url", "Portfolio")


class UsersService(Service):
    def user(self, username: str, opt: ProfileImageOpt | None = None) -> tuple[User, HttpResponse]:
        """Return a user's public profile, optionally with custom profile image sizes."""
        name = require_id("username", username)
        return self.fetch_one(User.from_mapping, "users", name, params=option_params(opt))

    def portfolio(self, username: str) -> tuple[str | None, HttpResponse]:
        """Return the portfolio URL a user has set, or None."""
        name = require_id("username", username)
        response = self.send("users", name, "portfolio")
        url = decode_one(response, _portfolio_url)
        return url, response

    def photos(self, username: str, opt: ListOpt | None = None) -> tuple[list[Photo], HttpResponse]:
        name = require_id("username", username)
        return self.fetch_many(Photo.from_mapping, "users", name, "photos", params=option_params(opt))

    def liked_photos(self, username: str, opt: ListOpt | None = None) -> tuple[list[Photo], HttpResponse]:
        name = require_id("username", username)
        return self.fetch_many(Photo.from_mapping, "users", name, "likes", params=option_params(opt))

    def collections(self, username: str, opt: ListOpt | None = None) -> tuple[list[Collection], HttpResponse]:
        name = require_id("username", username)
        return self.fetch_many(Collection.from_mapping, "users", name, "collections", params=option_params(opt))

    def statistics(self, username: str, opt: StatsOpt | None = None) -> tuple[Statistics, HttpResponse]:
        name = require_id("username", username)
        return self.fetch_one(Statistics.from_mapping, "users", name, "statistics", params=option_params(opt))
