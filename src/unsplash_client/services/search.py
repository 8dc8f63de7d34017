# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Keyword search over users, photos and collections."""

from __future__ import annotations

from ..errors import InvalidOptionError
from ..http.models import HttpResponse
from ..models.options import SearchOpt
from ..models.search import CollectionSearchResult, PhotoSearchResult, UserSearchResult
from .base import Service, option_params


def _search_params(opt: SearchOpt | None) -> dict:
    if opt is None:
        raise InvalidOptionError("search requires a SearchOpt with a query")
    return option_params(opt)


class SearchService(Service):
    def users(self, opt: SearchOpt) -> tuple[UserSearchResult, HttpResponse]:
        return self.fetch_one(UserSearchResult.from_mapping, "search", "users", params=_search_params(opt))

    def photos(self, opt: SearchOpt) -> tuple[PhotoSearchResult, HttpResponse]:
        return self.fetch_one(PhotoSearchResult.from_mapping, "search", "photos", params=_search_params(opt))

    def collections(self, opt: SearchOpt) -> tuple[CollectionSearchResult, HttpResponse]:
        return self.fetch_one(
            CollectionSearchResult.from_mapping, "search", "collections", params=_search_params(opt)
        )
