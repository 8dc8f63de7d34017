# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level Unsplash facade wiring one HTTP client into every resource service."""

from __future__ import annotations

from contextlib import suppress

from .config import HttpSettings, load_http_settings
from .http.client import HttpClient, create_default_http_client
from .http.models import HttpResponse
from .models.resources import User
from .models.stats import GlobalStats, MonthStats
from .services.base import Service
from .services.collections import CollectionsService
from .services.photos import PhotosService
from .services.search import SearchService
from .services.users import UsersService


class Unsplash(Service):
    """
    Entry point for the Unsplash API.

    The injected ``http_client`` (an httpx-backed client built from the environment when
    omitted) is shared by ``users``, ``photos``, ``collections`` and ``search``. Every call
    returns the decoded value together with the normalized HttpResponse.

    HTTP error statuses are not raised: a 401, 404 or 500 whose body is valid JSON still
    decodes and returns. Check ``response.ok`` or ``response.status_code`` when the
    distinction matters.

    ``close()`` and leaving a ``with`` block close the HTTP client, including one the caller
    passed in. Do not reuse an injected client after closing the facade.
    """

    def __init__(self, http_client: HttpClient | None = None, settings: HttpSettings | None = None):
        self.http_settings = settings or load_http_settings()
        super().__init__(
            http_client or create_default_http_client(self.http_settings),
            self.http_settings.base_url,
        )
        self.users = UsersService(self.http_client, self.base_url)
        self.photos = PhotosService(self.http_client, self.base_url)
        self.collections = CollectionsService(self.http_client, self.base_url)
        self.search = SearchService(self.http_client, self.base_url)

    def current_user(self) -> tuple[User, HttpResponse]:
        """Return the profile of the user the access token belongs to."""
        return self.fetch_one(User.from_mapping, "me")

    def stats(self) -> tuple[GlobalStats, HttpResponse]:
        """Return total photos and downloads since the service launched."""
        return self.fetch_one(GlobalStats.from_mapping, "stats", "total")

    def month_stats(self) -> tuple[MonthStats, HttpResponse]:
        return self.fetch_one(MonthStats.from_mapping, "stats", "month")

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> Unsplash:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
