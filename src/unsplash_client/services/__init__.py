# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Resource service exports."""

from .base import Service
from .collections import CollectionsService
from .photos import PhotosService
from .search import SearchService
from .users import UsersService

__all__ = ["CollectionsService", "PhotosService", "SearchService", "Service", "UsersService"]
