# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Collection listing, lookup and management."""

from __future__ import annotations

from ..errors import IllegalArgumentError
from ..http.models import HttpResponse
from ..http.request import DELETE, POST, PUT
from ..models.options import CollectionOpt, ListOpt
from ..models.resources import Collection, Photo
from .base import Service, option_params, require_id


class CollectionsService(Service):
    def all(self, opt: ListOpt | None = None) -> tuple[list[Collection], HttpResponse]:
        return self.fetch_many(Collection.from_mapping, "collections", params=option_params(opt))

    def featured(self, opt: ListOpt | None = None) -> tuple[list[Collection], HttpResponse]:
        return self.fetch_many(Collection.from_mapping, "collections", "featured", params=option_params(opt))

    def curated(self, opt: ListOpt | None = None) -> tuple[list[Collection], HttpResponse]:
        return self.fetch_many(Collection.from_mapping, "collections", "curated", params=option_params(opt))

    def collection(self, collection_id: str | int) -> tuple[Collection, HttpResponse]:
        cid = require_id("collection_id", collection_id)
        return self.fetch_one(Collection.from_mapping, "collections", cid)

    def photos(self, collection_id: str | int, opt: ListOpt | None = None) -> tuple[list[Photo], HttpResponse]:
        cid = require_id("collection_id", collection_id)
        return self.fetch_many(Photo.from_mapping, "collections", cid, "photos", params=option_params(opt))

    def related(self, collection_id: str | int) -> tuple[list[Collection], HttpResponse]:
        cid = require_id("collection_id", collection_id)
        return self.fetch_many(Collection.from_mapping, "collections", cid, "related")

    def create(self, opt: CollectionOpt) -> tuple[Collection, HttpResponse]:
        """Create a collection owned by the authenticated user. Requires write_collections."""
        if opt is None:
            raise IllegalArgumentError("create() requires a CollectionOpt")
        opt.validate(require_title=True)
        return self.fetch_one(Collection.from_mapping, "collections", method=POST, body=opt)

    def update(self, collection_id: str | int, opt: CollectionOpt) -> tuple[Collection, HttpResponse]:
        cid = require_id("collection_id", collection_id)
        if opt is None:
            raise IllegalArgumentError("update() requires a CollectionOpt")
        opt.validate()
        return self.fetch_one(Collection.from_mapping, "collections", cid, method=PUT, body=opt)

    def delete(self, collection_id: str | int) -> HttpResponse:
        """Delete a collection. The API answers 204 with no body, so nothing is decoded."""
        cid = require_id("collection_id", collection_id)
        return self.send("collections", cid, method=DELETE)

    def add_photo(self, collection_id: str | int, photo_id: str) -> HttpResponse:
        cid = require_id("collection_id", collection_id)
        pid = require_id("photo_id", photo_id)
        return self.send("collections", cid, "add", method=POST, body={"photo_id": pid})

    def remove_photo(self, collection_id: str | int, photo_id: str) -> HttpResponse:
        cid = require_id("collection_id", collection_id)
        pid = require_id("photo_id", photo_id)
        return self.send("collections", cid, "remove", method=DELETE, params={"photo_id": pid})
