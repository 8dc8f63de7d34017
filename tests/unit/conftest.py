# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import copy
import json

import pytest

from unsplash_client.api import Unsplash
from unsplash_client.config import HttpSettings
from unsplash_client.http.adapters import StubHttpClient
from unsplash_client.http.models import HttpResponse

API = "https://api.unsplash.com/"


def json_response(payload, status_code=200, headers=None) -> HttpResponse:
    body = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
    merged = {"content-type": "application/json"}
    merged.update({k.lower(): v for k, v in (headers or {}).items()})
    return HttpResponse(status_code=status_code, headers=merged, content=body)


_USER = {
    "id": "pXhwzz1JtQU",
    "username": "poorkane",
    "name": "Gilbert Kane",
    "bio": None,
    "total_likes": 5,
    "total_photos": 74,
    "followed_by_user": False,
    "profile_image": {"small": "https://images.unsplash.com/s", "large": "https://images.unsplash.com/l"},
    "links": {"self": "https://api.unsplash.com/users/poorkane", "html": "https://unsplash.com/@poorkane"},
}

_PHOTO = {
    "id": "Dwu85P9SOIk",
    "created_at": "2016-05-03T11:00:28-04:00",
    "width": 2448,
    "height": 3264,
    "color": "#6E633A",
    "likes": 24,
    "liked_by_user": False,
    "exif": {"make": "Canon", "model": "Canon EOS 40D", "iso": 100},
    "location": {"city": "Montreal", "country": "Canada", "position": {"latitude": 45.47, "longitude": -73.58}},
    "urls": {"raw": "https://images.unsplash.com/photo-1", "thumb": "https://images.unsplash.com/photo-1?w=200"},
    "user": {"id": "QPxL2MGqfrw", "username": "exampleuser"},
    "links": {"self": "https://api.unsplash.com/photos/Dwu85P9SOIk", "download_location": "https://api.unsplash.com/photos/Dwu85P9SOIk/download"},
}

_COLLECTION = {
    "id": "206",
    "title": "Makers: Cat and Ben",
    "total_photos": 12,
    "private": False,
    "cover_photo": {"id": "xCmvrpzctaQ", "likes": 3},
    "user": {"username": "unsplash"},
    "links": {"photos": "https://api.unsplash.com/collections/206/photos"},
}


@pytest.fixture
def stub() -> StubHttpClient:
    return StubHttpClient()


@pytest.fixture
def api(stub) -> Unsplash:
    return Unsplash(http_client=stub, settings=HttpSettings())


@pytest.fixture
def respond(stub):
    """Register a canned JSON reply for a URL relative to the API root."""

    def _respond(path, payload, status_code=200, headers=None) -> HttpResponse:
        response = json_response(payload, status_code=status_code, headers=headers)
        stub.add(API + path, response)
        return response

    return _respond


@pytest.fixture
def user_payload():
    return copy.deepcopy(_USER)


@pytest.fixture
def photo_payload():
    return copy.deepcopy(_PHOTO)


@pytest.fixture
def collection_payload():
    return copy.deepcopy(_COLLECTION)
