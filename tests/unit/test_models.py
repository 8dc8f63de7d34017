# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from unsplash_client.errors import InvalidOptionError
from unsplash_client.models import (
    Collection,
    CollectionOpt,
    GlobalStats,
    ListOpt,
    MonthStats,
    Photo,
    PhotoOpt,
    PhotoSearchResult,
    ProfileImageOpt,
    RandomPhotoOpt,
    SchemaError,
    SearchOpt,
    Statistics,
    StatsOpt,
    User,
    UserSearchResult,
)


def test_user_fields_present_and_absent(user_payload):
    user = User.from_mapping(user_payload)
    assert user.id == "pXhwzz1JtQU"
    assert user.username == "poorkane"
    assert user.total_likes == 5
    assert user.followed_by_user is False
    assert user.profile_image.small == "https://images.unsplash.com/s"
    assert user.profile_image.medium is None
    assert user.links.self_link == "https://api.unsplash.com/users/poorkane"
    # Absent and null both stay None; zero values are not invented.
    assert user.bio is None
    assert user.total_collections is None
    assert user.photos is None
    assert user.badge is None


def test_photo_nested_resources(photo_payload):
    photo = Photo.from_mapping(photo_payload)
    assert photo.width == 2448
    assert photo.exif.iso == 100
    assert photo.exif.aperture is None
    assert photo.location.position.latitude == pytest.approx(45.47)
    assert photo.urls.thumb.endswith("w=200")
    assert photo.user.username == "exampleuser"
    assert photo.links.download_location.endswith("/download")
    assert photo.tags is None
    assert photo.current_user_collections is None


def test_position_accepts_integer_coordinates():
    photo = Photo.from_mapping({"location": {"position": {"latitude": 0, "longitude": 12}}})
    assert photo.location.position.latitude == 0.0
    assert isinstance(photo.location.position.longitude, float)


def test_collection_with_cover_photo(collection_payload):
    collection = Collection.from_mapping(collection_payload)
    assert collection.id == "206"
    assert collection.private is False
    assert collection.cover_photo.id == "xCmvrpzctaQ"
    assert collection.cover_photo.user is None
    assert collection.user.username == "unsplash"
    assert collection.links.related is None


def test_collection_accepts_legacy_integer_id():
    assert Collection.from_mapping({"id": 206}).id == 206
    with pytest.raises(SchemaError):
        Collection.from_mapping({"id": True})


def test_photo_with_user_collections_and_tags(photo_payload, collection_payload):
    photo_payload["current_user_collections"] = [collection_payload]
    photo_payload["tags"] = [{"title": "canada"}, {"title": "city"}]
    photo = Photo.from_mapping(photo_payload)
    assert [tag.title for tag in photo.tags] == ["canada", "city"]
    assert photo.current_user_collections[0].title == "Makers: Cat and Ben"


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"total_likes": "5"}, "User.total_likes"),
        ({"total_likes": 5.5}, "User.total_likes"),
        ({"followed_by_user": 1}, "User.followed_by_user"),
        ({"username": 42}, "User.username"),
        ({"profile_image": "https://x"}, "User.profile_image"),
        ({"photos": {"id": "a"}}, "User.photos"),
        ({"photos": ["a"]}, "User.photos[0]"),
    ],
)
def test_user_schema_mismatch_raises(payload, message):
    with pytest.raises(SchemaError) as excinfo:
        User.from_mapping(payload)
    assert message in str(excinfo.value)


def test_top_level_must_be_object():
    with pytest.raises(SchemaError):
        User.from_mapping(["not", "an", "object"])


def test_search_result_distinguishes_missing_and_empty_results():
    missing = PhotoSearchResult.from_mapping({"total": 0, "total_pages": 0})
    empty = PhotoSearchResult.from_mapping({"total": 0, "total_pages": 0, "results": []})
    assert missing.results is None
    assert empty.results == []
    assert empty.total == 0

    users = UserSearchResult.from_mapping({"total": 1, "results": [{"username": "a"}]})
    assert users.total_pages is None
    assert users.results[0].username == "a"


def test_stats_models():
    stats = GlobalStats.from_mapping({"total_photos": 1200, "photo_downloads": 99})
    assert stats.total_photos == 1200
    assert stats.photo_downloads == 99

    month = MonthStats.from_mapping({"downloads": 10, "new_photos": 2, "ignored": "x"})
    assert month.downloads == 10
    assert month.new_photos == 2
    assert month.views is None

    statistics = Statistics.from_mapping(
        {
            "username": "poorkane",
            "downloads": {
                "total": 4,
                "historical": {
                    "change": 1,
                    "resolution": "days",
                    "quantity": 2,
                    "values": [{"date": "2024-01-01", "value": 1}, {"date": "2024-01-02", "value": 0}],
                },
            },
        }
    )
    assert statistics.username == "poorkane"
    assert statistics.downloads.total == 4
    assert statistics.downloads.historical.values[1].value == 0
    assert statistics.views is None


def test_resources_are_frozen(user_payload):
    user = User.from_mapping(user_payload)
    with pytest.raises(AttributeError):
        user.username = "someone-else"


def test_list_opt_validation_and_params():
    assert ListOpt().to_params() == {"page": 1, "per_page": 10, "order_by": "latest"}
    ListOpt(page=3, per_page=30, order_by="popular").validate()
    for bad in (ListOpt(page=0), ListOpt(per_page=-1), ListOpt(order_by="random"), ListOpt(page=True)):
        with pytest.raises(InvalidOptionError):
            bad.validate()


def test_search_opt_requires_query():
    with pytest.raises(InvalidOptionError):
        SearchOpt().validate()
    with pytest.raises(InvalidOptionError):
        SearchOpt(query="   ").validate()
    with pytest.raises(InvalidOptionError):
        SearchOpt(query="cats", orientation="round").validate()

    opt = SearchOpt(query="cats", collections=["1", "2"], orientation="portrait")
    opt.validate()
    assert opt.to_params() == {
        "query": "cats",
        "page": 1,
        "per_page": 10,
        "collections": "1,2",
        "orientation": "portrait",
    }


def test_random_photo_opt_validation():
    RandomPhotoOpt(count=30, featured=True).validate()
    for bad in (
        RandomPhotoOpt(count=0),
        RandomPhotoOpt(count=31),
        RandomPhotoOpt(width=0),
        RandomPhotoOpt(orientation="sideways"),
        RandomPhotoOpt(collections=["1"], query="cats"),
    ):
        with pytest.raises(InvalidOptionError):
            bad.validate()

    params = RandomPhotoOpt(count=2, username="poorkane").to_params()
    assert params["count"] == 2
    assert params["username"] == "poorkane"
    assert params["featured"] is None


def test_size_and_stats_opts():
    assert ProfileImageOpt(width=64).to_params() == {"w": 64, "h": None}
    with pytest.raises(InvalidOptionError):
        ProfileImageOpt(height=0).validate()

    assert PhotoOpt(width=100, rect=(0, 0, 50, 50)).to_params()["rect"] == "0,0,50,50"
    with pytest.raises(InvalidOptionError):
        PhotoOpt(rect=(0, 0, 50)).validate()
    with pytest.raises(InvalidOptionError):
        PhotoOpt(rect=(0, -1, 50, 50)).validate()

    assert StatsOpt().to_params() == {"resolution": "days", "quantity": 30}
    with pytest.raises(InvalidOptionError):
        StatsOpt(quantity=31).validate()
    with pytest.raises(InvalidOptionError):
        StatsOpt(resolution="weeks").validate()


def test_collection_opt_payload():
    assert CollectionOpt(title="Trips").to_payload() == {"title": "Trips"}
    assert CollectionOpt(description="d", private=False).to_payload() == {"description": "d", "private": False}
    CollectionOpt().validate()
    with pytest.raises(InvalidOptionError):
        CollectionOpt(title=" ").validate(require_title=True)
