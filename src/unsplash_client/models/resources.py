# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclasses mirroring the Unsplash user, photo and collection payloads."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .fields import (
    expect_mapping,
    opt_bool,
    opt_float,
    opt_int,
    opt_list,
    opt_model,
    opt_str,
)


@dataclass(frozen=True)
class ProfileImage:
    small: str | None = None
    medium: str | None = None
    large: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ProfileImage:
        data = expect_mapping(data, "ProfileImage")
        return cls(
            small=opt_str(data, "small", "ProfileImage"),
            medium=opt_str(data, "medium", "ProfileImage"),
            large=opt_str(data, "large", "ProfileImage"),
        )


@dataclass(frozen=True)
class UserLinks:
    self_link: str | None = None
    html: str | None = None
    photos: str | None = None
    likes: str | None = None
    portfolio: str | None = None
    following: str | None = None
    followers: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> UserLinks:
        data = expect_mapping(data, "UserLinks")
        return cls(
            self_link=opt_str(data, "self", "UserLinks"),
            html=opt_str(data, "html", "UserLinks"),
            photos=opt_str(data, "photos", "UserLinks"),
            likes=opt_str(data, "likes", "UserLinks"),
            portfolio=opt_str(data, "portfolio", "UserLinks"),
            following=opt_str(data, "following", "UserLinks"),
            followers=opt_str(data, "followers", "UserLinks"),
        )


@dataclass(frozen=True)
class UserBadge:
    title: str | None = None
    primary: bool | None = None
    slug: str | None = None
    link: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> UserBadge:
        data = expect_mapping(data, "UserBadge")
        return cls(
            title=opt_str(data, "title", "UserBadge"),
            primary=opt_bool(data, "primary", "UserBadge"),
            slug=opt_str(data, "slug", "UserBadge"),
            link=opt_str(data, "link", "UserBadge"),
        )


@dataclass(frozen=True)
class User:
    """An Unsplash user profile. ``photos`` is only populated by some endpoints."""

    id: str | None = None
    username: str | None = None
    name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    updated_at: str | None = None
    twitter_username: str | None = None
    instagram_username: str | None = None
    portfolio_url: str | None = None
    bio: str | None = None
    location: str | None = None
    total_likes: int | None = None
    total_photos: int | None = None
    total_collections: int | None = None
    followed_by_user: bool | None = None
    followers_count: int | None = None
    following_count: int | None = None
    downloads: int | None = None
    uploads_remaining: int | None = None
    email: str | None = None
    profile_image: ProfileImage | None = None
    badge: UserBadge | None = None
    links: UserLinks | None = None
    photos: list[Photo] | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> User:
        data = expect_mapping(data, "User")
        return cls(
            id=opt_str(data, "id", "User"),
            username=opt_str(data, "username", "User"),
            name=opt_str(data, "name", "User"),
            first_name=opt_str(data, "first_name", "User"),
            last_name=opt_str(data, "last_name", "User"),
            updated_at=opt_str(data, "updated_at", "User"),
            twitter_username=opt_str(data, "twitter_username", "User"),
            instagram_username=opt_str(data, "instagram_username", "User"),
            portfolio_url=opt_str(data, "portfolio_url", "User"),
            bio=opt_str(data, "bio", "User"),
            location=opt_str(data, "location", "User"),
            total_likes=opt_int(data, "total_likes", "User"),
            total_photos=opt_int(data, "total_photos", "User"),
            total_collections=opt_int(data, "total_collections", "User"),
            followed_by_user=opt_bool(data, "followed_by_user", "User"),
            followers_count=opt_int(data, "followers_count", "User"),
            following_count=opt_int(data, "following_count", "User"),
            downloads=opt_int(data, "downloads", "User"),
            uploads_remaining=opt_int(data, "uploads_remaining", "User"),
            email=opt_str(data, "email", "User"),
            profile_image=opt_model(data, "profile_image", "User", ProfileImage.from_mapping),
            badge=opt_model(data, "badge", "User", UserBadge.from_mapping),
            links=opt_model(data, "links", "User", UserLinks.from_mapping),
            photos=opt_list(data, "photos", "User", Photo.from_mapping),
        )


@dataclass(frozen=True)
class PhotoURLs:
    raw: str | None = None
    full: str | None = None
    regular: str | None = None
    small: str | None = None
    thumb: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> PhotoURLs:
        data = expect_mapping(data, "PhotoURLs")
        return cls(
            raw=opt_str(data, "raw", "PhotoURLs"),
            full=opt_str(data, "full", "PhotoURLs"),
            regular=opt_str(data, "regular", "PhotoURLs"),
            small=opt_str(data, "small", "PhotoURLs"),
            thumb=opt_str(data, "thumb", "PhotoURLs"),
        )


@dataclass(frozen=True)
class PhotoLinks:
    self_link: str | None = None
    html: str | None = None
    download: str | None = None
    download_location: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> PhotoLinks:
        data = expect_mapping(data, "PhotoLinks")
        return cls(
            self_link=opt_str(data, "self", "PhotoLinks"),
            html=opt_str(data, "html", "PhotoLinks"),
            download=opt_str(data, "download", "PhotoLinks"),
            download_location=opt_str(data, "download_location", "PhotoLinks"),
        )


@dataclass(frozen=True)
class Exif:
    make: str | None = None
    model: str | None = None
    exposure_time: str | None = None
    aperture: str | None = None
    focal_length: str | None = None
    iso: int | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Exif:
        data = expect_mapping(data, "Exif")
        return cls(
            make=opt_str(data, "make", "Exif"),
            model=opt_str(data, "model", "Exif"),
            exposure_time=opt_str(data, "exposure_time", "Exif"),
            aperture=opt_str(data, "aperture", "Exif"),
            focal_length=opt_str(data, "focal_length", "Exif"),
            iso=opt_int(data, "iso", "Exif"),
        )


@dataclass(frozen=True)
class Position:
    latitude: float | None = None
    longitude: float | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Position:
        data = expect_mapping(data, "Position")
        return cls(
            latitude=opt_float(data, "latitude", "Position"),
            longitude=opt_float(data, "longitude", "Position"),
        )


@dataclass(frozen=True)
class Location:
    title: str | None = None
    name: str | None = None
    city: str | None = None
    country: str | None = None
    position: Position | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Location:
        data = expect_mapping(data, "Location")
        return cls(
            title=opt_str(data, "title", "Location"),
            name=opt_str(data, "name", "Location"),
            city=opt_str(data, "city", "Location"),
            country=opt_str(data, "country", "Location"),
            position=opt_model(data, "position", "Location", Position.from_mapping),
        )


@dataclass(frozen=True)
class Tag:
    title: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Tag:
        data = expect_mapping(data, "Tag")
        return cls(title=opt_str(data, "title", "Tag"))


@dataclass(frozen=True)
class Photo:
    id: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    width: int | None = None
    height: int | None = None
    color: str | None = None
    blur_hash: str | None = None
    description: str | None = None
    alt_description: str | None = None
    downloads: int | None = None
    likes: int | None = None
    views: int | None = None
    liked_by_user: bool | None = None
    exif: Exif | None = None
    location: Location | None = None
    tags: list[Tag] | None = None
    current_user_collections: list[Collection] | None = None
    urls: PhotoURLs | None = None
    user: User | None = None
    links: PhotoLinks | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Photo:
        data = expect_mapping(data, "Photo")
        return cls(
            id=opt_str(data, "id", "Photo"),
            created_at=opt_str(data, "created_at", "Photo"),
            updated_at=opt_str(data, "updated_at", "Photo"),
            width=opt_int(data, "width", "Photo"),
            height=opt_int(data, "height", "Photo"),
            color=opt_str(data, "color", "Photo"),
            blur_hash=opt_str(data, "blur_hash", "Photo"),
            description=opt_str(data, "description", "Photo"),
            alt_description=opt_str(data, "alt_description", "Photo"),
            downloads=opt_int(data, "downloads", "Photo"),
            likes=opt_int(data, "likes", "Photo"),
            views=opt_int(data, "views", "Photo"),
            liked_by_user=opt_bool(data, "liked_by_user", "Photo"),
            exif=opt_model(data, "exif", "Photo", Exif.from_mapping),
            location=opt_model(data, "location", "Photo", Location.from_mapping),
            tags=opt_list(data, "tags", "Photo", Tag.from_mapping),
            current_user_collections=opt_list(data, "current_user_collections", "Photo", Collection.from_mapping),
            urls=opt_model(data, "urls", "Photo", PhotoURLs.from_mapping),
            user=opt_model(data, "user", "Photo", User.from_mapping),
            links=opt_model(data, "links", "Photo", PhotoLinks.from_mapping),
        )


@dataclass(frozen=True)
class CollectionLinks:
    self_link: str | None = None
    html: str | None = None
    photos: str | None = None
    related: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CollectionLinks:
        data = expect_mapping(data, "CollectionLinks")
        return cls(
            self_link=opt_str(data, "self", "CollectionLinks"),
            html=opt_str(data, "html", "CollectionLinks"),
            photos=opt_str(data, "photos", "CollectionLinks"),
            related=opt_str(data, "related", "CollectionLinks"),
        )


@dataclass(frozen=True)
class Collection:
    # Unsplash serves collection ids as strings; older payloads used integers.
    id: str | int | None = None
    title: str | None = None
    description: str | None = None
    published_at: str | None = None
    updated_at: str | None = None
    curated: bool | None = None
    featured: bool | None = None
    total_photos: int | None = None
    private: bool | None = None
    share_key: str | None = None
    cover_photo: Photo | None = None
    user: User | None = None
    links: CollectionLinks | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Collection:
        data = expect_mapping(data, "Collection")
        raw_id = data.get("id")
        collection_id = opt_int(data, "id", "Collection") if isinstance(raw_id, int) else opt_str(data, "id", "Collection")
        return cls(
            id=collection_id,
            title=opt_str(data, "title", "Collection"),
            description=opt_str(data, "description", "Collection"),
            published_at=opt_str(data, "published_at", "Collection"),
            updated_at=opt_str(data, "updated_at", "Collection"),
            curated=opt_bool(data, "curated", "Collection"),
            featured=opt_bool(data, "featured", "Collection"),
            total_photos=opt_int(data, "total_photos", "Collection"),
            private=opt_bool(data, "private", "Collection"),
            share_key=opt_str(data, "share_key", "Collection"),
            cover_photo=opt_model(data, "cover_photo", "Collection", Photo.from_mapping),
            user=opt_model(data, "user", "Collection", User.from_mapping),
            links=opt_model(data, "links", "Collection", CollectionLinks.from_mapping),
        )


@dataclass(frozen=True)
class DownloadLink:
    url: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> DownloadLink:
        data = expect_mapping(data, "DownloadLink")
        return cls(url=opt_str(data, "url", "DownloadLink"))


__all__ = [
    "Collection",
    "CollectionLinks",
    "DownloadLink",
    "Exif",
    "Location",
    "Photo",
    "PhotoLinks",
    "PhotoURLs",
    "Position",
    "ProfileImage",
    "Tag",
    "User",
    "UserBadge",
    "UserLinks",
]
