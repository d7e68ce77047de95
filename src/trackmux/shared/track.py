# Where: trackmux.shared.track
# What: Catalogue track/album dataclasses consumed by the metadata sidecar.
# Why: Give the orchestrator typed access to Qobuz-style track JSON.

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _mapping(value: object) -> Mapping[str, Any] | None:
    return value if isinstance(value, Mapping) else None


def _str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


@dataclass(slots=True)
class Artist:
    """A credited artist or performer."""

    name: str | None = None
    id: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Artist | None":
        if data is None:
            return None
        raw_id = data.get("id")
        return cls(name=_str(data.get("name")), id=raw_id if isinstance(raw_id, int) else None)


@dataclass(slots=True)
class Genre:
    name: str | None = None


@dataclass(slots=True)
class Label:
    name: str | None = None


@dataclass(slots=True)
class AlbumImage:
    """Cover art URLs at the sizes the catalogue publishes."""

    small: str | None = None
    thumbnail: str | None = None
    large: str | None = None


@dataclass(slots=True)
class Album:
    """Album information attached to a track."""

    title: str | None = None
    version: str | None = None
    artists: list[Artist] | None = None
    genre: Genre | None = None
    label: Label | None = None
    release_date_original: str | None = None
    image: AlbumImage | None = None
    upc: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Album":
        if data is None:
            return cls()

        raw_artists = data.get("artists")
        artists: list[Artist] | None = None
        if isinstance(raw_artists, list):
            artists = [
                artist
                for artist in (Artist.from_dict(_mapping(item)) for item in raw_artists)
                if artist is not None
            ]

        genre_data = _mapping(data.get("genre"))
        label_data = _mapping(data.get("label"))
        image_data = _mapping(data.get("image"))
        return cls(
            title=_str(data.get("title")),
            version=_str(data.get("version")),
            artists=artists,
            genre=Genre(name=_str(genre_data.get("name"))) if genre_data else None,
            label=Label(name=_str(label_data.get("name"))) if label_data else None,
            release_date_original=_str(data.get("release_date_original")),
            image=(
                AlbumImage(
                    small=_str(image_data.get("small")),
                    thumbnail=_str(image_data.get("thumbnail")),
                    large=_str(image_data.get("large")),
                )
                if image_data
                else None
            ),
            upc=_str(data.get("upc")),
        )


@dataclass(slots=True)
class Track:
    """A catalogue track as returned by the Qobuz API."""

    title: str | None = None
    version: str | None = None
    performer: Artist | None = None
    album: Album = field(default_factory=Album)
    copyright: str | None = None
    isrc: str | None = None
    track_number: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Track":
        """Build a track from API JSON; unknown keys are ignored."""

        track_number = data.get("track_number")
        return cls(
            title=_str(data.get("title")),
            version=_str(data.get("version")),
            performer=Artist.from_dict(_mapping(data.get("performer"))),
            album=Album.from_dict(_mapping(data.get("album"))),
            copyright=_str(data.get("copyright")),
            isrc=_str(data.get("isrc")),
            track_number=track_number if isinstance(track_number, int) else None,
        )


__all__ = ["Album", "AlbumImage", "Artist", "Genre", "Label", "Track"]
