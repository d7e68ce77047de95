# Where: trackmux.shared.formatting
# What: Default title/artist formatting and album/image lookups for catalogue tracks.
# Why: Keep display rules in one place so the sidecar builder only assembles lines.

from __future__ import annotations

from typing import Protocol

from .track import Album, Artist, Track


class Titled(Protocol):
    @property
    def title(self) -> str | None: ...

    @property
    def version(self) -> str | None: ...


class QobuzFormatter:
    """Render titles and artist credits the way the catalogue displays them."""

    def format_title(self, item: Titled) -> str:
        """Return ``"Title (Version)"``, or the bare title when no version exists."""

        title = (item.title or "").strip()
        version = (item.version or "").strip()
        if version:
            return f"{title} ({version})"
        return title

    def format_artists(self, track: Track) -> str:
        artists: list[Artist | None] = (
            list(track.album.artists) if track.album.artists else [track.performer]
        )
        names = [artist.name for artist in artists if artist is not None and artist.name]
        return ", ".join(names)

    def get_album(self, track: Track) -> Album:
        return track.album

    def full_res_image_url(self, track: Track) -> str | None:
        image = track.album.image
        if image is None or not image.large:
            return None
        # The CDN serves the original upload under the "_org" size suffix.
        return image.large.replace("_600.", "_org.")


DEFAULT_FORMATTER = QobuzFormatter()


__all__ = ["DEFAULT_FORMATTER", "QobuzFormatter", "Titled"]
