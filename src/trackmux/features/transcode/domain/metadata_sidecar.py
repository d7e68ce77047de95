"""
Summary: Build the ;FFMETADATA1 sidecar text merged into the output container.
Why: Isolate tag selection and ordering from the engine calls that apply it.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Final, Protocol

from trackmux.shared.formatting import DEFAULT_FORMATTER, Titled
from trackmux.shared.track import Album, Track

SIDECAR_HEADER: Final[str] = ";FFMETADATA1"
VARIOUS_ARTISTS: Final[str] = "Various Artists"

_ESCAPE_PATTERN: Final[re.Pattern[str]] = re.compile(r"([=;#\\\n])")
_YEAR_PATTERN: Final[re.Pattern[str]] = re.compile(r"^(\d{4})")


class MetadataFormatter(Protocol):
    """Formatting collaborators used to render titles and artist credits."""

    def format_title(self, item: Titled) -> str:
        ...

    def format_artists(self, track: Track) -> str:
        ...

    def get_album(self, track: Track) -> Album:
        ...

    def full_res_image_url(self, track: Track) -> str | None:
        ...


def escape_value(value: object) -> str:
    """Escape characters the FFMETADATA reader treats specially."""

    if value is None:
        return ""
    return _ESCAPE_PATTERN.sub(r"\\\1", str(value))


def release_year(release_date: str | None) -> int | None:
    """Return the year of an ISO ``YYYY-MM-DD`` date, or ``None`` if unparsable."""

    if not release_date:
        return None
    try:
        return date.fromisoformat(release_date[:10]).year
    except ValueError:
        match = _YEAR_PATTERN.match(release_date.strip())
        return int(match.group(1)) if match else None


def build_metadata_sidecar(
    track: Track,
    upc: str | None = None,
    formatter: MetadataFormatter = DEFAULT_FORMATTER,
) -> str:
    """Render the sidecar document for ``track``.

    ``album_artist`` is written twice: first with the joined credits, then
    with the first artist's name. ffmpeg keeps the later value.
    """
    album = track.album
    artists = [track.performer] if album.artists is None else list(album.artists)

    lines: list[str] = [SIDECAR_HEADER]
    lines.append(f"title={escape_value(formatter.format_title(track))}")
    if len(artists) > 0:
        credits = escape_value(formatter.format_artists(track))
        lines.append(f"artist={credits}")
        lines.append(f"album_artist={credits}")
    else:
        lines.append(f"artist={VARIOUS_ARTISTS}")
        lines.append(f"album_artist={VARIOUS_ARTISTS}")

    first = artists[0] if artists else None
    primary = (
        (first.name if first is not None else None)
        or (track.performer.name if track.performer is not None else None)
        or VARIOUS_ARTISTS
    )
    lines.append(f"album_artist={escape_value(primary)}")
    lines.append(f"album={escape_value(formatter.format_title(album))}")
    lines.append(f"genre={escape_value(album.genre.name if album.genre else None)}")
    lines.append(f"date={escape_value(album.release_date_original)}")

    year = release_year(album.release_date_original)
    if year is not None:
        lines.append(f"year={year}")

    label = formatter.get_album(track).label
    lines.append(f"label={escape_value(label.name if label else None)}")
    lines.append(f"copyright={escape_value(track.copyright)}")
    if track.isrc:
        lines.append(f"isrc={escape_value(track.isrc)}")
    if upc:
        lines.append(f"barcode={escape_value(upc)}")
    if track.track_number:
        lines.append(f"track={track.track_number}")

    return "\n".join(lines)


__all__ = [
    "SIDECAR_HEADER",
    "VARIOUS_ARTISTS",
    "MetadataFormatter",
    "build_metadata_sidecar",
    "escape_value",
    "release_year",
]
