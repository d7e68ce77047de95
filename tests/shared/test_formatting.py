"""Tests for the default catalogue formatter."""

from typing import Any

from trackmux.shared.formatting import QobuzFormatter
from trackmux.shared.track import Track

formatter = QobuzFormatter()


def test_format_title_appends_version(track: Track) -> None:
    assert formatter.format_title(track) == "Blue in Green (Remastered)"
    assert formatter.format_title(track.album) == "Kind of Blue"


def test_format_artists_prefers_album_artists(track: Track) -> None:
    assert formatter.format_artists(track) == "Miles Davis, Bill Evans"


def test_format_artists_falls_back_to_performer(track_payload: dict[str, Any]) -> None:
    track_payload["album"]["artists"] = []
    assert formatter.format_artists(Track.from_dict(track_payload)) == "Miles Davis"


def test_full_res_image_url(track: Track) -> None:
    assert (
        formatter.full_res_image_url(track)
        == "https://static.qobuz.com/images/covers/ab/cd/kob_org.jpg"
    )


def test_full_res_image_url_without_image() -> None:
    assert formatter.full_res_image_url(Track()) is None
