"""Shared pytest fixtures for trackmux tests."""

from __future__ import annotations

from typing import Any

import pytest

from trackmux.shared.track import Track


@pytest.fixture
def track_payload() -> dict[str, Any]:
    """Return catalogue JSON for a single-artist album track."""

    return {
        "title": "Blue in Green",
        "version": "Remastered",
        "performer": {"id": 1, "name": "Miles Davis"},
        "copyright": "(P) 1959 Columbia",
        "isrc": "USSM15900113",
        "track_number": 3,
        "album": {
            "title": "Kind of Blue",
            "version": None,
            "artists": [{"id": 1, "name": "Miles Davis"}, {"id": 2, "name": "Bill Evans"}],
            "genre": {"name": "Jazz"},
            "label": {"name": "Columbia"},
            "release_date_original": "1959-08-17",
            "image": {"large": "https://static.qobuz.com/images/covers/ab/cd/kob_600.jpg"},
            "upc": "0886977169829",
        },
    }


@pytest.fixture
def track(track_payload: dict[str, Any]) -> Track:
    return Track.from_dict(track_payload)
