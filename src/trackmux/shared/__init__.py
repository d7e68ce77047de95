# Where: trackmux.shared.__init__
# What: Provide a concise import surface for shared dataclasses and formatters.
# Why: Encourage consistent reuse of shared helpers across features.

"""Shared cross-cutting utilities exposed at the package level."""

from .formatting import DEFAULT_FORMATTER, QobuzFormatter
from .track import Album, AlbumImage, Artist, Genre, Label, Track

__all__ = [
    "DEFAULT_FORMATTER",
    "Album",
    "AlbumImage",
    "Artist",
    "Genre",
    "Label",
    "QobuzFormatter",
    "Track",
]
