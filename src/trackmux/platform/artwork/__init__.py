"""Album artwork download and resize adapter."""

from .fetcher import ArtworkFetcher, resize_image

__all__ = ["ArtworkFetcher", "resize_image"]
