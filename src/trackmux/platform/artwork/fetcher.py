"""Where: src/trackmux/platform/artwork/fetcher.py
What: Download album artwork and re-encode it as a bounded JPEG.
Why: Keep HTTP and image handling out of the transcode use cases.
"""

from __future__ import annotations

from io import BytesIO
from typing import Final

import requests
from PIL import Image, UnidentifiedImageError

from trackmux.config.settings import HTTP_TIMEOUT
from trackmux.platform.logging import logger

_USER_AGENT: Final[str] = "trackmux/0.1.0"


def resize_image(data: bytes, size: int, quality: float) -> bytes | None:
    """Return ``data`` as an RGB JPEG no larger than ``size`` pixels per side.

    Args:
        data: Encoded source image.
        size: Maximum edge length in pixels.
        quality: JPEG quality between 0.0 and 1.0.

    Returns:
        JPEG bytes, or ``None`` when ``data`` is not a decodable image.
    """
    jpeg_quality = max(1, min(100, round(quality * 100)))
    try:
        with Image.open(BytesIO(data)) as img:
            converted = img.convert("RGB") if img.mode != "RGB" else img.copy()
    except (UnidentifiedImageError, OSError) as exc:
        logger.warning("Album art could not be decoded: %s", exc)
        return None

    if converted.width > size or converted.height > size:
        converted.thumbnail((size, size), Image.Resampling.LANCZOS)

    output = BytesIO()
    converted.save(output, format="JPEG", quality=jpeg_quality, optimize=True)
    return output.getvalue()


class ArtworkFetcher:
    """Fetch artwork over HTTP with a shared ``requests`` session."""

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        timeout: float = HTTP_TIMEOUT,
    ) -> None:
        self._session: requests.Session = session or requests.Session()
        self._session.headers.setdefault("User-Agent", _USER_AGENT)
        self._timeout: float = timeout

    def fetch(self, url: str) -> bytes:
        """Download ``url``; HTTP errors propagate as ``requests`` exceptions."""

        response = self._session.get(url, timeout=self._timeout)
        response.raise_for_status()
        return response.content

    def fetch_resized(self, url: str | None, size: int, quality: float) -> bytes | None:
        """Download ``url`` and resize it, returning ``None`` when no usable image exists."""

        if not url:
            return None
        logger.debug("Fetching album art from %s", url)
        return resize_image(self.fetch(url), size, quality)


__all__ = ["ArtworkFetcher", "resize_image"]
