"""Client for an image search web service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

KEY_HEADER = "Ocp-Apim-Subscription-Key"


@dataclass(frozen=True)
class Thumbnail:
    """A thumbnail of a found image."""

    url: str
    width: int
    height: int
    format: str


@dataclass(frozen=True)
class ImageSearchResult:
    """One image found by a search."""

    thumbnail: Thumbnail


def _result(value: dict[str, Any]) -> ImageSearchResult:
    size = value.get("thumbnail") or {}
    return ImageSearchResult(
        Thumbnail(
            url=value.get("thumbnailUrl", ""),
            width=int(size.get("width", 0)),
            height=int(size.get("height", 0)),
            format=value.get("encodingFormat", ""),
        )
    )


class ImageSearchClient:
    """Searches images with a subscription key sent in a request header."""

    def __init__(
        self,
        api_key: str,
        endpoint: str,
        session: requests.Session | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key
        self._endpoint = endpoint
        self._session = session or requests.Session()
        self._timeout = timeout

    def search(self, query: str) -> list[ImageSearchResult]:
        """Return the images the service finds for ``query``."""
        response = self._session.get(
            self._endpoint,
            params={"q": query},
            headers={KEY_HEADER: self._api_key},
            timeout=self._timeout,
        )
        response.raise_for_status()
        payload = response.json()
        return [_result(value) for value in payload.get("value") or []]