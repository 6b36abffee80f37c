"""
Giphy search client.

Any transport, status or decode problem is reported uniformly as
SearchFailure.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from core import config
from core.constants import SEARCH_LIMIT_DEFAULT, SEARCH_LIMIT_MAX, SEARCH_LIMIT_MIN
from core.errors import SearchFailure
from core.schemas import GifItem

logger = logging.getLogger(__name__)


def clamp_limit(limit: object) -> int:
    """Bound a requested item count to the allowed search range."""
    try:
        value = int(limit)
    except (TypeError, ValueError):
        return SEARCH_LIMIT_DEFAULT
    return max(SEARCH_LIMIT_MIN, min(SEARCH_LIMIT_MAX, value))


def parse_search_response(payload: object) -> list[GifItem]:
    """
    Turn a decoded Giphy response body into items.

    Entries without an id or image URL are skipped.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
        raise SearchFailure("Unexpected search response shape")

    items: list[GifItem] = []
    for entry in payload["data"]:
        item = GifItem.from_giphy(entry)
        if item is None:
            logger.debug("Skipping unusable search entry")
            continue
        items.append(item)
    return items


class GiphyClient:
    """
    Thin wrapper around the Giphy search endpoint.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        self.api_key = api_key if api_key is not None else config.get_giphy_api_key()
        self.base_url = base_url or config.get_search_url()
        self.timeout = timeout if timeout is not None else config.get_http_timeout()
        self.session = session or requests.Session()

    def search(self, query: str, limit: int = SEARCH_LIMIT_DEFAULT) -> list[GifItem]:
        """
        Run one search.

        Args:
            query: Free text search terms
            limit: Requested item count, clamped to the allowed range

        Returns:
            Items in ranked order

        Raises:
            SearchFailure: on any transport, HTTP or decode error
        """
        if not self.api_key:
            raise SearchFailure("GIPHY_API_KEY is not configured")

        params = {"api_key": self.api_key, "q": query, "limit": clamp_limit(limit)}
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Search for %r failed: %s", query, exc)
            raise SearchFailure(f"Search failed: {exc}") from exc

        items = parse_search_response(payload)
        logger.info("Search %r returned %d gifs", query, len(items))
        return items
