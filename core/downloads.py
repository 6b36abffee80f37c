"""
File-save helper: fetches a GIF so the UI can offer it as a download.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from core import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DownloadedFile:
    filename: str
    data: bytes
    mime: str = "image/gif"


def suggested_filename(item_id: str) -> str:
    return f"Gif_{item_id}.gif"


def fetch_gif(
    url: str,
    item_id: str,
    session: Optional[requests.Session] = None
) -> Optional[DownloadedFile]:
    """
    Retrieve a GIF for saving.

    Failures are logged and return None; they never block the app.
    """
    getter = session or requests
    try:
        response = getter.get(url, timeout=config.get_http_timeout())
        response.raise_for_status()
    except requests.RequestException as exc:
        logger.error("Error downloading gif %s: %s", item_id, exc)
        return None

    mime = response.headers.get("Content-Type", "image/gif")
    return DownloadedFile(filename=suggested_filename(item_id), data=response.content, mime=mime)
