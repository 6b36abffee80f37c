"""
Pydantic models for GIF Match.

GifItem is the single record type shared by the search client, the library
and the stored JSON payloads.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class GifItem(BaseModel):
    """A single fetched GIF with its display metadata."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Giphy id, the dedup key")
    title: str = Field(default="", description="Human readable title")
    preview_url: str = Field(..., min_length=1, description="URL of the looping preview")

    @classmethod
    def from_giphy(cls, entry: dict) -> Optional["GifItem"]:
        """
        Build an item from one entry of a Giphy search response.

        Returns None when the entry has no id, no usable image URL, or
        fields of the wrong type.
        """
        if not isinstance(entry, dict):
            return None
        gif_id = entry.get("id")
        if not isinstance(gif_id, str) or not gif_id:
            return None

        images = entry.get("images")
        if not isinstance(images, dict):
            images = {}
        url = None
        for rendition in ("fixed_height", "original"):
            image = images.get(rendition)
            candidate = image.get("url") if isinstance(image, dict) else None
            if isinstance(candidate, str) and candidate:
                url = candidate
                break
        if url is None:
            fallback = entry.get("url")
            url = fallback if isinstance(fallback, str) and fallback else None
        if url is None:
            return None

        title = entry.get("title")
        try:
            return cls(id=gif_id, title=title if isinstance(title, str) else "", preview_url=url)
        except ValidationError:
            return None
