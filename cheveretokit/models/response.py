"""Chevereto API response models."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    return value if isinstance(value, str) else None


@dataclass(frozen=True)
class CheveretoThumb:
    """Thumbnail block of an uploaded image."""

    url: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CheveretoThumb:
        return cls(url=_optional_str(data, "url"))


@dataclass(frozen=True)
class CheveretoImage:
    """Image block of a Chevereto upload response."""

    url: str | None = None
    url_viewer: str | None = None
    thumb: CheveretoThumb | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CheveretoImage:
        thumb = data.get("thumb")
        return cls(
            url=_optional_str(data, "url"),
            url_viewer=_optional_str(data, "url_viewer"),
            thumb=CheveretoThumb.from_dict(thumb) if isinstance(thumb, dict) else None,
        )


@dataclass(frozen=True)
class CheveretoResponse:
    """Top-level Chevereto upload response.

    Only the ``image`` block is modelled. Its absence is a valid response that
    simply carries no displayable URL.
    """

    image: CheveretoImage | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CheveretoResponse:
        image = data.get("image")
        return cls(image=CheveretoImage.from_dict(image) if isinstance(image, dict) else None)

    @classmethod
    def from_json(cls, text: str | None) -> CheveretoResponse | None:
        """Parse a response body.

        Args:
            text: Raw response body

        Returns:
            Parsed response, or None if the body is empty, not JSON, or not a
            JSON object
        """
        if not text:
            return None
        try:
            data = json.loads(text)
        except ValueError:
            return None
        if not isinstance(data, dict):
            return None
        return cls.from_dict(data)
