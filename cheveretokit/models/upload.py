"""Upload result data model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UploadResult:
    """Result of a single image upload.

    ``url`` is only set when the upload succeeded and the service returned an
    image object, so a successful result may still carry no URL.
    """

    success: bool
    url: str | None = None
    thumbnail_url: str | None = None
    response: str = ""
    error_message: str | None = None
