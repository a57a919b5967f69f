"""Upload endpoint data model."""

from __future__ import annotations

from dataclasses import dataclass

from cheveretokit.utils.urls import get_host_name


@dataclass(frozen=True)
class Endpoint:
    """A Chevereto mirror: upload URL and its API key."""

    upload_url: str
    api_key: str

    def __post_init__(self) -> None:
        if not self.upload_url or not self.upload_url.strip():
            raise ValueError("Endpoint upload_url must not be empty")
        if not self.api_key or not self.api_key.strip():
            raise ValueError("Endpoint api_key must not be empty")

    def __str__(self) -> str:
        return get_host_name(self.upload_url)
