"""Uploader implementations and endpoint registry."""

from .chevereto import CheveretoUploader
from .registry import DEFAULT_REGISTRY, EndpointRegistry
from .transport import HttpTransport, TransportResponse

__all__ = [
    "DEFAULT_REGISTRY",
    "CheveretoUploader",
    "EndpointRegistry",
    "HttpTransport",
    "TransportResponse",
]
