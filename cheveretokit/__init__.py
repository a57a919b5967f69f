"""Chevereto image-hosting upload client and mirror diagnostics."""

from .diagnostics.runner import DiagnosticRunner
from .models.endpoint import Endpoint
from .models.upload import UploadResult
from .uploaders.chevereto import CheveretoUploader
from .uploaders.registry import DEFAULT_REGISTRY, EndpointRegistry

__all__ = [
    "DEFAULT_REGISTRY",
    "CheveretoUploader",
    "DiagnosticRunner",
    "Endpoint",
    "EndpointRegistry",
    "UploadResult",
]
