"""Data models for the Chevereto uploader."""

from .endpoint import Endpoint
from .probe import DiagnosticReport, ProbeOutcome
from .response import CheveretoImage, CheveretoResponse, CheveretoThumb
from .upload import UploadResult

__all__ = [
    "CheveretoImage",
    "CheveretoResponse",
    "CheveretoThumb",
    "DiagnosticReport",
    "Endpoint",
    "ProbeOutcome",
    "UploadResult",
]
