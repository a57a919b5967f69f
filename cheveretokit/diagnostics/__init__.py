"""Mirror diagnostics."""

from .runner import DiagnosticRunner
from .sample import load_sample_image, random_file_name

__all__ = ["DiagnosticRunner", "load_sample_image", "random_file_name"]
