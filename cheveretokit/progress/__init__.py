"""Console reporting with Rich."""

from .reporter import DiagnosticReporter, ProbeProgressContext

__all__ = ["DiagnosticReporter", "ProbeProgressContext"]
