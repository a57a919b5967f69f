"""Diagnostic probe outcome and report models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProbeOutcome:
    """Outcome of probing a single endpoint.

    ``elapsed_ms`` is only recorded for successful probes.
    """

    label: str
    elapsed_ms: int | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.elapsed_ms is not None

    def __str__(self) -> str:
        if self.elapsed_ms is not None:
            return f"{self.label} ({self.elapsed_ms}ms)"
        return self.label


@dataclass(frozen=True)
class DiagnosticReport:
    """Classified results of a diagnostic pass over all endpoints."""

    successful: tuple[ProbeOutcome, ...]
    failed: tuple[ProbeOutcome, ...]

    @property
    def total(self) -> int:
        return len(self.successful) + len(self.failed)

    def format(self) -> str:
        """Render the report as plain text.

        Returns:
            Successful probes (fastest first) followed by failed probes
        """
        successful = "\n".join(str(outcome) for outcome in self.successful)
        failed = "\n".join(str(outcome) for outcome in self.failed)
        return (
            f"Successful uploads ({len(self.successful)}):\n\n{successful}\n\n"
            f"Failed uploads ({len(self.failed)}):\n\n{failed}"
        )
