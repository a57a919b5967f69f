"""Sequential diagnostic pass over a registry of Chevereto mirrors."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Protocol, final

from cheveretokit.diagnostics.sample import random_file_name
from cheveretokit.models.endpoint import Endpoint
from cheveretokit.models.probe import DiagnosticReport, ProbeOutcome
from cheveretokit.models.upload import UploadResult
from cheveretokit.progress.reporter import DiagnosticReporter
from cheveretokit.uploaders.chevereto import CheveretoUploader, Transport
from cheveretokit.uploaders.registry import EndpointRegistry
from cheveretokit.uploaders.transport import HttpTransport


class Uploader(Protocol):
    def upload(self, image: bytes, file_name: str) -> UploadResult: ...


UploaderFactory = Callable[[Endpoint], Uploader]


@final
class DiagnosticRunner:
    """Probes every registered endpoint with one shared sample image.

    Endpoints are probed one at a time, in registry order. A failing or
    crashing endpoint is recorded as failed and the pass continues.
    """

    def __init__(
        self,
        registry: EndpointRegistry,
        uploader_factory: UploaderFactory | None = None,
        transport: Transport | None = None,
        name_factory: Callable[[], str] = random_file_name,
        clock: Callable[[], float] = time.perf_counter,
        reporter: DiagnosticReporter | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            registry: Endpoints to probe
            uploader_factory: Builds an uploader per endpoint; defaults to
                CheveretoUploader sharing ``transport``
            transport: Transport for the default uploader factory
            name_factory: Produces a fresh file name for every probe
            clock: Monotonic clock returning seconds
            reporter: Console sink for progress and unexpected errors;
                defaults to a DiagnosticReporter on a new console
        """
        self.registry = registry
        self.name_factory = name_factory
        self.clock = clock
        self.reporter = reporter or DiagnosticReporter()

        if uploader_factory is None:
            # one transport, and one requests session, for the whole pass
            transport = transport or HttpTransport()

            def uploader_factory(endpoint: Endpoint) -> Uploader:
                return CheveretoUploader(endpoint, transport=transport)

        self.uploader_factory: UploaderFactory = uploader_factory

    def test_all_endpoints(self, sample_image: bytes) -> str:
        """Probe all endpoints and return the formatted report."""
        return self.run(sample_image).format()

    def run(self, sample_image: bytes) -> DiagnosticReport:
        """Probe all endpoints.

        Args:
            sample_image: Image uploaded to every endpoint

        Returns:
            DiagnosticReport with successful probes sorted fastest first
        """
        successful: list[ProbeOutcome] = []
        failed: list[ProbeOutcome] = []

        with self.reporter.track_probes(len(self.registry)) as progress:
            for endpoint in self.registry:
                progress.set_description(f"Probing {endpoint}...")

                outcome = self.probe(endpoint, sample_image)
                if outcome.succeeded:
                    successful.append(outcome)
                else:
                    failed.append(outcome)

                progress.update()

        successful.sort(key=lambda outcome: outcome.elapsed_ms or 0)
        return DiagnosticReport(successful=tuple(successful), failed=tuple(failed))

    def probe(self, endpoint: Endpoint, sample_image: bytes) -> ProbeOutcome:
        """Upload the sample image to one endpoint and classify the outcome.

        Never raises: unexpected errors are reported and become a failed
        outcome.

        Args:
            endpoint: Endpoint to probe
            sample_image: Image to upload

        Returns:
            ProbeOutcome with elapsed time set only on success
        """
        label = str(endpoint)
        try:
            file_name = self.name_factory()
            uploader = self.uploader_factory(endpoint)

            started = self.clock()
            result = uploader.upload(sample_image, file_name)
            elapsed_ms = max(0, int(round((self.clock() - started) * 1000)))
        except Exception as e:
            self.reporter.display_error(f"Probe of {label} raised an unexpected error", e)
            return ProbeOutcome(label=label, error=f"{type(e).__name__}: {e}")

        if result.success and result.url:
            return ProbeOutcome(label=label, elapsed_ms=elapsed_ms)
        if result.success:
            return ProbeOutcome(label=label, error="No image URL in response")
        return ProbeOutcome(label=label, error=result.error_message or "Upload failed")
