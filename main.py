#!/usr/bin/env python3
"""
Chevereto Upload Script

A command-line tool for uploading images to a Chevereto-compatible image host
and for checking which of the known public Chevereto mirrors still accept uploads.

Usage:
    uv run main.py image.png
    uv run main.py --test
"""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from cheveretokit.config import ConfigError, Settings, create_uploader
from cheveretokit.diagnostics.runner import DiagnosticRunner
from cheveretokit.diagnostics.sample import load_sample_image
from cheveretokit.progress.reporter import DiagnosticReporter
from cheveretokit.uploaders.registry import DEFAULT_REGISTRY
from cheveretokit.uploaders.transport import HttpTransport

# Load environment variables from .env file
_ = load_dotenv()

# Initialize Rich console for output
console = Console()


def positive_float(value: str) -> float:
    """Argparse type for strictly positive numbers."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Upload images to a Chevereto image host",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  uv run main.py photo.png                 # Upload to CHEVERETO_UPLOAD_URL
  uv run main.py photo.png --direct-url    # Print the direct image URL
  uv run main.py --test                    # Probe all known public mirrors
        """
    )

    _ = parser.add_argument(
        "image",
        nargs="?",
        type=Path,
        help="Image file to upload"
    )

    _ = parser.add_argument(
        "--test",
        action="store_true",
        help="Upload a sample image to every known mirror and report which work"
    )

    _ = parser.add_argument(
        "--sample",
        type=Path,
        default=None,
        help="Image used by --test (default: built-in 1x1 PNG)"
    )

    _ = parser.add_argument(
        "--direct-url",
        action="store_true",
        default=None,
        help="Print the direct image URL instead of the viewer page URL"
    )

    _ = parser.add_argument(
        "--timeout",
        type=positive_float,
        default=None,
        help="Request timeout in seconds"
    )

    _ = parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output for debugging"
    )

    return parser.parse_args(argv)


def run_diagnostics(args: argparse.Namespace, reporter: DiagnosticReporter) -> int:
    """Probe every mirror in the default registry.

    Returns:
        Process exit code
    """
    try:
        sample = load_sample_image(args.sample)
    except (OSError, ValueError) as e:
        reporter.display_error("Cannot load sample image", e)
        return 1

    transport = HttpTransport(timeout=args.timeout) if args.timeout else HttpTransport()
    runner = DiagnosticRunner(DEFAULT_REGISTRY, transport=transport, reporter=reporter)

    reporter.display_info(f"Testing {len(DEFAULT_REGISTRY)} Chevereto mirrors...")
    start_time = time.time()
    report = runner.run(sample)

    reporter.display_report(report)
    console.print(f"[yellow]Test time:[/yellow] {time.time() - start_time:.1f} seconds\n")
    console.print(report.format(), markup=False, highlight=False)
    return 0


def run_upload(args: argparse.Namespace, reporter: DiagnosticReporter) -> int:
    """Upload a single image to the configured endpoint.

    Returns:
        Process exit code
    """
    image_path: Path = args.image
    if not image_path.is_file():
        reporter.display_error(f"Image file does not exist: {image_path}")
        return 1

    try:
        settings = Settings.from_env(load_env_file=False)
    except ConfigError as e:
        reporter.display_error(str(e))
        return 1

    if args.direct_url is not None:
        settings = replace(settings, direct_url=args.direct_url)
    if args.timeout:
        settings = replace(settings, timeout=args.timeout)

    uploader = create_uploader(settings)
    reporter.display_info(f"Uploading {image_path.name} to {uploader.endpoint}...")

    try:
        result = uploader.upload(image_path.read_bytes(), image_path.name)
    except (OSError, ValueError) as e:
        reporter.display_error(f"Cannot upload {image_path}", e)
        return 1

    if not result.success:
        reporter.display_error(f"Upload failed: {result.error_message}")
        if args.verbose and result.response:
            console.print(result.response, markup=False, style="dim")
        return 1

    if not result.url:
        reporter.display_warning("Upload succeeded but the response contained no image URL")
        if args.verbose:
            console.print(result.response, markup=False)
        return 1

    reporter.display_success(result.url)
    if result.thumbnail_url:
        console.print(f"[blue]Thumbnail:[/blue] {result.thumbnail_url}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the upload script."""
    args = parse_arguments(argv)

    verbose_mode: bool = getattr(args, "verbose", False)
    if verbose_mode:
        console.print("[dim]Verbose mode enabled[/dim]")

    reporter = DiagnosticReporter(console, verbose=verbose_mode)

    try:
        if args.test:
            return run_diagnostics(args, reporter)
        if args.image is None:
            console.print("[red]Error: Specify an image to upload or use --test.[/red]")
            return 1
        return run_upload(args, reporter)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user.[/yellow]")
        return 1
    except Exception as e:
        console.print(f"\n[red]Critical error: {escape(str(e))}[/red]")
        if verbose_mode:
            import traceback
            console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
