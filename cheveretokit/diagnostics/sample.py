"""Sample image and file naming for diagnostic probes."""

from __future__ import annotations

import base64
import secrets
import string
from pathlib import Path

SAMPLE_EXTENSION = ".png"
RANDOM_NAME_LENGTH = 10

_ALPHANUMERIC = string.ascii_letters + string.digits

# 1x1 transparent PNG
_SAMPLE_PNG = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


def random_alphanumeric(length: int = RANDOM_NAME_LENGTH) -> str:
    if length <= 0:
        raise ValueError("length must be positive")
    return "".join(secrets.choice(_ALPHANUMERIC) for _ in range(length))


def random_file_name() -> str:
    """Generate a fresh random file name for a probe upload (e.g. "aZ3k9QpL0x.png")."""
    return random_alphanumeric() + SAMPLE_EXTENSION


def load_sample_image(path: Path | None = None) -> bytes:
    """
    Load the image used for diagnostic probes.

    Args:
        path: Optional image file; the built-in PNG is used when omitted

    Returns:
        bytes: Image content

    Raises:
        FileNotFoundError: If the given path does not exist
        ValueError: If the file is empty
    """
    if path is None:
        return _SAMPLE_PNG

    if not path.is_file():
        raise FileNotFoundError(f"Sample image not found: {path}")
    data = path.read_bytes()
    if not data:
        raise ValueError(f"Sample image is empty: {path}")
    return data
