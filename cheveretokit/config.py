"""Environment-based configuration for the uploader."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from cheveretokit.models.endpoint import Endpoint
from cheveretokit.uploaders.chevereto import CheveretoUploader, Transport
from cheveretokit.uploaders.transport import DEFAULT_TIMEOUT, HttpTransport

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(ValueError):
    """Raised when required configuration is missing or invalid."""
    pass


@dataclass(frozen=True)
class Settings:
    """Uploader settings."""

    upload_url: str
    api_key: str
    direct_url: bool = False
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, load_env_file: bool = True, env_file: Path | None = None) -> Settings:
        """Load settings from environment variables (and a .env file).

        Variables already present in the environment take precedence over the
        .env file.

        Args:
            load_env_file: Read a .env file into the environment first
            env_file: Explicit .env path; defaults to the nearest one above the
                current directory

        Returns:
            Settings instance

        Raises:
            ConfigError: If a required variable is missing or malformed
        """
        if load_env_file:
            _ = load_dotenv(env_file or find_dotenv(usecwd=True))

        upload_url = os.getenv("CHEVERETO_UPLOAD_URL", "").strip()
        api_key = os.getenv("CHEVERETO_API_KEY", "").strip()
        if not upload_url:
            raise ConfigError(
                "CHEVERETO_UPLOAD_URL not found in environment variables. "
                + "Please add it to your .env file."
            )
        if not api_key:
            raise ConfigError(
                "CHEVERETO_API_KEY not found in environment variables. "
                + "Please add it to your .env file."
            )

        direct_url = os.getenv("CHEVERETO_DIRECT_URL", "").strip().lower() in _TRUTHY

        raw_timeout = os.getenv("CHEVERETO_TIMEOUT", "").strip()
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ConfigError(f"CHEVERETO_TIMEOUT must be a number, got {raw_timeout!r}") from e
        if timeout <= 0:
            raise ConfigError(f"CHEVERETO_TIMEOUT must be positive, got {timeout}")

        return cls(upload_url=upload_url, api_key=api_key, direct_url=direct_url, timeout=timeout)

    def check(self) -> bool:
        """Return True if both upload URL and API key are set."""
        return bool(self.upload_url.strip()) and bool(self.api_key.strip())

    def endpoint(self) -> Endpoint:
        return Endpoint(self.upload_url, self.api_key)


def create_uploader(settings: Settings, transport: Transport | None = None) -> CheveretoUploader:
    """Create an uploader for the configured endpoint.

    Args:
        settings: Loaded settings
        transport: Optional transport override

    Returns:
        CheveretoUploader using the configured URL preference

    Raises:
        ConfigError: If the settings are incomplete
    """
    if not settings.check():
        raise ConfigError("Upload URL and API key must both be configured")
    return CheveretoUploader(
        settings.endpoint(),
        direct_url=settings.direct_url,
        transport=transport or HttpTransport(timeout=settings.timeout),
    )
