"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest

from cheveretokit.models.endpoint import Endpoint
from tests.helpers import PNG_BYTES, FakeClock


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest.fixture
def endpoint() -> Endpoint:
    return Endpoint("img.example.com/api/1/upload", "secret-key")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
