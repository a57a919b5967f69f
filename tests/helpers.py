"""Test doubles and canned responses shared by the test modules."""

from __future__ import annotations

import json
from typing import Any

from cheveretokit.uploaders.transport import TransportResponse

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + (b"\x00" * 64)


class FakeTransport:
    """Records upload calls and replies with a canned response."""

    def __init__(self, response: TransportResponse) -> None:
        self.response = response
        self.calls: list[dict[str, Any]] = []

    def upload_data(self, data, url, file_name, field_name, fields=None):
        self.calls.append(
            {
                "data": data,
                "url": url,
                "file_name": file_name,
                "field_name": field_name,
                "fields": dict(fields or {}),
            }
        )
        return self.response


class FakeClock:
    """Manually advanced clock returning seconds."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, ms: int) -> None:
        self.now += ms / 1000


def chevereto_body(thumb: bool = True) -> str:
    image: dict[str, Any] = {
        "url": "https://img.example.com/images/2024/01/01/abc.png",
        "url_viewer": "https://img.example.com/image/abc",
    }
    if thumb:
        image["thumb"] = {"url": "https://img.example.com/images/2024/01/01/abc.th.png"}
    return json.dumps({"status_code": 200, "image": image})
