"""Multipart HTTP transport used by the uploaders."""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from typing import Mapping, final

import requests
from requests.exceptions import RequestException
from requests_toolbelt.multipart.encoder import MultipartEncoder

DEFAULT_TIMEOUT = 300  # 5 minutes, enough for slow mirrors


@dataclass(frozen=True)
class TransportResponse:
    """Raw outcome of one HTTP exchange."""

    success: bool
    body: str = ""
    status_code: int | None = None
    error: str | None = None


@final
class HttpTransport:
    """Sends multipart form uploads and reports the raw response."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            timeout: Request timeout in seconds
            session: Optional requests session to reuse connections
        """
        self.timeout = timeout
        self.session = session or requests.Session()

    def upload_data(
        self,
        data: bytes,
        url: str,
        file_name: str,
        field_name: str,
        fields: Mapping[str, str] | None = None,
    ) -> TransportResponse:
        """POST binary data as a multipart form.

        Args:
            data: File content
            url: Absolute target URL
            file_name: File name sent with the file part
            field_name: Form field name of the file part
            fields: Extra text fields sent before the file part

        Returns:
            TransportResponse; transport errors and HTTP error statuses are
            reported with success=False rather than raised
        """
        mime_type = mimetypes.guess_type(file_name)[0] or "application/octet-stream"
        form: list[tuple[str, object]] = list((fields or {}).items())
        form.append((field_name, (file_name, data, mime_type)))

        encoder = MultipartEncoder(fields=form)
        headers = {"Content-Type": encoder.content_type}

        response: requests.Response | None = None
        try:
            response = self.session.post(
                url, data=encoder, headers=headers, timeout=self.timeout
            )
            response.raise_for_status()
        except RequestException as e:
            if response is None:
                response = e.response
            return TransportResponse(
                success=False,
                body=response.text if response is not None else "",
                status_code=response.status_code if response is not None else None,
                error=str(e),
            )

        return TransportResponse(
            success=True,
            body=response.text,
            status_code=response.status_code,
        )
