"""Chevereto API uploader implementation."""

from __future__ import annotations

from typing import Protocol, final

from cheveretokit.models.endpoint import Endpoint
from cheveretokit.models.response import CheveretoResponse
from cheveretokit.models.upload import UploadResult
from cheveretokit.uploaders.transport import HttpTransport, TransportResponse
from cheveretokit.utils.urls import fix_prefix

SOURCE_FIELD = "source"
RESPONSE_FORMAT = "json"


class Transport(Protocol):
    """Anything able to send a multipart upload."""

    def upload_data(
        self,
        data: bytes,
        url: str,
        file_name: str,
        field_name: str,
        fields: dict[str, str] | None = None,
    ) -> TransportResponse: ...


@final
class CheveretoUploader:
    """Uploads images to a single Chevereto endpoint."""

    def __init__(
        self,
        endpoint: Endpoint,
        direct_url: bool = False,
        transport: Transport | None = None,
    ) -> None:
        """Initialize the uploader.

        Args:
            endpoint: Mirror to upload to
            direct_url: Surface the direct image URL instead of the viewer page
            transport: HTTP transport, defaults to a fresh HttpTransport
        """
        self._endpoint = endpoint
        self._direct_url = direct_url
        self._transport: Transport = transport or HttpTransport()

    @property
    def endpoint(self) -> Endpoint:
        return self._endpoint

    @property
    def direct_url(self) -> bool:
        return self._direct_url

    def upload(self, image: bytes, file_name: str) -> UploadResult:
        """Upload an image and normalize the service response.

        A body that cannot be parsed, or that lacks an ``image`` object, does
        not turn a successful HTTP exchange into a failure: the result keeps
        ``success=True`` with no URL, so callers must check ``url`` too.

        Args:
            image: Image content
            file_name: File name sent with the upload

        Returns:
            UploadResult for this attempt

        Raises:
            ValueError: If the image or file name is empty
        """
        if not image:
            raise ValueError("Image data must not be empty")
        if not file_name:
            raise ValueError("File name must not be empty")

        fields = {"key": self._endpoint.api_key, "format": RESPONSE_FORMAT}
        url = fix_prefix(self._endpoint.upload_url)

        sent = self._transport.upload_data(image, url, file_name, SOURCE_FIELD, fields)
        if not sent.success:
            return UploadResult(
                success=False,
                response=sent.body,
                error_message=sent.error or "Upload failed",
            )

        response = CheveretoResponse.from_json(sent.body)
        if response is None or response.image is None:
            return UploadResult(success=True, response=sent.body)

        image_info = response.image
        return UploadResult(
            success=True,
            url=image_info.url if self._direct_url else image_info.url_viewer,
            thumbnail_url=image_info.thumb.url if image_info.thumb else None,
            response=sent.body,
        )
