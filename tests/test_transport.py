from unittest.mock import MagicMock

import requests

from cheveretokit.uploaders.transport import HttpTransport


def make_response(status_code: int, body: str) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    response.url = "http://img.example.com/api/1/upload"
    return response


def test_successful_post_sends_multipart_form():
    session = MagicMock()
    session.post.return_value = make_response(200, '{"image": {}}')
    transport = HttpTransport(timeout=12, session=session)

    result = transport.upload_data(
        b"PNGDATA", "http://img.example.com/api/1/upload", "abc.png", "source",
        {"key": "k", "format": "json"},
    )

    assert result.success
    assert result.body == '{"image": {}}'
    assert result.status_code == 200

    args, kwargs = session.post.call_args
    assert args[0] == "http://img.example.com/api/1/upload"
    assert kwargs["timeout"] == 12
    assert kwargs["headers"]["Content-Type"].startswith("multipart/form-data")
    payload = kwargs["data"].to_string()
    assert b'name="key"' in payload
    assert b'name="format"' in payload
    assert b'name="source"; filename="abc.png"' in payload
    assert b"image/png" in payload
    assert b"PNGDATA" in payload


def test_http_error_status_is_failure_with_body():
    session = MagicMock()
    session.post.return_value = make_response(500, "server exploded")
    transport = HttpTransport(session=session)

    result = transport.upload_data(b"x", "http://img.example.com/api/1/upload", "a.png", "source")

    assert not result.success
    assert result.status_code == 500
    assert result.body == "server exploded"
    assert result.error and "500" in result.error


def test_connection_error_is_failure():
    session = MagicMock()
    session.post.side_effect = requests.exceptions.ConnectionError("connection refused")
    transport = HttpTransport(session=session)

    result = transport.upload_data(b"x", "http://down.example.com/api", "a.png", "source")

    assert not result.success
    assert result.body == ""
    assert result.status_code is None
    assert result.error == "connection refused"


def test_timeout_is_failure():
    session = MagicMock()
    session.post.side_effect = requests.exceptions.Timeout("timed out")

    result = HttpTransport(session=session).upload_data(b"x", "http://slow.example.com", "a.png", "source")

    assert not result.success
    assert result.error == "timed out"
