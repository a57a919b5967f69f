import pytest

from cheveretokit.utils.urls import fix_prefix, get_host_name


@pytest.mark.parametrize(
    "url, expected",
    [
        ("example.com/api/1/upload", "http://example.com/api/1/upload"),
        ("http://example.com/api", "http://example.com/api"),
        ("https://example.com/api", "https://example.com/api"),
        ("HTTPS://example.com/api", "HTTPS://example.com/api"),
        ("  example.com  ", "http://example.com"),
        ("", ""),
    ],
)
def test_fix_prefix(url, expected):
    assert fix_prefix(url) == expected


def test_fix_prefix_custom_scheme():
    assert fix_prefix("example.com", prefix="https://") == "https://example.com"


def test_get_host_name():
    assert get_host_name("http://www.storemypic.com/api/1/upload") == "www.storemypic.com"
    assert get_host_name("snapie.net/myapi/1/upload") == "snapie.net"
