"""URL normalization helpers."""

from __future__ import annotations

from urllib.parse import urlsplit

DEFAULT_SCHEME_PREFIX = "http://"
_KNOWN_PREFIXES = ("http://", "https://")


def fix_prefix(url: str, prefix: str = DEFAULT_SCHEME_PREFIX) -> str:
    """
    Ensure a URL carries a scheme prefix.

    Args:
        url: URL that may lack its scheme (e.g. "example.com/api/1/upload")
        prefix: Scheme prefix to add when none is present

    Returns:
        str: The URL with surrounding whitespace removed and a scheme prefix
    """
    url = url.strip()
    if url and not url.lower().startswith(_KNOWN_PREFIXES):
        return prefix + url
    return url


def get_host_name(url: str) -> str:
    """
    Extract the host name from a URL, tolerating a missing scheme.

    Args:
        url: URL to inspect

    Returns:
        str: Host name, or the original text if no host can be parsed
    """
    host = urlsplit(fix_prefix(url)).hostname
    return host or url
