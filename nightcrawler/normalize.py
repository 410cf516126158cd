"""Reduce URLs to a canonical host-and-path key."""

import re
from urllib.parse import unquote, urlsplit

_MULTI_SLASH = re.compile(r"/+")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def _unescape(component: str, what: str) -> str:
    if _BAD_ESCAPE.search(component):
        raise ValueError(f"invalid URL escape in {what}: {component!r}")
    return unquote(component)


def normalize_url(raw_url: str) -> str:
    """Return ``host/path`` for *raw_url*, without scheme, query, fragment or extra slashes.

    Raises ValueError if the URL cannot be parsed.
    """
    if _CONTROL_CHARS.search(raw_url):
        raise ValueError(f"invalid control character in URL: {raw_url!r}")
    if raw_url.startswith(":"):
        raise ValueError(f"missing protocol scheme: {raw_url!r}")

    parts = urlsplit(raw_url)
    host = parts.netloc.rpartition("@")[2]
    path = _unescape(parts.path, "path")
    _unescape(parts.fragment, "fragment")

    path = _MULTI_SLASH.sub("/", path.strip("/"))
    return f"{host}/{path}".removesuffix("/")