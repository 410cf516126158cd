"""Download HTML pages over HTTP."""

import urllib.error
import urllib.request


class FetchError(Exception):
    """Raised when a page cannot be fetched as HTML."""


def fetch_html(raw_url: str) -> str:
    """Fetch *raw_url* and return its body, requiring status 200 and an HTML content type."""
    try:
        with urllib.request.urlopen(raw_url) as response:
            body = response.read()
            status = response.status
            content_type = response.headers.get("Content-Type", "")
    except urllib.error.HTTPError as exc:
        with exc:
            raise FetchError(f"got status code: {exc.code}") from exc
    except (urllib.error.URLError, OSError, ValueError) as exc:
        raise FetchError(str(exc)) from exc

    if status != 200:
        raise FetchError(f"got status code: {status}")
    if "text/html" not in content_type:
        raise FetchError(f"got content type: {content_type}")

    return body.decode("utf-8", errors="replace")