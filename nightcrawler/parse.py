"""Extract link targets from HTML documents."""

from html.parser import HTMLParser
from urllib.parse import urljoin


class _AnchorCollector(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.hrefs: list[str] = []

    def handle_starttag(self, tag, attrs):
        if tag != "a":
            return
        self.hrefs.extend(value or "" for name, value in attrs if name == "href")

    def handle_startendtag(self, tag, attrs):
        self.handle_starttag(tag, attrs)


def parse_html(html_body: str, raw_base_url: str) -> list[str]:
    """Return every anchor ``href`` in *html_body*, resolved against *raw_base_url*, in document order."""
    collector = _AnchorCollector()
    collector.feed(html_body)
    collector.close()

    urls = []
    for href in collector.hrefs:
        try:
            urls.append(urljoin(raw_base_url, href))
        except ValueError:
            continue
    return urls