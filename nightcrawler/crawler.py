"""Concurrent same-host web crawler."""

import threading
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait
from urllib.parse import urlsplit

from .fetch import FetchError, fetch_html
from .normalize import normalize_url
from .parse import parse_html


def _host(raw_url: str) -> str:
    return urlsplit(raw_url).netloc.rpartition("@")[2]


class Crawler:
    """Crawl pages on the host of *base_url*, counting internal links to each page."""

    def __init__(self, base_url: str, max_pages: int, max_concurrency: int) -> None:
        if max_concurrency < 1:
            raise ValueError(f"max concurrency must be at least 1, got {max_concurrency}")
        self.base_url = base_url
        self.base_host = _host(base_url)
        self.max_pages = max_pages
        self.max_concurrency = max_concurrency
        self.pages: dict[str, int] = {}
        self._lock = threading.Lock()

    def _add_page_visit(self, normalized_url: str) -> bool:
        """Record a visit and report whether it was the first one."""
        with self._lock:
            if self.pages.get(normalized_url, 0) > 0:
                self.pages[normalized_url] += 1
                return False
            self.pages[normalized_url] = 1
            return True

    def _should_crawl_page(self) -> bool:
        with self._lock:
            return len(self.pages) < self.max_pages

    def crawl(self) -> dict[str, int]:
        """Crawl from the base URL until no links remain; return the page counts."""
        with ThreadPoolExecutor(max_workers=self.max_concurrency) as executor:
            pending = {executor.submit(self.crawl_page, self.base_url)}
            while pending:
                done, pending = wait(pending, return_when=FIRST_COMPLETED)
                for future in done:
                    for url in future.result():
                        pending.add(executor.submit(self.crawl_page, url))
        return self.pages

    def crawl_page(self, raw_current_url: str) -> list[str]:
        """Visit one page and return the links found on it that should be followed next.

        A page is fetched only on its first visit; later visits only raise its count.
        """
        if not self._should_crawl_page():
            return []

        print(f"crawling {raw_current_url}")

        try:
            current_host = _host(raw_current_url)
        except ValueError as exc:
            print(f"error parsing current URL: {exc}")
            return []

        if current_host != self.base_host:
            print("current URL is not on the same host as the base URL")
            return []

        try:
            normalized = normalize_url(raw_current_url)
        except ValueError as exc:
            print(f"error normalizing current URL: {exc}")
            return []

        if not self._add_page_visit(normalized):
            return []

        try:
            html = fetch_html(raw_current_url)
        except FetchError as exc:
            print(f"error getting HTML: {exc}")
            return []

        return parse_html(html, raw_current_url)