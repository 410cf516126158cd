"""Summarise crawl results."""

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class ReportPage:
    """A crawled page and how many internal links pointed to it."""

    url: str
    count: int


def sort_pages(pages: Mapping[str, int]) -> list[ReportPage]:
    """Order pages by descending link count, then alphabetically by URL."""
    return sorted(
        (ReportPage(url, count) for url, count in pages.items()),
        key=lambda page: (-page.count, page.url),
    )


def format_report(pages: Mapping[str, int], base_url: str) -> str:
    """Render the crawl report as text."""
    lines = [
        "",
        "=============================",
        f"  REPORT for {base_url}",
        "=============================",
    ]
    lines.extend(
        f"Found {page.count} internal links to {page.url}" for page in sort_pages(pages)
    )
    return "\n".join(lines) + "\n"


def print_report(pages: Mapping[str, int], base_url: str) -> None:
    """Write the crawl report to standard output."""
    print(format_report(pages, base_url), end="")