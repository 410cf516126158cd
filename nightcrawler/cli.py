"""Command-line entry point for the crawler."""

import sys
import time
from urllib.parse import urlsplit

from .crawler import Crawler
from .report import print_report

DEFAULT_MAX_CONCURRENCY = 3
DEFAULT_MAX_PAGES = 10


def main(argv=None) -> int:
    """Run a crawl: ``URL [MAX_CONCURRENCY [MAX_PAGES]]``. Returns the exit status."""
    start = time.monotonic()
    args = sys.argv[1:] if argv is None else list(argv)

    if not args:
        print("no website provided")
        return 1

    base_url = args[0]
    try:
        urlsplit(base_url)
    except ValueError as exc:
        print(f"error parsing base URL: {exc}")
        return 1

    max_concurrency = DEFAULT_MAX_CONCURRENCY
    max_pages = DEFAULT_MAX_PAGES

    if len(args) > 1:
        try:
            max_concurrency = int(args[1])
        except ValueError as exc:
            print(f"error parsing max concurrency: {exc}")
            return 1

    if len(args) > 2:
        try:
            max_pages = int(args[2])
        except ValueError as exc:
            print(f"error parsing max pages: {exc}")
            return 1

    try:
        crawler = Crawler(base_url, max_pages, max_concurrency)
    except ValueError as exc:
        print(f"error parsing max concurrency: {exc}")
        return 1

    print(f"starting crawl of: {base_url}")
    crawler.crawl()

    print_report(crawler.pages, base_url)
    print(f"crawl completed in {time.monotonic() - start:.3f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())