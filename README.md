# nightcrawler

A small concurrent web crawler. You give it a starting URL. It follows the links
that stay on the same host and counts how many internal links point at each page
it finds.

## Installation

```
pip install .
```

## Usage

```
nightcrawler <url> [max_concurrency] [max_pages]
```

- `url`: the page the crawl starts from. Only pages on the same host are visited.
- `max_concurrency`: how many pages are fetched at the same time. The default is 3.
  It must be a whole number of at least 1.
- `max_pages`: once this many distinct pages have been recorded, the crawler
  stops visiting pages. The default is 10.

Example:

```
nightcrawler https://example.com 5 50
```

The crawler prints `crawling <url>` for each URL it handles. It also prints a
message for each page it skips or cannot fetch. At the end it prints a report
like this:

```

=============================
  REPORT for https://example.com
=============================
Found 4 internal links to example.com/about
Found 2 internal links to example.com
crawl completed in 1.234s
```

Pages are listed by link count, highest first. Pages with the same count are
listed alphabetically. Each page is keyed by a normalized form of its URL: the
host plus the path. The key has no scheme, query or fragment, and repeated and
trailing slashes are removed.

When no URL is given, or when a number argument cannot be parsed, the command
prints an error and exits with status 1.

## Library use

```python
from nightcrawler.crawler import Crawler
from nightcrawler.report import print_report

crawler = Crawler("https://example.com", max_pages=20, max_concurrency=4)
pages = crawler.crawl()          # also kept in crawler.pages
print_report(pages, "https://example.com")
```

- `Crawler(base_url, max_pages, max_concurrency)` raises `ValueError` when
  `max_concurrency` is less than 1.
- `Crawler.crawl()` runs the whole crawl on a thread pool. It returns the dict
  that maps each normalized page key to its link count.
- `Crawler.crawl_page(raw_current_url)` handles one URL. It records the visit.
  On the first visit to a page it also fetches the page, and it returns the
  links found there. On any other visit it returns an empty list.
- `nightcrawler.normalize.normalize_url(raw_url)` returns the normalized page key.
  It raises `ValueError` for URLs with bad percent-escapes or control characters.
- `nightcrawler.parse.parse_html(html_body, raw_base_url)` returns every anchor
  `href` in a document in document order, resolved against the base URL.
- `nightcrawler.fetch.fetch_html(raw_url)` downloads a page and returns its body
  as text. It raises `FetchError` in three cases: the request fails, the status
  is not 200, or the `Content-Type` does not contain `text/html`.
- `nightcrawler.report.sort_pages(pages)` returns `ReportPage(url, count)`
  entries in report order. `format_report(pages, base_url)` returns the report
  text, and `print_report(pages, base_url)` writes it to standard output.

## Limitations

The crawler does not read `robots.txt` or limit its request rate. It sets no
request timeout of its own and has no depth limit other than `max_pages`. It
keeps results only in memory and prints them; it does not save them anywhere.

## Running the tests

```
pip install ".[test]"
pytest
```