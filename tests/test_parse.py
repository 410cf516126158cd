import pytest

from nightcrawler.parse import parse_html

LINKS_ABSOLUTE_AND_RELATIVE = (
    "<html><body>"
    '<a href="/path/one"><span>Boot.dev</span></a>'
    '<a href="https://other.com/path/one"><span>Boot.dev</span></a>'
    "</body></html>"
)

NO_LINKS = "<html><body></body></html>"

LINKS_WITH_QUERY_AND_FRAGMENT = (
    "<html><body>"
    '<a href="/search?q=test">Search</a>'
    '<a href="/page#section">Section</a>'
    '<a href="https://other.com/page?param=value#frag">External</a>'
    "</body></html>"
)


@pytest.mark.parametrize(
    ("base", "body", "expected"),
    [
        pytest.param(
            "https://blog.boot.dev",
            LINKS_ABSOLUTE_AND_RELATIVE,
            ["https://blog.boot.dev/path/one", "https://other.com/path/one"],
            id="mixed-links",
        ),
        pytest.param("https://example.com", NO_LINKS, [], id="no-links"),
        pytest.param(
            "https://example.com",
            LINKS_WITH_QUERY_AND_FRAGMENT,
            [
                "https://example.com/search?q=test",
                "https://example.com/page#section",
                "https://other.com/page?param=value#frag",
            ],
            id="query-and-fragment",
        ),
    ],
)
def test_links_are_extracted_in_document_order(base, body, expected):
    assert parse_html(body, base) == expected


def test_whitespace_between_tags_does_not_change_result():
    spaced = "\n    <html>\n  <body>\n    <a href='/x'>x</a>\n  </body>\n</html>\n"
    assert parse_html(spaced, "https://example.com") == ["https://example.com/x"]


def test_relative_path_resolves_against_base_directory():
    body = '<a href="other">x</a>'
    assert parse_html(body, "https://example.com/dir/page") == ["https://example.com/dir/other"]


def test_anchor_without_href_is_ignored():
    body = '<a name="top">top</a><a href="/b">b</a>'
    assert parse_html(body, "https://example.com") == ["https://example.com/b"]


def test_uppercase_tags_and_entities():
    body = '<A HREF="/q?a=1&amp;b=2">x</A>'
    assert parse_html(body, "https://example.com") == ["https://example.com/q?a=1&b=2"]


def test_non_anchor_links_ignored():
    body = '<link href="/style.css"><img src="/i.png"><a href="/ok">ok</a>'
    assert parse_html(body, "https://example.com") == ["https://example.com/ok"]