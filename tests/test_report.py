import pytest

from nightcrawler.report import ReportPage, format_report, print_report, sort_pages


@pytest.mark.parametrize(
    ("input_urls", "expected"),
    [
        (
            {"https://blog.boot.dev/b-path": 1, "https://blog.boot.dev/a-path": 2},
            [
                ReportPage(url="https://blog.boot.dev/a-path", count=2),
                ReportPage(url="https://blog.boot.dev/b-path", count=1),
            ],
        ),
        (
            {
                "https://blog.boot.dev/b-path": 2,
                "https://blog.boot.dev/a-path": 2,
                "https://blog.boot.dev/c-path": 3,
            },
            [
                ReportPage(url="https://blog.boot.dev/c-path", count=3),
                ReportPage(url="https://blog.boot.dev/a-path", count=2),
                ReportPage(url="https://blog.boot.dev/b-path", count=2),
            ],
        ),
    ],
    ids=["sorts by count", "sorts by count then alphabetically by path"],
)
def test_sort_pages(input_urls, expected):
    assert sort_pages(input_urls) == expected


def test_sort_pages_empty():
    assert sort_pages({}) == []


def test_format_report():
    text = format_report({"example.com/b": 1, "example.com": 3}, "https://example.com")
    assert text == (
        "\n"
        "=============================\n"
        "  REPORT for https://example.com\n"
        "=============================\n"
        "Found 3 internal links to example.com\n"
        "Found 1 internal links to example.com/b\n"
    )


def test_format_report_without_pages():
    assert format_report({}, "https://example.com").endswith("=============================\n")


def test_print_report(capsys):
    print_report({"example.com/a": 2}, "https://example.com")
    out = capsys.readouterr().out
    assert out == format_report({"example.com/a": 2}, "https://example.com")
    assert "Found 2 internal links to example.com/a\n" in out