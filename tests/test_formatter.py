import pytest

from renderer.formatter import format_date, parse_date


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-03-15", "March 15, 2024"),
        ("2024-04-02T09:30:00Z", "April 2, 2024"),
        ("2024-12-31T23:59:59+05:00", "December 31, 2024"),
        ("2024/03/15", "March 15, 2024"),
        ("03/15/2024", "March 15, 2024"),
        ("June 1, 2024", "June 1, 2024"),
        ("1 June 2024", "June 1, 2024"),
    ],
)
def test_format_date_en_us(value, expected):
    assert format_date(value) == expected


def test_format_date_en_gb():
    assert format_date("2024-03-15", locale="en-GB") == "15 March 2024"


def test_format_date_empty():
    assert format_date("") == ""
    assert format_date(None) == ""


@pytest.mark.parametrize("value", ["not-a-date", "2024-02-30", "13/45/2024", "   "])
def test_format_date_malformed_returns_input(value):
    assert format_date(value) == value


def test_format_date_unknown_locale_returns_input():
    assert format_date("2024-03-15", locale="xx-XX") == "2024-03-15"


def test_parse_date_unrecognized():
    assert parse_date("yesterday") is None
