"""Date formatting for rendered posts."""

from datetime import date, datetime
from typing import Optional

from common import logger

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

LONG_DATE_PATTERNS = {
    "en-US": "{month} {day}, {year}",
    "en-GB": "{day} {month} {year}",
}

FALLBACK_FORMATS = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
)


def parse_date(value: str) -> Optional[date]:
    """Разбор даты из строки, None если формат не распознан."""
    value = value.strip()
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        pass
    for fmt in FALLBACK_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    return None


def format_date(value, locale: str = "en-US") -> str:
    """
    Render a date-like value as a long-form date in the given locale.

    Returns an empty string for empty input and the original text when the
    value cannot be turned into a calendar date.
    """
    if not value:
        return ""
    text = str(value)
    try:
        parsed = parse_date(text)
        if parsed is None:
            raise ValueError(f"Unrecognized date: {text}")
        return LONG_DATE_PATTERNS[locale].format(
            month=MONTH_NAMES[parsed.month - 1],
            day=parsed.day,
            year=parsed.year,
        )
    except (ValueError, KeyError) as e:
        logger.warning("Error formatting date: %s", e)
        return text
