"""Publish-date parsing and formatting.

Two parsers with different strictness:

- :func:`parse_scaffold_date` accepts only the literal ``YYYY-MM-DD``
  shape typed at scaffold time.
- :func:`parse_pub_date` accepts the looser shapes a post header may
  carry (ISO 8601, RFC 2822, English month names) as the site build
  coerces them into dates.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from email.utils import parsedate_to_datetime

_SCAFFOLD_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
# Year or year-month, read as the first day of that period.
_PARTIAL_ISO = re.compile(r"^(\d{4})(?:-(\d{2}))?$")

_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# strptime shapes tried after ISO 8601 and RFC 2822.
_LOOSE_FORMATS: tuple[str, ...] = (
    "%b %d %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%d %B %Y",
    "%a %b %d %Y",
    "%Y/%m/%d",
    "%m/%d/%Y",
)


def parse_scaffold_date(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` date.

    Raises:
        ValueError: if *value* has any other shape or names an
            impossible calendar day (e.g. ``2025-02-30``).
    """
    match = _SCAFFOLD_DATE.match(value)
    if match is None:
        msg = f"Invalid date {value!r}. Use YYYY-MM-DD."
        raise ValueError(msg)
    year, month, day = (int(part) for part in match.groups())
    return date(year, month, day)


def parse_pub_date(value: object) -> date | None:
    """Best-effort parse of a ``pubDate`` header value.

    Returns None for non-strings, empty strings, and anything that does
    not match a known shape.
    """
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None

    iso = text[:-1] + "+00:00" if text.endswith("Z") else text
    try:
        return datetime.fromisoformat(iso).date()
    except ValueError:
        pass

    partial = _PARTIAL_ISO.match(text)
    if partial is not None:
        year, month = partial.groups()
        try:
            return date(int(year), int(month or 1), 1)
        except ValueError:
            return None

    try:
        return parsedate_to_datetime(text).date()
    except (TypeError, ValueError, IndexError):
        pass

    for fmt in _LOOSE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def format_pub_date(value: date) -> str:
    """Format *value* as ``Mon D YYYY`` (e.g. ``Mar 5 2025``).

    Month names are fixed English abbreviations, independent of locale.
    """
    return f"{_MONTH_ABBR[value.month - 1]} {value.day} {value.year}"
