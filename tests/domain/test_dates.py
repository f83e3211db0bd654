"""Tests for publish-date parsing and formatting."""

from __future__ import annotations

from datetime import date

import pytest

from blogctl.domain.dates import format_pub_date, parse_pub_date, parse_scaffold_date


class TestParseScaffoldDate:
    def test_valid(self) -> None:
        assert parse_scaffold_date("2025-03-05") == date(2025, 3, 5)

    @pytest.mark.parametrize(
        "value", ["2025-3-5", "05-03-2025", "2025/03/05", "Mar 5 2025", "2025-03-05T00:00", ""]
    )
    def test_wrong_shape(self, value: str) -> None:
        with pytest.raises(ValueError, match="YYYY-MM-DD"):
            parse_scaffold_date(value)

    def test_impossible_day(self) -> None:
        with pytest.raises(ValueError):
            parse_scaffold_date("2025-02-30")


class TestParsePubDate:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2025-03-05", date(2025, 3, 5)),
            ("2025-03-05T10:30:00Z", date(2025, 3, 5)),
            ("2025-03-05T10:30:00+02:00", date(2025, 3, 5)),
            ("Mar 5 2025", date(2025, 3, 5)),
            ("Mar 05, 2025", date(2025, 3, 5)),
            ("March 5 2025", date(2025, 3, 5)),
            ("March 5, 2025", date(2025, 3, 5)),
            ("5 March 2025", date(2025, 3, 5)),
            ("Wed, 05 Mar 2025 10:00:00 +0000", date(2025, 3, 5)),
            ("2025/03/05", date(2025, 3, 5)),
            ("03/05/2025", date(2025, 3, 5)),
            ("2025-03", date(2025, 3, 1)),
            ("2025", date(2025, 1, 1)),
        ],
    )
    def test_accepted_shapes(self, value: str, expected: date) -> None:
        assert parse_pub_date(value) == expected

    @pytest.mark.parametrize(
        "value", ["", "   ", "not a date", "Mar 32 2025", "2025-13-01", "2025-13", "2025-00"]
    )
    def test_rejected(self, value: str) -> None:
        assert parse_pub_date(value) is None

    def test_non_string(self) -> None:
        assert parse_pub_date(None) is None
        assert parse_pub_date(["Mar 5 2025"]) is None


class TestFormatPubDate:
    def test_format(self) -> None:
        assert format_pub_date(date(2025, 3, 5)) == "Mar 5 2025"
        assert format_pub_date(date(2024, 12, 25)) == "Dec 25 2024"

    def test_format_parses_back(self) -> None:
        d = date(2025, 11, 9)
        assert parse_pub_date(format_pub_date(d)) == d
