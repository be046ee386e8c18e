"""Unit tests for utility functions"""

from datetime import date, datetime, timedelta, timezone

from src.utils import create_snippet, to_utc_datetime


class TestCreateSnippet:
    """Test display snippet truncation"""

    def test_short_text_unchanged(self):
        """Test text within the limit is returned as-is"""
        assert create_snippet("Quarterly planning", 150) == "Quarterly planning"

    def test_exact_length_unchanged(self):
        """Test text exactly at the limit is not marked"""
        assert create_snippet("abcdefgh", 8) == "abcdefgh"

    def test_long_text_truncated(self):
        """Test ellipsis counts toward the limit"""
        snippet = create_snippet("abcdefghij", 8)

        assert snippet == "abcde..."
        assert len(snippet) == 8

    def test_empty_text(self):
        """Test empty and None give an empty snippet"""
        assert create_snippet("", 10) == ""
        assert create_snippet(None, 10) == ""


class TestToUtcDatetime:
    """Test date normalization used for filtering and sorting"""

    def test_naive_datetime_assumed_utc(self):
        """Test naive values get UTC attached"""
        assert to_utc_datetime(datetime(2025, 1, 15, 10)) == datetime(2025, 1, 15, 10, tzinfo=timezone.utc)

    def test_aware_datetime_converted(self):
        """Test offsets are converted to UTC"""
        tokyo = timezone(timedelta(hours=9))

        result = to_utc_datetime(datetime(2025, 1, 15, 9, tzinfo=tokyo))

        assert result == datetime(2025, 1, 15, 0, tzinfo=timezone.utc)
        assert result.tzinfo == timezone.utc

    def test_date_is_midnight_utc(self):
        """Test plain dates map to the start of the day"""
        assert to_utc_datetime(date(2025, 1, 15)) == datetime(2025, 1, 15, tzinfo=timezone.utc)

    def test_dates_and_datetimes_comparable(self):
        """Test mixed inputs can be ordered"""
        values = [datetime(2025, 1, 15, 10), date(2025, 1, 15), date(2025, 1, 14)]

        ordered = sorted(values, key=to_utc_datetime)

        assert ordered == [date(2025, 1, 14), date(2025, 1, 15), datetime(2025, 1, 15, 10)]
