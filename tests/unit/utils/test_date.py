"""Tests for the date utility functions."""

from datetime import datetime, timezone

from fogbugz_connector.utils import parse_datetime


def test_parse_datetime_iso8601_utc():
    """Test that FogBugz UTC timestamps keep their time zone."""
    assert parse_datetime("2020-01-01T10:00:00Z") == datetime(
        2020, 1, 1, 10, 0, tzinfo=timezone.utc
    )


def test_parse_datetime_date_only():
    """Test that a bare date parses to midnight."""
    assert parse_datetime("2021-02-01") == datetime(2021, 2, 1)


def test_parse_datetime_empty():
    """Test that missing values give None."""
    assert parse_datetime(None) is None
    assert parse_datetime("") is None


def test_parse_datetime_invalid():
    """Test that unparseable values give None instead of raising."""
    assert parse_datetime("not a date") is None
