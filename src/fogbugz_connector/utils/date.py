"""Utility functions for date operations."""

import logging
from datetime import datetime

import dateutil.parser

logger = logging.getLogger("fogbugz-connector.utils")


def parse_datetime(date_str: str | None) -> datetime | None:
    """
    Parse a timestamp string as returned by FogBugz.

    FogBugz reports timestamps in ISO 8601 UTC (e.g. ``2020-01-01T10:00:00Z``)
    but anything `dateutil.parser` understands is accepted.

    Args:
        date_str: Date string or None

    Returns:
        Parsed datetime, or None if the string is empty or unparseable
    """
    if not date_str:
        return None

    try:
        return dateutil.parser.parse(date_str)
    except (ValueError, OverflowError) as e:
        logger.debug(f"Error parsing date '{date_str}': {str(e)}")
        return None
