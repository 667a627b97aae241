"""
Utility functions for the FogBugz connector.
This package provides various utility functions used throughout the codebase.
"""

from .date import parse_datetime
from .env import is_env_ssl_verify, is_env_truthy
from .urls import resolve_url, url_has_filename
from .xml import find_text, parse_bool, parse_int, parse_xml, require_text

__all__ = [
    "find_text",
    "is_env_ssl_verify",
    "is_env_truthy",
    "parse_bool",
    "parse_datetime",
    "parse_int",
    "parse_xml",
    "require_text",
    "resolve_url",
    "url_has_filename",
]
