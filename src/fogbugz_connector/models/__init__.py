"""
Pydantic models for the FogBugz connector.
"""

from .base import ApiModel
from .fogbugz import (
    FogBugzCategory,
    FogBugzIssue,
    FogBugzPerson,
    FogBugzRelease,
    FogBugzStatus,
)

__all__ = [
    "ApiModel",
    "FogBugzCategory",
    "FogBugzIssue",
    "FogBugzPerson",
    "FogBugzRelease",
    "FogBugzStatus",
]
