"""
FogBugz data models.

Projections of FogBugz cases, projects, fix-fors, statuses and people in the
vocabulary of release management: issues, categories and releases.
"""

from .common import FogBugzPerson, FogBugzStatus
from .issue import FogBugzIssue
from .project import FogBugzCategory
from .release import FogBugzRelease

__all__ = [
    "FogBugzCategory",
    "FogBugzIssue",
    "FogBugzPerson",
    "FogBugzRelease",
    "FogBugzStatus",
]
