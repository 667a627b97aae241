"""FogBugz API module.

This module provides the connector between a release-management host and
FogBugz 7 or later.
"""

import logging

from ..exceptions import FogBugzConnectionError, FogBugzServiceUnavailableError
from .client import FogBugzClient, build_query
from .config import FogBugzConfig
from .issues import IssuesMixin
from .lookups import LookupsMixin
from .projects import ProjectsMixin
from .protocols import (
    CategoryFilterable,
    IssueUpdater,
    ReleaseNumberCloser,
    ReleaseNumberCreator,
)
from .releases import ReleasesMixin
from .session import SessionMixin

logger = logging.getLogger("fogbugz-connector.fogbugz")


class FogBugzFetcher(IssuesMixin, ReleasesMixin):
    """
    The main FogBugz connector.

    Combines issue, category, lookup and release operations. Each public
    operation opens and closes its own FogBugz session.
    """

    def is_available(self) -> bool:
        """The connector has no optional runtime requirements."""
        return True

    def validate_connection(self) -> None:
        """
        Log on and off once to check the configuration.

        Raises:
            FogBugzServiceUnavailableError: If FogBugz cannot be reached
            FogBugzError: If FogBugz is reachable but rejects the request
        """
        try:
            with self.session("validate_connection"):
                pass
        except FogBugzConnectionError as e:
            raise FogBugzServiceUnavailableError(
                "Unable to connect to FogBugz. Verify that the URL is correct and "
                f"accessible via the browser. Full error: {e}"
            ) from e

    def __str__(self) -> str:
        return "Connects to FogBugz v7 or later."


__all__ = [
    "CategoryFilterable",
    "FogBugzClient",
    "FogBugzConfig",
    "FogBugzFetcher",
    "IssueUpdater",
    "IssuesMixin",
    "LookupsMixin",
    "ProjectsMixin",
    "ReleaseNumberCloser",
    "ReleaseNumberCreator",
    "ReleasesMixin",
    "SessionMixin",
    "build_query",
]
