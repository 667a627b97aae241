"""
FogBugz issue models.

This module provides the Pydantic model for FogBugz cases as seen by a
release-management host.
"""

import logging
from datetime import datetime
from typing import Any
from xml.etree import ElementTree

from ...utils.date import parse_datetime
from ...utils.xml import find_text, parse_int, require_text
from ..base import ApiModel
from ..constants import EMPTY_STRING, FOGBUGZ_DEFAULT_ID

logger = logging.getLogger("fogbugz-connector.models")


class FogBugzIssue(ApiModel):
    """
    Model representing a FogBugz case.

    ``status`` is the display name reported by the search; ``is_resolved``
    comes from the server's status table because names alone do not say
    whether a status counts as resolved.
    """

    id: str = FOGBUGZ_DEFAULT_ID
    status: str = EMPTY_STRING
    title: str = EMPTY_STRING
    description: str = EMPTY_STRING
    release: str = EMPTY_STRING
    is_resolved: bool = False
    submitted_date: datetime | None = None
    submitter: str | None = None
    url: str | None = None

    @property
    def is_closed(self) -> bool:
        """Whether the host should treat the issue as closed."""
        return self.is_resolved

    @classmethod
    def from_api_response(
        cls, node: ElementTree.Element, **kwargs: Any
    ) -> "FogBugzIssue":
        """
        Create a FogBugzIssue from a ``<case>`` element of a search response.

        Args:
            node: The ``<case>`` element
            **kwargs: Lookup context:
                release: Release number the case was searched for
                resolved_statuses: Status id to resolved flag table
                people: Person id to display name table
                url: Detail page URL of the case

        Returns:
            A FogBugzIssue instance
        """
        resolved_statuses: dict[int, bool] = kwargs.get("resolved_statuses") or {}
        people: dict[int, str] = kwargs.get("people") or {}

        issue_id = node.get("ixBug") or find_text(node, "ixBug") or FOGBUGZ_DEFAULT_ID

        status_id = parse_int(require_text(node, "ixStatus"), "ixStatus")
        if status_id not in resolved_statuses:
            logger.warning(
                f"Case {issue_id} has status {status_id} which is not in the "
                "status list; treating it as unresolved"
            )

        submitter = None
        opened_by = find_text(node, "ixPersonOpenedBy")
        if opened_by:
            submitter = people.get(parse_int(opened_by, "ixPersonOpenedBy"))

        return cls(
            id=issue_id,
            status=find_text(node, "sStatus", EMPTY_STRING),
            title=find_text(node, "sTitle", EMPTY_STRING),
            description=find_text(node, "sLatestTextSummary", EMPTY_STRING),
            release=kwargs.get("release", EMPTY_STRING),
            is_resolved=resolved_statuses.get(status_id, False),
            submitted_date=parse_datetime(find_text(node, "dtOpened")),
            submitter=submitter,
            url=kwargs.get("url"),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result: dict[str, Any] = {
            "id": self.id,
            "status": self.status,
            "title": self.title,
            "description": self.description,
            "release": self.release,
            "is_resolved": self.is_resolved,
        }
        if self.submitted_date:
            result["submitted_date"] = self.submitted_date.isoformat()
        if self.submitter:
            result["submitter"] = self.submitter
        if self.url:
            result["url"] = self.url
        return result
