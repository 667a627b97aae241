"""
Status and person models used for id lookups.
"""

from typing import Any
from xml.etree import ElementTree

from ...utils.xml import parse_bool, parse_int, require_text
from ..base import ApiModel
from ..constants import EMPTY_STRING


class FogBugzStatus(ApiModel):
    """
    A case status, e.g. "Active" or "Resolved (Fixed)".
    """

    id: int
    name: str = EMPTY_STRING
    is_resolved: bool = False

    @classmethod
    def from_api_response(
        cls, node: ElementTree.Element, **kwargs: Any
    ) -> "FogBugzStatus":
        """
        Create a FogBugzStatus from a ``<status>`` element.
        """
        return cls(
            id=parse_int(require_text(node, "ixStatus"), "ixStatus"),
            name=require_text(node, "sStatus"),
            is_resolved=parse_bool(require_text(node, "fResolved"), "fResolved"),
        )


class FogBugzPerson(ApiModel):
    """
    A FogBugz user account.
    """

    id: int
    full_name: str = EMPTY_STRING
    email: str | None = None

    @classmethod
    def from_api_response(
        cls, node: ElementTree.Element, **kwargs: Any
    ) -> "FogBugzPerson":
        """
        Create a FogBugzPerson from a ``<person>`` element.
        """
        email = node.findtext("sEmail")
        return cls(
            id=parse_int(require_text(node, "ixPerson"), "ixPerson"),
            full_name=require_text(node, "sFullName"),
            email=email or None,
        )
