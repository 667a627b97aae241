"""
FogBugz fix-for (milestone) model.
"""

from typing import Any
from xml.etree import ElementTree

from ...utils.xml import find_text, parse_bool, require_text
from ..base import ApiModel


class FogBugzRelease(ApiModel):
    """
    A milestone, which release management calls a release number.

    A release that is no longer assignable is considered closed.
    """

    id: str
    name: str
    project_id: str | None = None
    is_assignable: bool = True

    @classmethod
    def from_api_response(
        cls, node: ElementTree.Element, **kwargs: Any
    ) -> "FogBugzRelease":
        """
        Create a FogBugzRelease from a ``<fixfor>`` element.

        Args:
            node: The ``<fixfor>`` element
            **kwargs: ``name`` and ``project_id`` fall back to the values the
                milestone was queried with when the response omits them
        """
        # Older servers report fAssignable, newer ones fDeleted (inactive)
        assignable = find_text(node, "fAssignable")
        deleted = find_text(node, "fDeleted")
        if assignable:
            is_assignable = parse_bool(assignable, "fAssignable")
        elif deleted:
            is_assignable = not parse_bool(deleted, "fDeleted")
        else:
            is_assignable = True

        return cls(
            id=require_text(node, "ixFixFor"),
            name=find_text(node, "sFixFor") or kwargs.get("name", ""),
            project_id=find_text(node, "ixProject") or kwargs.get("project_id"),
            is_assignable=is_assignable,
        )
