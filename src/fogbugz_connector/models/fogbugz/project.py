"""
FogBugz project model, exposed to hosts as a category.
"""

from typing import Any
from xml.etree import ElementTree

from ...utils.xml import require_text
from ..base import ApiModel


class FogBugzCategory(ApiModel):
    """
    A FogBugz project seen as an issue category.
    """

    id: str
    name: str

    @classmethod
    def from_api_response(
        cls, node: ElementTree.Element, **kwargs: Any
    ) -> "FogBugzCategory":
        """
        Create a FogBugzCategory from a ``<project>`` element.
        """
        return cls(
            id=require_text(node, "ixProject"),
            name=require_text(node, "sProject"),
        )
