"""
Base classes for the FogBugz connector models.

Every entity is a read-only projection of an XML node returned by the
FogBugz API and knows how to build itself from that node.
"""

from typing import Any, TypeVar
from xml.etree import ElementTree

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for all FogBugz API entities.

    Subclasses implement `from_api_response` to parse an XML element and
    `to_simplified_dict` to render the fields hosts care about.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_api_response(
        cls: type[T], node: ElementTree.Element, **kwargs: Any
    ) -> T:
        """
        Create a model instance from an API response node.

        Args:
            node: The XML element describing the entity
            **kwargs: Additional context needed by the subclass

        Returns:
            An instance of the model
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert the model to a JSON-friendly dictionary without empty fields."""
        return self.model_dump(mode="json", exclude_none=True)
