"""Module for connector capability protocol definitions.

Hosts check what a connector can do with ``isinstance`` against these
protocols instead of relying on its concrete type.
"""

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from ..models.fogbugz import FogBugzCategory


@runtime_checkable
class CategoryFilterable(Protocol):
    """Protocol for connectors whose issues can be filtered by category."""

    category_id_filter: list[str]

    @property
    @abstractmethod
    def category_type_names(self) -> list[str]:
        """Names of the kinds of category, outermost first."""

    @abstractmethod
    def get_categories(self) -> list[FogBugzCategory]:
        """
        List the categories available for filtering.

        Returns:
            All categories
        """


@runtime_checkable
class IssueUpdater(Protocol):
    """Protocol for connectors that can modify issues."""

    can_append_issue_descriptions: bool
    can_change_issue_statuses: bool
    can_close_issues: bool

    @abstractmethod
    def append_issue_description(self, issue_id: str, text_to_append: str) -> None:
        """
        Append text to an issue.

        Args:
            issue_id: Id of the issue
            text_to_append: Text to add
        """

    @abstractmethod
    def change_issue_status(self, issue_id: str, new_status: str) -> None:
        """
        Change the status of an issue.

        Args:
            issue_id: Id of the issue
            new_status: Name of the new status
        """

    @abstractmethod
    def close_issue(self, issue_id: str) -> None:
        """
        Close an issue.

        Args:
            issue_id: Id of the issue
        """


@runtime_checkable
class ReleaseNumberCreator(Protocol):
    """Protocol for connectors that can create release numbers."""

    @abstractmethod
    def create_release_number(
        self, release_number: str, category_id_filter: list[str] | None = None
    ) -> None:
        """
        Create a release number in the issue tracker.

        Args:
            release_number: Release number to create
            category_id_filter: Category the release belongs to
        """


@runtime_checkable
class ReleaseNumberCloser(Protocol):
    """Protocol for connectors that can close release numbers."""

    @abstractmethod
    def close_release_number(
        self, release_number: str, category_id_filter: list[str] | None = None
    ) -> None:
        """
        Close a release number in the issue tracker.

        Args:
            release_number: Release number to close
            category_id_filter: Category the release belongs to
        """
