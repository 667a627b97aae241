"""Module for FogBugz project (category) operations."""

import logging

from ..models.fogbugz import FogBugzCategory
from ..utils.xml import find_text
from .constants import CATEGORY_TYPE_NAMES, CMD_LIST_PROJECTS, CMD_VIEW_PROJECT
from .session import SessionMixin

logger = logging.getLogger("fogbugz-connector.fogbugz")


class ProjectsMixin(SessionMixin):
    """Mixin exposing FogBugz projects as issue categories."""

    @property
    def category_type_names(self) -> list[str]:
        """Kinds of category this connector filters by."""
        return list(CATEGORY_TYPE_NAMES)

    @property
    def active_category_id(self) -> str | None:
        """The category the connector is filtered to, if any.

        Only the first entry of the filter is used.
        """
        if self.category_id_filter and self.category_id_filter[0]:
            return self.category_id_filter[0]
        return None

    def get_categories(self) -> list[FogBugzCategory]:
        """
        List all projects as categories.

        Returns:
            Categories in server order
        """
        with self.session("get_categories") as token:
            response = self.invoke(CMD_LIST_PROJECTS, {"token": token})
            categories = [
                FogBugzCategory.from_api_response(node)
                for node in response.iterfind("projects/project")
            ]

        logger.debug(f"Found {len(categories)} FogBugz projects")
        return categories

    def get_project_name(self, token: str, project_id: str) -> str | None:
        """
        Look up the display name of a project.

        Args:
            token: Session token
            project_id: FogBugz project id (ixProject)

        Returns:
            The project name, or None if the response has none
        """
        response = self.invoke(
            CMD_VIEW_PROJECT, {"token": token, "ixProject": project_id}
        )
        return find_text(response, "project/sProject") or None
