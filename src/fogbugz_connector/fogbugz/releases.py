"""Module for FogBugz fix-for (release number) operations."""

import logging

from ..models.fogbugz import FogBugzRelease
from .constants import CMD_EDIT_FIX_FOR, CMD_NEW_FIX_FOR, CMD_VIEW_FIX_FOR
from .projects import ProjectsMixin

logger = logging.getLogger("fogbugz-connector.fogbugz")


class ReleasesMixin(ProjectsMixin):
    """Mixin managing FogBugz milestones as release numbers.

    Milestones belong to a project, so nothing happens unless the connector
    is filtered to a category.
    """

    def _release_category(self, category_id_filter: list[str] | None) -> str | None:
        if category_id_filter is None:
            return self.active_category_id
        if category_id_filter and category_id_filter[0]:
            return category_id_filter[0]
        return None

    def get_release(
        self, token: str, project_id: str, release_number: str
    ) -> FogBugzRelease | None:
        """
        Look up a milestone by name.

        Args:
            token: Session token
            project_id: Project the milestone belongs to
            release_number: Milestone name

        Returns:
            The milestone, or None if it does not exist or is inactive
        """
        response = self.invoke(
            CMD_VIEW_FIX_FOR,
            {"token": token, "ixProject": project_id, "sFixFor": release_number},
        )
        node = response.find("fixfor")
        if node is None or node.find("ixFixFor") is None:
            return None
        return FogBugzRelease.from_api_response(
            node, name=release_number, project_id=project_id
        )

    def create_release_number(
        self, release_number: str, category_id_filter: list[str] | None = None
    ) -> None:
        """
        Create an assignable milestone.

        Args:
            release_number: Milestone name
            category_id_filter: Project ids; only the first is used. Defaults
                to the connector's own filter.
        """
        project_id = self._release_category(category_id_filter)
        if not project_id:
            logger.debug(f"No category configured; not creating {release_number}")
            return

        with self.session("create_release_number") as token:
            self.invoke(
                CMD_NEW_FIX_FOR,
                {
                    "token": token,
                    "ixProject": project_id,
                    "sFixFor": release_number,
                    "fAssignable": "1",
                },
            )

        logger.info(f"Created FogBugz milestone {release_number} in project {project_id}")

    def close_release_number(
        self, release_number: str, category_id_filter: list[str] | None = None
    ) -> None:
        """
        Make a milestone unassignable.

        A milestone that does not exist or is already inactive is left alone.

        Args:
            release_number: Milestone name
            category_id_filter: As for create_release_number
        """
        project_id = self._release_category(category_id_filter)
        if not project_id:
            logger.debug(f"No category configured; not closing {release_number}")
            return

        with self.session("close_release_number") as token:
            release = self.get_release(token, project_id, release_number)
            if release is None:
                logger.debug(f"FogBugz milestone {release_number} not found; nothing to close")
                return

            self.invoke(
                CMD_EDIT_FIX_FOR,
                {
                    "token": token,
                    "ixFixFor": release.id,
                    "sFixFor": release_number,
                    "fAssignable": "0",
                },
            )

        logger.info(f"Closed FogBugz milestone {release_number}")
