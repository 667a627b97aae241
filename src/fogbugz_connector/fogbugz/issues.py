"""Module for FogBugz case (issue) operations."""

import logging

from ..exceptions import FogBugzInvalidStatusError
from ..models.fogbugz import FogBugzIssue
from ..utils.urls import resolve_url
from .constants import (
    CMD_CLOSE,
    CMD_EDIT,
    CMD_RESOLVE,
    CMD_SEARCH,
    ISSUE_PAGE_PREFIX,
    ISSUE_SEARCH_COLUMNS,
)
from .lookups import LookupsMixin
from .projects import ProjectsMixin

logger = logging.getLogger("fogbugz-connector.fogbugz")


class IssuesMixin(LookupsMixin, ProjectsMixin):
    """Mixin for FogBugz case operations."""

    # Appended text is not visible through get_issues, and status changes
    # are only offered through change_issue_status.
    can_append_issue_descriptions = False
    can_change_issue_statuses = False
    can_close_issues = True

    def get_issue_url(self, issue: FogBugzIssue | str | None) -> str | None:
        """
        Get the web page of a case.

        Args:
            issue: The issue or its id

        Returns:
            The URL of the case page, or None if no issue was given
        """
        if issue is None:
            return None
        issue_id = issue.id if isinstance(issue, FogBugzIssue) else issue
        return resolve_url(self.config.url, f"{ISSUE_PAGE_PREFIX}{issue_id}")

    def get_issues(
        self, release_number: str, category_id_filter: list[str] | None = None
    ) -> list[FogBugzIssue]:
        """
        Get the cases assigned to a release.

        Args:
            release_number: Milestone name to search for
            category_id_filter: Project ids to restrict the search to; only the
                first is used. Defaults to the connector's own filter.

        Returns:
            Issues in the order FogBugz returned them
        """
        if category_id_filter is None:
            category_id = self.active_category_id
        else:
            category_id = category_id_filter[0] if category_id_filter else None

        with self.session("get_issues") as token:
            resolved_statuses = self.get_status_resolved_table(token)
            people = self.get_people_names_table(token)

            project_query = ""
            if category_id:
                project_name = self.get_project_name(token, category_id)
                if project_name:
                    project_query = f' project:"{project_name}"'

            response = self.invoke(
                CMD_SEARCH,
                {
                    "token": token,
                    "q": f'milestone:"{release_number}"{project_query}',
                    "cols": ",".join(ISSUE_SEARCH_COLUMNS),
                },
            )

            issues = []
            for node in response.iterfind("cases/case"):
                issue = FogBugzIssue.from_api_response(
                    node,
                    release=release_number,
                    resolved_statuses=resolved_statuses,
                    people=people,
                )
                issues.append(
                    issue.model_copy(update={"url": self.get_issue_url(issue)})
                )

        logger.debug(f"Found {len(issues)} FogBugz cases for release {release_number}")
        return issues

    def is_issue_closed(self, issue: FogBugzIssue) -> bool:
        """
        Check whether an issue is closed.

        Args:
            issue: Issue returned by get_issues

        Returns:
            True if the issue's status is a resolved status
        """
        return issue.is_resolved

    def append_issue_description(self, issue_id: str, text_to_append: str) -> None:
        """
        Add text to a case as a new event.

        Args:
            issue_id: Case number
            text_to_append: Text of the event
        """
        with self.session("append_issue_description") as token:
            self.invoke(
                CMD_EDIT, {"token": token, "ixBug": issue_id, "sEvent": text_to_append}
            )

    def change_issue_status(self, issue_id: str, new_status: str) -> None:
        """
        Resolve a case with the given status.

        Args:
            issue_id: Case number
            new_status: Status name, matched without regard to case

        Raises:
            FogBugzInvalidStatusError: If FogBugz has no status by that name
        """
        with self.session("change_issue_status") as token:
            statuses = self.get_status_ids_by_name(token)
            if new_status not in statuses:
                raise FogBugzInvalidStatusError(new_status, list(statuses.keys()))

            self.invoke(
                CMD_RESOLVE,
                {"token": token, "ixBug": issue_id, "ixStatus": str(statuses[new_status])},
            )

        logger.info(f"Changed status of case {issue_id} to {new_status}")

    def close_issue(self, issue_id: str) -> None:
        """
        Close a case.

        Args:
            issue_id: Case number
        """
        with self.session("close_issue") as token:
            self.invoke(CMD_CLOSE, {"token": token, "ixBug": issue_id})

        logger.info(f"Closed case {issue_id}")

    def change_status_for_all_issues_in_release(
        self,
        release_number: str,
        from_status: str,
        to_status: str,
        category_id_filter: list[str] | None = None,
    ) -> list[str]:
        """
        Move every case of a release from one status to another.

        Cases are changed one at a time. If one change fails the error
        propagates and the cases changed before it stay changed.

        Args:
            release_number: Milestone name
            from_status: Status the cases must currently have
            to_status: Status to change them to
            category_id_filter: As for get_issues

        Returns:
            Ids of the cases that were changed
        """
        changed = []
        for issue in self.get_issues(release_number, category_id_filter):
            if issue.status == from_status:
                self.change_issue_status(issue.id, to_status)
                changed.append(issue.id)
        return changed
