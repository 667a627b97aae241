"""Module for FogBugz status and people lookups."""

import logging

from requests.structures import CaseInsensitiveDict

from ..models.fogbugz import FogBugzPerson, FogBugzStatus
from .constants import CMD_LIST_PEOPLE, CMD_LIST_STATUSES
from .session import SessionMixin

logger = logging.getLogger("fogbugz-connector.fogbugz")


class LookupsMixin(SessionMixin):
    """Mixin translating FogBugz status and person ids.

    Search results only carry numeric ids, so these tables are fetched again
    within every operation that needs them.
    """

    def get_statuses(self, token: str) -> list[FogBugzStatus]:
        """
        List every status defined on the server.

        Args:
            token: Session token

        Returns:
            Statuses in server order
        """
        response = self.invoke(CMD_LIST_STATUSES, {"token": token})
        return [
            FogBugzStatus.from_api_response(node)
            for node in response.iterfind("statuses/status")
        ]

    def get_status_resolved_table(self, token: str) -> dict[int, bool]:
        """
        Map status ids to whether the status counts as resolved.

        Args:
            token: Session token

        Returns:
            Status id to resolved flag
        """
        return {status.id: status.is_resolved for status in self.get_statuses(token)}

    def get_status_ids_by_name(self, token: str) -> CaseInsensitiveDict:
        """
        Map status names to ids, ignoring case.

        When two statuses share a name the later one wins.

        Args:
            token: Session token

        Returns:
            Case-insensitive status name to status id
        """
        statuses: CaseInsensitiveDict = CaseInsensitiveDict()
        for status in self.get_statuses(token):
            statuses[status.name] = status.id
        return statuses

    def get_people(self, token: str) -> list[FogBugzPerson]:
        """
        List people, including deleted and virtual accounts so old cases
        still resolve to a name.

        Args:
            token: Session token

        Returns:
            People in server order
        """
        response = self.invoke(
            CMD_LIST_PEOPLE,
            {"token": token, "fIncludeDeleted": "1", "fIncludeVirtual": "1"},
        )
        return [
            FogBugzPerson.from_api_response(node)
            for node in response.iterfind("people/person")
        ]

    def get_people_names_table(self, token: str) -> dict[int, str]:
        """
        Map person ids to display names.

        Args:
            token: Session token

        Returns:
            Person id to full name
        """
        people = {person.id: person.full_name for person in self.get_people(token)}
        logger.debug(f"Loaded {len(people)} FogBugz people")
        return people
