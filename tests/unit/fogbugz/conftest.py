"""
Test fixtures for FogBugz unit tests.

The HTTP handle of the connector is replaced by `FakeFogBugzServer`, which
answers each request according to its ``cmd`` parameter and records every
URL it was asked for.
"""

import pytest

from fogbugz_connector.fogbugz import FogBugzFetcher
from fogbugz_connector.fogbugz.config import FogBugzConfig
from tests.utils.factories import FogBugzResponseFactory
from tests.utils.fakes import FakeFogBugzServer

BASE_URL = "https://fogbugz.example.com/api.asp"


@pytest.fixture
def fogbugz_config():
    """Create a FogBugzConfig pointing straight at the command endpoint."""
    return FogBugzConfig(
        url=BASE_URL,
        email="builder@example.com",
        password="secret",
        ssl_verify=True,
        category_filter="7",
    )


@pytest.fixture
def fake_server():
    """A FakeFogBugzServer with logon and logoff wired up."""
    return FakeFogBugzServer()


@pytest.fixture
def fogbugz_fetcher(fogbugz_config, fake_server):
    """Create a FogBugzFetcher talking to the fake server."""
    fetcher = FogBugzFetcher(config=fogbugz_config)
    fetcher._http_client = fake_server
    return fetcher


@pytest.fixture
def status_table_xml():
    """listStatuses reply with a resolved and an active status."""
    return FogBugzResponseFactory.statuses(
        [
            (1, "Active", False),
            (2, "Resolved", True),
            (3, "Resolved (Won't Fix)", True),
        ]
    )


@pytest.fixture
def people_xml():
    """listPeople reply."""
    return FogBugzResponseFactory.people([(5, "Alice Smith"), (6, "Bob Jones")])
