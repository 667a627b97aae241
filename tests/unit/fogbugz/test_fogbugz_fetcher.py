"""Tests for the combined FogBugz connector."""

import httpx
import pytest

from fogbugz_connector.exceptions import (
    FogBugzCommandError,
    FogBugzConnectionError,
    FogBugzServiceUnavailableError,
)
from fogbugz_connector.fogbugz import (
    CategoryFilterable,
    FogBugzFetcher,
    IssueUpdater,
    ReleaseNumberCloser,
    ReleaseNumberCreator,
)
from tests.utils.factories import FogBugzResponseFactory


def test_capabilities(fogbugz_fetcher):
    """Test the protocols and capability flags the connector offers."""
    assert isinstance(fogbugz_fetcher, CategoryFilterable)
    assert isinstance(fogbugz_fetcher, IssueUpdater)
    assert isinstance(fogbugz_fetcher, ReleaseNumberCreator)
    assert isinstance(fogbugz_fetcher, ReleaseNumberCloser)

    assert fogbugz_fetcher.can_append_issue_descriptions is False
    assert fogbugz_fetcher.can_change_issue_statuses is False
    assert fogbugz_fetcher.can_close_issues is True


def test_description(fogbugz_fetcher):
    """Test the human-readable description and availability."""
    assert str(fogbugz_fetcher) == "Connects to FogBugz v7 or later."
    assert fogbugz_fetcher.is_available() is True


def test_category_filter_from_config(fogbugz_fetcher):
    """Test that the category filter comes from the configuration."""
    assert fogbugz_fetcher.category_id_filter == ["7"]
    assert fogbugz_fetcher.category_type_names == ["Project"]


def test_init_from_env(monkeypatch):
    """Test that a connector without config reads the environment."""
    monkeypatch.setenv("FOGBUGZ_URL", "https://fogbugz.example.com/api.xml")
    monkeypatch.setenv("FOGBUGZ_EMAIL", "builder@example.com")
    monkeypatch.delenv("FOGBUGZ_CATEGORY_FILTER", raising=False)

    fetcher = FogBugzFetcher()

    assert fetcher.config.url == "https://fogbugz.example.com/api.xml"
    assert fetcher.category_id_filter == []


def test_get_categories(fogbugz_fetcher, fake_server):
    """Test that projects are listed as categories."""
    fake_server.replies["listProjects"] = FogBugzResponseFactory.projects(
        [("7", "Core"), ("9", "Web Site")]
    )

    categories = fogbugz_fetcher.get_categories()

    assert [(c.id, c.name) for c in categories] == [("7", "Core"), ("9", "Web Site")]
    assert fake_server.commands == ["logon", "listProjects", "logoff"]


class TestValidateConnection:
    """Tests for validate_connection."""

    def test_success(self, fogbugz_fetcher, fake_server):
        """Test that validation logs on and off."""
        fogbugz_fetcher.validate_connection()

        assert fake_server.commands == ["logon", "logoff"]

    def test_unreachable(self, fogbugz_fetcher, fake_server):
        """Test that connectivity failures carry the troubleshooting hint."""
        fake_server.replies["logon"] = httpx.ConnectError("Name or service not known")

        with pytest.raises(FogBugzServiceUnavailableError) as excinfo:
            fogbugz_fetcher.validate_connection()

        message = str(excinfo.value)
        assert message.startswith("Unable to connect to FogBugz. Verify that the URL")
        assert "Full error: Request error: Name or service not known" in message
        assert isinstance(excinfo.value, FogBugzConnectionError)

    def test_bad_credentials(self, fogbugz_fetcher, fake_server):
        """Test that a FogBugz error is not reported as unreachable."""
        fake_server.replies["logon"] = FogBugzResponseFactory.error(
            1, "Incorrect password or username"
        )

        with pytest.raises(FogBugzCommandError):
            fogbugz_fetcher.validate_connection()


def test_close_releases_http_client(fogbugz_fetcher, fake_server):
    """Test that closing the connector closes the HTTP handle."""
    fogbugz_fetcher.close()

    fake_server.close.assert_called_once()
    assert fogbugz_fetcher._http_client is None
