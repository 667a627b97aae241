"""Tests for the environment variable helpers."""

import pytest

from fogbugz_connector.utils.env import is_env_ssl_verify, is_env_truthy


@pytest.mark.parametrize(
    ("value", "expected"),
    [("true", True), ("1", True), ("YES", True), ("false", False), ("", False)],
)
def test_is_env_truthy(monkeypatch, value, expected):
    """Test the accepted truthy values."""
    monkeypatch.setenv("TEST_FLAG", value)

    assert is_env_truthy("TEST_FLAG") is expected


def test_is_env_truthy_unset(monkeypatch):
    """Test the default for an unset variable."""
    monkeypatch.delenv("TEST_FLAG", raising=False)

    assert is_env_truthy("TEST_FLAG") is False
    assert is_env_truthy("TEST_FLAG", "true") is True


@pytest.mark.parametrize(
    ("value", "expected"),
    [("false", False), ("0", False), ("No", False), ("true", True), ("x", True)],
)
def test_is_env_ssl_verify(monkeypatch, value, expected):
    """Test that only explicit false values disable verification."""
    monkeypatch.setenv("TEST_SSL", value)

    assert is_env_ssl_verify("TEST_SSL") is expected


def test_is_env_ssl_verify_unset(monkeypatch):
    """Test that verification is on by default."""
    monkeypatch.delenv("TEST_SSL", raising=False)

    assert is_env_ssl_verify("TEST_SSL") is True
