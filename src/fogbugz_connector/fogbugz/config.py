"""Configuration module for FogBugz API interactions."""

import os
from dataclasses import dataclass

from ..utils.env import is_env_ssl_verify
from .constants import (
    DEFAULT_SSL_VERIFY,
    ENV_FOGBUGZ_CATEGORY_FILTER,
    ENV_FOGBUGZ_EMAIL,
    ENV_FOGBUGZ_PASSWORD,
    ENV_FOGBUGZ_SSL_VERIFY,
    ENV_FOGBUGZ_URL,
)


@dataclass
class FogBugzConfig:
    """FogBugz API configuration.

    FogBugz authenticates with an e-mail address and password which are
    exchanged for a session token on every operation.
    """

    url: str  # Base API URL, usually http://fogbugz/api.xml
    email: str  # E-mail address of the account used to log on
    password: str = ""
    ssl_verify: bool = DEFAULT_SSL_VERIFY
    category_filter: str | None = None  # Comma-separated project ids

    @property
    def category_ids(self) -> list[str]:
        """Project ids from the category filter.

        Returns:
            The non-empty ids in the order they were configured
        """
        if not self.category_filter:
            return []
        return [p.strip() for p in self.category_filter.split(",") if p.strip()]

    @classmethod
    def from_env(cls) -> "FogBugzConfig":
        """Create configuration from environment variables.

        Returns:
            FogBugzConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing
        """
        url = os.getenv(ENV_FOGBUGZ_URL)
        if not url:
            raise ValueError(f"Missing required {ENV_FOGBUGZ_URL} environment variable")

        email = os.getenv(ENV_FOGBUGZ_EMAIL)
        if not email:
            raise ValueError(
                f"Missing required {ENV_FOGBUGZ_EMAIL} environment variable"
            )

        return cls(
            url=url,
            email=email,
            password=os.getenv(ENV_FOGBUGZ_PASSWORD, ""),
            ssl_verify=is_env_ssl_verify(ENV_FOGBUGZ_SSL_VERIFY),
            category_filter=os.getenv(ENV_FOGBUGZ_CATEGORY_FILTER),
        )
