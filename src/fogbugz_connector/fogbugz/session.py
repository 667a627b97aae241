"""Module for FogBugz session (logon/logoff) handling."""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

from ..exceptions import FogBugzAuthenticationError
from ..logging_config import log_operation
from ..utils.xml import find_text
from .client import FogBugzClient
from .constants import CMD_LOGOFF, CMD_LOGON

logger = logging.getLogger("fogbugz-connector.fogbugz")

T = TypeVar("T")


class SessionMixin(FogBugzClient):
    """Mixin for FogBugz session operations.

    Every public operation runs inside `session`, which logs on, hands the
    token to the caller and always logs off again. Tokens are never stored
    on the connector.
    """

    def logon(self) -> str:
        """
        Log on with the configured e-mail address and password.

        Returns:
            The session token

        Raises:
            FogBugzAuthenticationError: If the response carries no token
            FogBugzCommandError: If FogBugz rejects the credentials
        """
        response = self.invoke(
            CMD_LOGON,
            {"email": self.config.email, "password": self.config.password},
        )

        token = find_text(response, "token")
        if not token:
            raise FogBugzAuthenticationError("Expected token in FogBugz API response.")

        logger.debug(f"Logged on to FogBugz as {self.config.email}")
        return token

    def logoff(self, token: str) -> None:
        """
        End a session. Failures are logged and otherwise ignored.

        Args:
            token: Token of the session to end
        """
        try:
            self.invoke(CMD_LOGOFF, {"token": token})
        except Exception as e:  # noqa: BLE001
            logger.debug(f"Ignoring FogBugz logoff failure: {str(e)}")

    @contextmanager
    def session(self, operation: str = "fogbugz") -> Iterator[str]:
        """
        Bracket a block with logon and logoff.

        Args:
            operation: Name used for the logging context

        Yields:
            The session token, valid until the block exits
        """
        with log_operation(logger, operation):
            token = self.logon()
            try:
                yield token
            finally:
                self.logoff(token)

    def with_session(self, body: Callable[[str], T], operation: str = "fogbugz") -> T:
        """
        Run a callable inside a session.

        Args:
            body: Callable receiving the session token
            operation: Name used for the logging context

        Returns:
            Whatever the callable returns
        """
        with self.session(operation) as token:
            return body(token)
