"""Fake transport objects for FogBugz unit tests."""

from collections.abc import Callable
from unittest.mock import MagicMock
from urllib.parse import parse_qsl, urlsplit

from tests.utils.factories import FogBugzResponseFactory

Reply = str | Exception | Callable[[dict[str, str]], str]


class FakeFogBugzServer:
    """Stand-in for the httpx handle that dispatches on the command name.

    A reply may be a response body, an exception to raise, a callable taking
    the request parameters, or a list of those consumed one per request.
    Requests without a ``cmd`` parameter are answered with ``discovery``.
    """

    def __init__(self, replies: dict[str, Reply | list[Reply]] | None = None) -> None:
        self.replies: dict[str, Reply | list[Reply]] = {
            "logon": FogBugzResponseFactory.logon("T1"),
            "logoff": FogBugzResponseFactory.empty(),
        }
        self.replies.update(replies or {})
        self.urls: list[str] = []
        self.close = MagicMock()

    def get(self, url: str) -> MagicMock:
        self.urls.append(url)
        params = dict(parse_qsl(urlsplit(url).query, keep_blank_values=True))
        command = params.get("cmd", "discovery")

        reply = self.replies[command]
        if isinstance(reply, list):
            reply = reply.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            reply = reply(params)

        response = MagicMock()
        response.content = reply.encode("utf-8")
        response.raise_for_status.return_value = None
        return response

    @property
    def requests(self) -> list[dict[str, str]]:
        """Parameters of every request, in order."""
        return [
            dict(parse_qsl(urlsplit(url).query, keep_blank_values=True))
            for url in self.urls
        ]

    @property
    def commands(self) -> list[str]:
        """Command names of every request, in order."""
        return [params.get("cmd", "discovery") for params in self.requests]

    def params_for(self, command: str) -> list[dict[str, str]]:
        """Parameters of every request for one command."""
        return [p for p in self.requests if p.get("cmd", "discovery") == command]
