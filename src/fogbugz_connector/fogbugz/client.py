"""Base client module for FogBugz XML API interactions."""

import logging
import threading
from collections.abc import Iterable, Mapping
from urllib.parse import urlencode
from xml.etree import ElementTree

import httpx

from ..exceptions import (
    FogBugzCommandError,
    FogBugzConnectionError,
    FogBugzMalformedResponseError,
    FogBugzUnsupportedVersionError,
)
from ..utils.urls import resolve_url, url_has_filename
from ..utils.xml import find_text, parse_int, parse_xml
from .config import FogBugzConfig
from .constants import (
    API_DISCOVERY_FILENAME,
    API_ENDPOINT_FILENAME,
    SUPPORTED_API_VERSION,
)

logger = logging.getLogger("fogbugz-connector.fogbugz")

CommandArgs = Mapping[str, str] | Iterable[tuple[str, str]]


def build_query(command: str | None, args: CommandArgs | None = None) -> str:
    """Build the query string of an API request.

    Args:
        command: Command name; omitted from the query when empty
        args: Argument names and values, in the order they should appear

    Returns:
        The query string including the leading ``?``, or "" when there is
        nothing to send
    """
    pairs: list[tuple[str, str]] = []
    if command:
        pairs.append(("cmd", command))
    if args:
        items = args.items() if isinstance(args, Mapping) else args
        pairs.extend((key, "" if value is None else str(value)) for key, value in items)

    if not pairs:
        return ""
    return "?" + urlencode(pairs)


class FogBugzClient:
    """Base client for FogBugz API interactions.

    The client owns two pieces of state for its whole lifetime: the HTTP
    handle, created on first use and shared between threads, and the command
    endpoint URL, discovered once from the configured base URL.
    """

    def __init__(self, config: FogBugzConfig | None = None) -> None:
        """Initialize the FogBugz client with a given configuration.

        Args:
            config: FogBugz configuration object. If None, will be loaded from
                environment variables.

        Raises:
            ValueError: If configuration is missing from the environment.
        """
        if config is None:
            self.config = FogBugzConfig.from_env()
        else:
            self.config = config

        self.category_id_filter: list[str] = self.config.category_ids

        self._http_client: httpx.Client | None = None
        self._http_client_lock = threading.Lock()
        self._api_url: str | None = None

    @property
    def http_client(self) -> httpx.Client:
        """The shared HTTP handle, created on first access."""
        with self._http_client_lock:
            if self._http_client is None:
                self._http_client = httpx.Client(verify=self.config.ssl_verify)
            return self._http_client

    def invalidate_http_client(self) -> None:
        """Close the HTTP handle; the next request creates a fresh one."""
        with self._http_client_lock:
            if self._http_client is not None:
                self._http_client.close()
                self._http_client = None

    def close(self) -> None:
        """Close the HTTP handle."""
        self.invalidate_http_client()

    @property
    def api_url(self) -> str:
        """The command endpoint URL, resolved on first access."""
        if not self._api_url:
            self._api_url = self.resolve_api_url()
        return self._api_url

    def resolve_api_url(self) -> str:
        """Work out the command endpoint from the configured base URL.

        A base URL that already names the command endpoint is used as is.
        Anything else is treated as (the directory of) the discovery document,
        which advertises the minimum API version the server accepts and the
        endpoint URL.

        Returns:
            The absolute endpoint URL without a trailing ``?``

        Raises:
            FogBugzConnectionError: If the discovery document cannot be fetched
            FogBugzMalformedResponseError: If minversion or url is missing
            FogBugzUnsupportedVersionError: If the server needs a newer API
        """
        base_url = self.config.url.rstrip("?")
        if url_has_filename(base_url, API_ENDPOINT_FILENAME):
            logger.debug(f"Using configured FogBugz endpoint {base_url}")
            return base_url

        discovery_url = base_url
        if not url_has_filename(base_url, API_DISCOVERY_FILENAME):
            discovery_url = resolve_url(base_url, API_DISCOVERY_FILENAME)

        logger.debug(f"Discovering FogBugz endpoint from {discovery_url}")
        response = self._get_xml(discovery_url)

        min_version_text = find_text(response, "minversion")
        if not min_version_text:
            raise FogBugzMalformedResponseError(
                "Error parsing response: expected minversion element not found."
            )

        min_version = parse_int(min_version_text, "minversion")
        if min_version > SUPPORTED_API_VERSION:
            version = find_text(response, "version") or min_version_text
            logger.error(
                f"FogBugz requires API version {min_version}, "
                f"this connector supports {SUPPORTED_API_VERSION}"
            )
            raise FogBugzUnsupportedVersionError(version, min_version)

        endpoint = find_text(response, "url")
        if endpoint is None:
            raise FogBugzMalformedResponseError(
                "Error parsing response: expected url element not found."
            )

        api_url = resolve_url(base_url, endpoint.rstrip("?"))
        logger.info(f"Resolved FogBugz endpoint {api_url}")
        return api_url

    def invoke(
        self, command: str | None, args: CommandArgs | None = None
    ) -> ElementTree.Element:
        """Invoke a command on the FogBugz API.

        Args:
            command: Command to invoke, e.g. ``listProjects``
            args: Arguments to pass on the query string

        Returns:
            The ``<response>`` element of the reply

        Raises:
            FogBugzConnectionError: If the server cannot be reached
            FogBugzMalformedResponseError: If the reply is not XML
            FogBugzCommandError: If the reply contains an error element
        """
        url = self.api_url + build_query(command, args)
        logger.debug(f"Invoking FogBugz command {command!r}")

        response = self._get_xml(url)

        error = response.find("error")
        if error is not None:
            code_text = error.get("code", "")
            code: int | str = int(code_text) if code_text.isdigit() else code_text
            message = (error.text or "").strip()
            logger.error(f"FogBugz command {command!r} failed with code {code}: {message}")
            raise FogBugzCommandError(code, message)

        return response

    def _get_xml(self, url: str) -> ElementTree.Element:
        """Send a GET request and parse the XML body.

        Raises:
            FogBugzConnectionError: If the request fails at transport level
            FogBugzMalformedResponseError: If the body is not XML
        """
        try:
            response = self.http_client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error {e.response.status_code} from FogBugz")
            raise FogBugzConnectionError(
                f"HTTP error: {e.response.status_code} - {e.response.reason_phrase}"
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Request error reaching FogBugz: {str(e)}")
            raise FogBugzConnectionError(f"Request error: {str(e)}") from e

        return parse_xml(response.content)
