class FogBugzError(Exception):
    """Base exception for FogBugz connector errors."""

    pass


class FogBugzConnectionError(FogBugzError):
    """Raised when the FogBugz server cannot be reached."""

    pass


class FogBugzServiceUnavailableError(FogBugzConnectionError):
    """Raised by connection validation when FogBugz is not reachable."""

    pass


class FogBugzMalformedResponseError(FogBugzError):
    """Raised when an expected element is missing from an API response."""

    pass


class FogBugzAuthenticationError(FogBugzMalformedResponseError):
    """Raised when a logon response does not carry a session token."""

    pass


class FogBugzUnsupportedVersionError(FogBugzError):
    """Raised when the server requires a newer API than this connector speaks."""

    def __init__(self, version: str, min_version: int) -> None:
        self.version = version
        self.min_version = min_version
        super().__init__(
            f"FogBugz version {version} is not supported by this provider. "
            "Please contact support."
        )


class FogBugzCommandError(FogBugzError):
    """Raised when an API response contains an error element."""

    def __init__(self, code: int | str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"FogBugz returned error code {code}: {message}")


class FogBugzInvalidStatusError(FogBugzError, ValueError):
    """Raised when a status name is not defined on the FogBugz server."""

    def __init__(self, status: str, valid_statuses: list[str]) -> None:
        self.status = status
        self.valid_statuses = valid_statuses
        super().__init__(
            f"{status} is not a valid FogBugz status. Expected one of: "
            + "; ".join(valid_statuses)
        )
