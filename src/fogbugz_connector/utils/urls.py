"""URL-related utility functions for the FogBugz connector."""

from urllib.parse import urljoin, urlparse


def url_has_filename(url: str, filename: str) -> bool:
    """Check whether a URL's path ends with the given file name.

    The comparison ignores case, as IIS-hosted FogBugz servers do.

    Args:
        url: The URL to check
        filename: File name such as ``api.asp``

    Returns:
        True if the URL path ends with the file name
    """
    if not url:
        return False
    return urlparse(url).path.lower().endswith(filename.lower())


def resolve_url(base_url: str, reference: str) -> str:
    """Resolve a relative or absolute reference against a base URL.

    Args:
        base_url: The URL the reference is relative to
        reference: Relative path, query or absolute URL

    Returns:
        The absolute URL
    """
    return urljoin(base_url, reference)
