"""Helpers for reading FogBugz XML responses."""

from xml.etree import ElementTree

from ..exceptions import FogBugzMalformedResponseError


def parse_xml(content: str | bytes) -> ElementTree.Element:
    """Parse an XML response body.

    Args:
        content: Response body

    Returns:
        The root element, normally ``<response>``

    Raises:
        FogBugzMalformedResponseError: If the body is not well-formed XML
    """
    try:
        return ElementTree.fromstring(content)
    except ElementTree.ParseError as e:
        raise FogBugzMalformedResponseError(
            f"Error parsing response: invalid XML ({e})"
        ) from e


def find_text(
    node: ElementTree.Element, path: str, default: str | None = None
) -> str | None:
    """Get the text of a child element.

    Args:
        node: Element to search below
        path: ElementTree path of the child, e.g. ``project/sProject``
        default: Value returned when the child is absent

    Returns:
        The child's text ("" for an empty element), or the default
    """
    child = node.find(path)
    if child is None:
        return default
    return child.text or ""


def require_text(node: ElementTree.Element, path: str) -> str:
    """Get the text of a child element that must be present.

    Raises:
        FogBugzMalformedResponseError: If the child element is missing
    """
    text = find_text(node, path)
    if text is None:
        raise FogBugzMalformedResponseError(
            f"Error parsing response: expected {path} element not found."
        )
    return text


def parse_int(value: str | None, field: str) -> int:
    """Convert an id or flag from its XML text.

    Raises:
        FogBugzMalformedResponseError: If the value is not an integer
    """
    try:
        return int((value or "").strip())
    except ValueError as e:
        raise FogBugzMalformedResponseError(
            f"Error parsing response: {field} is not a number: {value!r}"
        ) from e


def parse_bool(value: str | None, field: str) -> bool:
    """Convert a FogBugz boolean ("true"/"false", occasionally "1"/"0").

    Raises:
        FogBugzMalformedResponseError: If the value is not a boolean
    """
    normalized = (value or "").strip().lower()
    if normalized in ("true", "1"):
        return True
    if normalized in ("false", "0"):
        return False
    raise FogBugzMalformedResponseError(
        f"Error parsing response: {field} is not a boolean: {value!r}"
    )
