"""Defines element navigation and value conversion helpers for parsers."""

from typing import Iterator, Optional

from lxml import etree

from ..errors import (
    MissingAttributeError,
    MissingTagError,
    MissingTextError,
    ParseIntError,
)


def tag_name(elem: etree.Element) -> str:
    """Returns the local tag name of `elem`, without any namespace."""

    return etree.QName(elem).localname


def children(elem: etree.Element) -> Iterator[etree.Element]:
    """Yields the child elements of `elem`, skipping comments and PIs."""

    return elem.iterchildren(tag=etree.Element)


def children_named(elem: etree.Element, tag: str) -> Iterator[etree.Element]:
    """Yields the child elements of `elem` whose tag name is `tag`."""

    return (child for child in children(elem) if tag_name(child) == tag)


def find_child(elem: etree.Element, tag: str) -> etree.Element:
    """Returns the first child of `elem` named `tag`.

    Args:
        elem: The parent element.
        tag: The tag name to find.

    Returns:
        The child element.

    Raises:
        MissingTagError: If no child is named `tag`.
    """

    for child in children_named(elem, tag):
        return child
    raise MissingTagError(tag)


def get_attr(elem: etree.Element, name: str) -> str:
    """Returns attribute `name` of `elem`.

    Raises:
        MissingAttributeError: If `elem` has no such attribute.
    """

    value = elem.get(name)
    if value is None:
        raise MissingAttributeError(tag_name(elem), name)
    return value


def get_text(elem: etree.Element) -> str:
    """Returns the text content of `elem`.

    Raises:
        MissingTextError: If `elem` has no text.
    """

    if not elem.text:
        raise MissingTextError(tag_name(elem))
    return elem.text


def parse_uint(text: Optional[str], minimum: int = 0) -> int:
    """Parses `text` as an unsigned decimal integer.

    Args:
        text: The text to parse.
        minimum: The smallest accepted value.

    Returns:
        The parsed integer.

    Raises:
        ParseIntError: If `text` is not a decimal number of at least
            `minimum`.
    """

    if text is None or not (text.isascii() and text.isdigit()):
        raise ParseIntError(text)
    value = int(text)
    if value < minimum:
        raise ParseIntError(text, f'value below {minimum}')
    return value


def get_uint(elem: etree.Element, minimum: int = 0) -> int:
    """Returns the text content of `elem` parsed as an unsigned integer."""

    return parse_uint(get_text(elem), minimum)
