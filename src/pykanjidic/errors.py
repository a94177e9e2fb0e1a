"""Defines the exceptions raised while loading KANJIDIC2 documents."""

from typing import Iterable, Optional


class ParseError(Exception):
    """Base class for every failure raised by :func:`pykanjidic.load`."""


class SourceError(ParseError):
    """Raised when the byte source cannot be read."""


class XmlError(ParseError):
    """Raised when the source is not well-formed XML."""


class MissingTagError(ParseError):
    """Raised when a required child element is absent.

    Args:
        tag: The name of the missing element.
    """

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f'missing required element <{tag}>')


class MissingAttributeError(ParseError):
    """Raised when a required attribute is absent.

    Args:
        tag: The name of the element missing the attribute.
        attribute: The name of the missing attribute.
    """

    def __init__(self, tag: str, attribute: str):
        self.tag = tag
        self.attribute = attribute
        super().__init__(
            f'missing required attribute "{attribute}" on <{tag}>'
        )


class MissingTextError(ParseError):
    """Raised when an element that must carry text is empty."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f'missing text content in <{tag}>')


class ParseEnumError(ParseError):
    """Raised when a value does not belong to its closed set.

    Args:
        value: The offending value.
        valids: Every accepted value, in documentation order.
    """

    def __init__(self, value: str, valids: Iterable[str]):
        self.value = value
        self.valids = list(valids)
        super().__init__(
            f'invalid value "{value}", expected one of: '
            + ', '.join(self.valids)
        )


class ParseIntError(ParseError):
    """Raised when text expected to be an unsigned integer is not one."""

    def __init__(self, text: Optional[str], reason: str = 'invalid integer'):
        self.text = text
        super().__init__(f'{reason}: {text!r}')


class RadicalLookupError(ParseError):
    """Raised when a radical index has no known radical."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f'no radical for index {index}')
