"""Decodes the KANJIDIC2 kanji dictionary into immutable models."""

from .errors import (
    MissingAttributeError,
    MissingTagError,
    MissingTextError,
    ParseEnumError,
    ParseError,
    ParseIntError,
    RadicalLookupError,
    SourceError,
    XmlError,
)
from .loader import load, loads
from .models import (
    Codepoint,
    DicRef,
    DicRefType,
    Entry,
    Grade,
    GradeType,
    Header,
    Kanjidic,
    Meaning,
    OnyomiType,
    Radical,
    RadicalType,
    Reading,
    ReadingMeaning,
    ReadingType,
)
