"""Defines predicates and accessors for querying a loaded dictionary.

The predicates plug into :meth:`~pykanjidic.models.Kanjidic.filter` and
:meth:`~pykanjidic.models.Kanjidic.filter_meaning`, e.g.::

    kanjidic.filter_meaning(meaning_contains('sun'))
    kanjidic.filter(has_grade(GradeType.jouyou))
"""

from typing import Callable, List, Optional

from .models import Entry, GradeType, Meaning, ReadingType


def meaning_contains(
    text: str,
    language: Optional[str] = 'en',
) -> Callable[[Meaning], bool]:
    """Returns a predicate matching meanings that contain `text`.

    Args:
        text: The case-insensitive substring to look for.
        language: The meaning language to match, or ``None`` for any.

    Returns:
        A meaning predicate.
    """

    needle = text.casefold()

    def predicate(meaning: Meaning) -> bool:
        if language is not None and meaning.language != language:
            return False
        return needle in meaning.content.casefold()

    return predicate


def has_grade(*grade_types: GradeType) -> Callable[[Entry], bool]:
    """Returns a predicate matching entries graded as any of `grade_types`."""

    def predicate(entry: Entry) -> bool:
        return entry.grade is not None and entry.grade.type in grade_types

    return predicate


def has_reading(value: str) -> Callable[[Entry], bool]:
    """Returns a predicate matching entries with the reading `value`.

    Nanori readings are included.
    """

    def predicate(entry: Entry) -> bool:
        return (value in entry.nanori_readings or
                any(reading.value == value for reading in entry.readings))

    return predicate


def jouyou(entry: Entry) -> bool:
    """Returns ``True`` iff `entry` is one of the jouyou kanji."""

    return entry.grade is not None and entry.grade.type in (
        GradeType.kyouiku,
        GradeType.jouyou,
    )


def readings_of(entry: Entry, *types: ReadingType) -> List[str]:
    """Returns the reading values of `entry` of any of `types`.

    All readings are returned when no type is given.
    """

    return [reading.value for reading in entry.readings
            if not types or reading.type in types]


def meanings_of(entry: Entry, language: Optional[str] = 'en') -> List[str]:
    """Returns the meanings of `entry` in `language` (``None`` for any)."""

    return [meaning.content for meaning in entry.meanings
            if language is None or meaning.language == language]
