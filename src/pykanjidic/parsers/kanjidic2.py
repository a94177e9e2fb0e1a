"""Defines parser functions for KANJIDIC2 database XML files.

See `<http://www.edrdg.org/wiki/index.php/KANJIDIC_Project>`_
for more information.
"""

from typing import Dict, List, Optional, Tuple

from lxml import etree

from ..errors import MissingTagError, ParseEnumError
from ..models import (
    Codepoint,
    DicRef,
    DicRefType,
    Entry,
    Grade,
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
from ..radicals import RadicalLookup, index_radical
from .util import (
    children,
    children_named,
    find_child,
    get_attr,
    get_text,
    get_uint,
    parse_uint,
    tag_name,
)

ROOT = 'kanjidic2'
HEADER = 'header'
CHARACTER = 'character'

# Accepted <grade> values
GRADES: Dict[int, Grade] = {
    **{year: Grade.kyouiku(year) for year in range(1, 7)},
    8: Grade.jouyou(),
    9: Grade.jinmeiyou(),
    10: Grade.jouyou_variant(),
}

# Accepted on_type values; "unspecified" is only ever a default
ONYOMI_TYPES: Dict[str, OnyomiType] = {
    'kan': OnyomiType.kan,
    'go': OnyomiType.go,
    'tou': OnyomiType.tou,
    "kan'you": OnyomiType.kanyou,
}


def parse_enum(value: str, enum):
    """Returns the member of `enum` whose value is `value`.

    Raises:
        ParseEnumError: If no member matches, listing every member value.
    """

    try:
        return enum(value)
    except ValueError:
        raise ParseEnumError(value, [member.value for member in enum]) from None


def get_header(header: etree.Element) -> Header:
    """Returns :class:`~pykanjidic.models.Header` for `header`.

    Args:
        header: The ``<header>`` element to parse.

    Returns:
        The header object.
    """

    return Header(
        file_version=get_uint(find_child(header, 'file_version')),
        database_version=get_text(find_child(header, 'database_version')),
        creation_date=get_text(find_child(header, 'date_of_creation')),
    )


def get_codepoint(cp_value: etree.Element) -> Codepoint:
    """Returns :class:`~pykanjidic.models.Codepoint` for `cp_value`."""

    return Codepoint(
        standard=get_attr(cp_value, 'cp_type'),
        value=get_text(cp_value),
    )


def get_radical(
    rad_value: etree.Element,
    radical_lookup: RadicalLookup = index_radical,
) -> Radical:
    """Returns :class:`~pykanjidic.models.Radical` for `rad_value`.

    Args:
        rad_value: The ``<rad_value>`` element to parse.
        radical_lookup: Resolves the radical number to its value.

    Returns:
        The radical object.
    """

    classification = parse_enum(get_attr(rad_value, 'rad_type'), RadicalType)
    return Radical(
        classification=classification,
        value=radical_lookup(get_uint(rad_value)),
    )


def get_grade(grade: etree.Element) -> Grade:
    """Returns :class:`~pykanjidic.models.Grade` for `grade`.

    Args:
        grade: The ``<grade>`` element to parse.

    Returns:
        The grade object.

    Raises:
        ParseEnumError: If the grade number is not a known grade.
    """

    number = get_uint(grade)
    if number not in GRADES:
        raise ParseEnumError(str(number), [str(key) for key in GRADES])
    return GRADES[number]


def get_misc(misc: etree.Element) -> dict:
    """Returns the :class:`~pykanjidic.models.Entry` fields in `misc`.

    Only the first ``<grade>``, ``<freq>`` and ``<jlpt>`` are kept.

    Args:
        misc: The ``<misc>`` element to parse.

    Returns:
        Dictionary of ``stroke_count``, ``stroke_miscounts``, ``grade``,
        ``freq`` and ``old_jlpt``.
    """

    stroke_counts: List[int] = []
    fields = dict(grade=None, freq=None, old_jlpt=None)
    for elem in children(misc):
        tag = tag_name(elem)
        if tag == 'stroke_count':
            stroke_counts.append(get_uint(elem, minimum=1))
        elif tag == 'grade':
            grade = get_grade(elem)
            if fields['grade'] is None:
                fields['grade'] = grade
        elif tag in ('freq', 'jlpt'):
            key = 'freq' if tag == 'freq' else 'old_jlpt'
            value = get_uint(elem)
            if fields[key] is None:
                fields[key] = value

    if not stroke_counts:
        raise MissingTagError('stroke_count')

    return dict(
        stroke_count=stroke_counts[0],
        stroke_miscounts=stroke_counts[1:],
        **fields,
    )


def get_dic_ref(dic_ref: etree.Element) -> DicRef:
    """Returns :class:`~pykanjidic.models.DicRef` for `dic_ref`.

    Morohashi references also carry the optional ``m_vol`` and ``m_page``
    attributes.

    Args:
        dic_ref: The ``<dic_ref>`` element to parse.

    Returns:
        The dictionary reference object.
    """

    reference = get_text(dic_ref)
    dr_type = parse_enum(get_attr(dic_ref, 'dr_type'), DicRefType)
    if dr_type is not DicRefType.moro:
        return DicRef(type=dr_type, reference=reference)

    volume = dic_ref.get('m_vol')
    page = dic_ref.get('m_page')
    return DicRef(
        type=dr_type,
        reference=reference,
        volume=None if volume is None else parse_uint(volume),
        page=None if page is None else parse_uint(page),
    )


def get_dic_refs(dic_number: etree.Element) -> List[DicRef]:
    """Returns list of :class:`~pykanjidic.models.DicRef` for `dic_number`.

    Args:
        dic_number: The ``<dic_number>`` element to parse.

    Returns:
        A list of dictionary reference objects.
    """

    return [get_dic_ref(elem) for elem in children_named(dic_number, 'dic_ref')]


def get_reading(reading: etree.Element) -> Reading:
    """Returns :class:`~pykanjidic.models.Reading` for `reading`.

    A Japanese reading is jouyou-approved whenever it has an ``r_status``
    attribute, whatever its value.

    Args:
        reading: The ``<reading>`` element to parse.

    Returns:
        The reading object.
    """

    value = get_text(reading)
    r_type = parse_enum(get_attr(reading, 'r_type'), ReadingType)
    if r_type not in (ReadingType.ja_on, ReadingType.ja_kun):
        return Reading(value=value, type=r_type)

    jouyou_approved = reading.get('r_status') is not None
    if r_type is ReadingType.ja_kun:
        return Reading(
            value=value,
            type=r_type,
            jouyou_approved=jouyou_approved,
        )

    on_type = reading.get('on_type')
    if on_type is None:
        onyomi_type = OnyomiType.unspecified
    elif on_type in ONYOMI_TYPES:
        onyomi_type = ONYOMI_TYPES[on_type]
    else:
        raise ParseEnumError(on_type, list(ONYOMI_TYPES))

    return Reading(
        value=value,
        type=r_type,
        jouyou_approved=jouyou_approved,
        onyomi_type=onyomi_type,
    )


def get_meaning(meaning: etree.Element) -> Meaning:
    """Returns :class:`~pykanjidic.models.Meaning` for `meaning`."""

    return Meaning(
        content=get_text(meaning),
        language=meaning.get('m_lang', 'en'),
    )


def get_rmgroup(rmgroup: etree.Element) -> ReadingMeaning:
    """Returns :class:`~pykanjidic.models.ReadingMeaning` for `rmgroup`.

    Args:
        rmgroup: The ``<rmgroup>`` element to parse.

    Returns:
        The reading/meaning group object.
    """

    readings = []
    meanings = []
    for elem in children(rmgroup):
        tag = tag_name(elem)
        if tag == 'reading':
            readings.append(get_reading(elem))
        elif tag == 'meaning':
            meanings.append(get_meaning(elem))

    return ReadingMeaning(readings=readings, meanings=meanings)


def get_reading_meanings(
    reading_meaning: etree.Element,
) -> Tuple[List[ReadingMeaning], List[str]]:
    """Returns the groups and nanori readings in `reading_meaning`.

    Args:
        reading_meaning: The ``<reading_meaning>`` element to parse.

    Returns:
        A tuple of the list of reading/meaning groups and the list of
        nanori readings.
    """

    groups = []
    nanori = []
    for elem in children(reading_meaning):
        tag = tag_name(elem)
        if tag == 'rmgroup':
            groups.append(get_rmgroup(elem))
        elif tag == 'nanori':
            nanori.append(get_text(elem))

    return groups, nanori


def get_entry(
    character: etree.Element,
    radical_lookup: RadicalLookup = index_radical,
) -> Entry:
    """Returns :class:`~pykanjidic.models.Entry` for `character`.

    Unrecognized children are skipped. ``<literal>``, ``<codepoint>``,
    ``<radical>`` and ``<misc>`` are required.

    Args:
        character: The ``<character>`` element to parse.
        radical_lookup: Resolves radical numbers to their values.

    Returns:
        The entry object.

    Raises:
        MissingTagError: If a required child is missing.
    """

    literal: Optional[str] = None
    codepoints: Optional[List[Codepoint]] = None
    radicals: Optional[List[Radical]] = None
    misc: Optional[dict] = None
    optional = {}

    for elem in children(character):
        tag = tag_name(elem)
        if tag == 'literal':
            literal = get_text(elem)
        elif tag == 'codepoint':
            codepoints = [get_codepoint(cp)
                          for cp in children_named(elem, 'cp_value')]
        elif tag == 'radical':
            radicals = [get_radical(rad, radical_lookup)
                        for rad in children_named(elem, 'rad_value')]
        elif tag == 'misc':
            misc = get_misc(elem)
        elif tag == 'dic_number':
            optional['dic_refs'] = get_dic_refs(elem)
        elif tag == 'reading_meaning':
            groups, nanori = get_reading_meanings(elem)
            optional['reading_meanings'] = groups
            optional['nanori_readings'] = nanori

    if literal is None:
        raise MissingTagError('literal')
    if codepoints is None:
        raise MissingTagError('codepoint')
    if radicals is None:
        raise MissingTagError('radical')
    if misc is None:
        raise MissingTagError('misc')

    return Entry(
        literal=literal,
        codepoints=codepoints,
        radicals=radicals,
        **misc,
        **optional,
    )


def get_kanjidic(
    root: etree.Element,
    radical_lookup: RadicalLookup = index_radical,
) -> Kanjidic:
    """Returns :class:`~pykanjidic.models.Kanjidic` for `root`.

    Args:
        root: The ``<kanjidic2>`` element to parse.
        radical_lookup: Resolves radical numbers to their values.

    Returns:
        The document object.

    Raises:
        MissingTagError: If `root` is not ``<kanjidic2>`` or has no
            ``<header>``.
    """

    if tag_name(root) != ROOT:
        raise MissingTagError(ROOT)

    header = get_header(find_child(root, HEADER))
    entries = [get_entry(character, radical_lookup)
               for character in children_named(root, CHARACTER)]

    return Kanjidic(
        file_version=header.file_version,
        database_version=header.database_version,
        creation_date=header.creation_date,
        entries=entries,
    )
