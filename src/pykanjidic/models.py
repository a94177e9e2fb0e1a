"""Defines the models of a decoded KANJIDIC2 document."""

from enum import Enum
from typing import Callable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """Base for every decoded record; records never change once built."""
    model_config = ConfigDict(frozen=True)


class Codepoint(Record):
    """Model for a ``<cp_value>`` element."""
    standard: str
    value: str


class RadicalType(Enum):
    """Enumeration for recognized radical classifications."""
    classical = 'classical'
    nelson_c = 'nelson_c'


class Radical(Record):
    """Model for a ``<rad_value>`` element."""
    classification: RadicalType
    value: str


class GradeType(Enum):
    """Enumeration for recognized grade classifications."""
    kyouiku = 'kyouiku'
    jouyou = 'jouyou'
    jinmeiyou = 'jinmeiyou'
    jouyou_variant = 'jouyou_variant'


class Grade(Record):
    """Model for a ``<grade>`` element.

    ``year`` is the school year (1 to 6) of a kyouiku kanji and ``None`` for
    every other grade type.
    """
    type: GradeType
    year: Optional[int] = None

    @classmethod
    def kyouiku(cls, year: int) -> 'Grade':
        return cls(type=GradeType.kyouiku, year=year)

    @classmethod
    def jouyou(cls) -> 'Grade':
        return cls(type=GradeType.jouyou)

    @classmethod
    def jinmeiyou(cls) -> 'Grade':
        return cls(type=GradeType.jinmeiyou)

    @classmethod
    def jouyou_variant(cls) -> 'Grade':
        return cls(type=GradeType.jouyou_variant)


class ReadingType(Enum):
    """Enumeration for recognized reading types."""
    pinyin = 'pinyin'
    korean_r = 'korean_r'
    korean_h = 'korean_h'
    vietnam = 'vietnam'
    ja_on = 'ja_on'
    ja_kun = 'ja_kun'


class OnyomiType(Enum):
    """Enumeration for the borrowing origin of an on'yomi."""
    kan = 'kan'
    go = 'go'
    tou = 'tou'
    kanyou = "kan'you"
    unspecified = 'unspecified'


class Reading(Record):
    """Model for a ``<reading>`` element.

    ``jouyou_approved`` and ``onyomi_type`` only carry information for
    Japanese readings; ``onyomi_type`` is ``None`` unless ``type`` is
    :attr:`ReadingType.ja_on`.
    """
    value: str
    type: ReadingType
    jouyou_approved: bool = False
    onyomi_type: Optional[OnyomiType] = None


class Meaning(Record):
    """Model for a ``<meaning>`` element."""
    content: str
    language: str = 'en'


class ReadingMeaning(Record):
    """Model for a ``<rmgroup>`` element."""
    readings: Tuple[Reading, ...] = ()
    meanings: Tuple[Meaning, ...] = ()


class DicRefType(Enum):
    """Enumeration for recognized dictionary reference types."""
    nelson_c = 'nelson_c'
    nelson_n = 'nelson_n'
    halpern_njecd = 'halpern_njecd'
    halpern_kkd = 'halpern_kkd'
    halpern_kkld = 'halpern_kkld'
    halpern_kkld_2ed = 'halpern_kkld_2ed'
    heisig = 'heisig'
    heisig6 = 'heisig6'
    gakken = 'gakken'
    oneill_names = 'oneill_names'
    oneill_kk = 'oneill_kk'
    moro = 'moro'
    henshall = 'henshall'
    sh_kk = 'sh_kk'
    sh_kk2 = 'sh_kk2'
    sakade = 'sakade'
    jf_cards = 'jf_cards'
    henshall3 = 'henshall3'
    tutt_cards = 'tutt_cards'
    crowley = 'crowley'
    kanji_in_context = 'kanji_in_context'
    busy_people = 'busy_people'
    kodansha_compact = 'kodansha_compact'
    maniette = 'maniette'


class DicRef(Record):
    """Model for a ``<dic_ref>`` element.

    ``volume`` and ``page`` are only read for Morohashi references.
    """
    type: DicRefType
    reference: str
    volume: Optional[int] = None
    page: Optional[int] = None


class Header(Record):
    """Model for the ``<header>`` element."""
    file_version: int
    database_version: str
    creation_date: str


class Entry(Record):
    """Model for a ``<character>`` element."""
    literal: str = Field(min_length=1)
    codepoints: Tuple[Codepoint, ...]
    radicals: Tuple[Radical, ...]
    stroke_count: int = Field(ge=1)
    stroke_miscounts: Tuple[int, ...] = ()
    grade: Optional[Grade] = None
    freq: Optional[int] = None
    old_jlpt: Optional[int] = None
    dic_refs: Tuple[DicRef, ...] = ()
    reading_meanings: Tuple[ReadingMeaning, ...] = ()
    nanori_readings: Tuple[str, ...] = ()

    @property
    def meanings(self) -> List[Meaning]:
        """All meanings of the entry across its reading/meaning groups."""
        return [meaning for group in self.reading_meanings
                for meaning in group.meanings]

    @property
    def readings(self) -> List[Reading]:
        """All readings of the entry across its reading/meaning groups."""
        return [reading for group in self.reading_meanings
                for reading in group.readings]


class Kanjidic(Record):
    """Model for the ``<kanjidic2>`` document.

    Entries keep document order. The query methods below never modify the
    document and always return a new list.
    """
    file_version: int
    database_version: str
    creation_date: str
    entries: Tuple[Entry, ...] = ()

    def find_literal(self, literal: str) -> Optional[Entry]:
        """Returns the first entry for `literal`.

        Args:
            literal: The character to look up.

        Returns:
            The entry (or ``None`` if `literal` is not in the document).
        """

        for entry in self.entries:
            if entry.literal == literal:
                return entry
        return None

    def filter(self, predicate: Callable[[Entry], bool]) -> List[Entry]:
        """Returns the entries satisfying `predicate`, in document order."""

        return [entry for entry in self.entries if predicate(entry)]

    def filter_meaning(
        self,
        predicate: Callable[[Meaning], bool],
    ) -> List[Entry]:
        """Returns the entries having a meaning that satisfies `predicate`.

        Args:
            predicate: Test applied to every meaning of every
                reading/meaning group.

        Returns:
            A list of entries, in document order.
        """

        return [entry for entry in self.entries
                if any(predicate(meaning) for meaning in entry.meanings)]
