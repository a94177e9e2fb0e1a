"""Tests for pykanjidic.models."""

import pytest

from pydantic import ValidationError

from pykanjidic import loads
from pykanjidic.models import Entry, Grade, GradeType, Meaning


@pytest.fixture
def kanjidic(sample_bytes):
    return loads(sample_bytes)


class TestFindLiteral:

    def test_found(self, kanjidic):
        assert kanjidic.find_literal('月').literal == '月'

    def test_absent(self, kanjidic):
        assert kanjidic.find_literal('火') is None


class TestFilter:

    def test_preserves_document_order(self, kanjidic):
        entries = kanjidic.filter(lambda entry: entry.stroke_count == 4)
        assert [entry.literal for entry in entries] == ['日', '月']

    def test_returns_fresh_list(self, kanjidic):
        first = kanjidic.filter(lambda entry: True)
        first.clear()
        assert len(kanjidic.filter(lambda entry: True)) == 3


class TestFilterMeaning:

    def test_never_matching(self, kanjidic):
        assert kanjidic.filter_meaning(lambda meaning: False) == []

    def test_substring(self, kanjidic):
        entries = kanjidic.filter_meaning(lambda meaning: 'mon' in meaning.content)
        assert [entry.literal for entry in entries] == ['月']

    def test_any_language(self, kanjidic):
        entries = kanjidic.filter_meaning(
            lambda meaning: meaning.language == 'fr',
        )
        assert [entry.literal for entry in entries] == ['日']

    def test_entry_without_meanings(self, kanjidic):
        entries = kanjidic.filter_meaning(lambda meaning: True)
        assert '亀' not in [entry.literal for entry in entries]


class TestImmutability:

    def test_document_is_frozen(self, kanjidic):
        with pytest.raises(ValidationError):
            kanjidic.file_version = 5

    def test_entry_is_frozen(self, kanjidic):
        with pytest.raises(ValidationError):
            kanjidic.entries[0].literal = '火'

    def test_collections_are_tuples(self, kanjidic):
        entry = kanjidic.entries[0]
        assert isinstance(kanjidic.entries, tuple)
        assert isinstance(entry.reading_meanings, tuple)
        assert isinstance(entry.reading_meanings[0].meanings, tuple)


class TestEntryInvariants:

    def test_empty_literal_rejected(self):
        with pytest.raises(ValidationError):
            Entry(literal='', codepoints=[], radicals=[], stroke_count=1)

    def test_zero_stroke_count_rejected(self):
        with pytest.raises(ValidationError):
            Entry(literal='日', codepoints=[], radicals=[], stroke_count=0)

    def test_meanings_across_groups(self, kanjidic):
        entry = kanjidic.find_literal('日')
        assert Meaning(content='soleil', language='fr') in entry.meanings


def test_grade_constructors():
    assert Grade.kyouiku(3) == Grade(type=GradeType.kyouiku, year=3)
    assert Grade.jouyou().year is None
