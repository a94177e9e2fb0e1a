"""Shared fixtures for the pykanjidic tests."""

import gzip

import pytest

from lxml import etree

SAMPLE_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE kanjidic2 [
<!ELEMENT kanjidic2 (header,character*)>
]>
<kanjidic2>
<header>
<file_version>4</file_version>
<database_version>2024-001</database_version>
<date_of_creation>2024-01-01</date_of_creation>
</header>
<!-- Entry for Kanji: 日 -->
<character>
<literal>日</literal>
<codepoint>
<cp_value cp_type="ucs">65e5</cp_value>
<cp_value cp_type="jis208">1-38-92</cp_value>
</codepoint>
<radical>
<rad_value rad_type="classical">72</rad_value>
</radical>
<misc>
<grade>1</grade>
<stroke_count>4</stroke_count>
<stroke_count>3</stroke_count>
<freq>1</freq>
<jlpt>4</jlpt>
</misc>
<dic_number>
<dic_ref dr_type="nelson_c">2097</dic_ref>
<dic_ref dr_type="heisig">12</dic_ref>
<dic_ref dr_type="moro" m_vol="5" m_page="0429">13733</dic_ref>
</dic_number>
<query_code>
<q_code qc_type="skip">3-3-1</q_code>
</query_code>
<reading_meaning>
<rmgroup>
<reading r_type="pinyin">ri4</reading>
<reading r_type="ja_on" r_status="jy">ニチ</reading>
<reading r_type="ja_on" on_type="go">ジツ</reading>
<reading r_type="ja_kun" r_status="jy">ひ</reading>
<meaning>day</meaning>
<meaning>sun</meaning>
<meaning m_lang="fr">soleil</meaning>
</rmgroup>
<nanori>あき</nanori>
<nanori>か</nanori>
</reading_meaning>
</character>
<!-- Entry for Kanji: 月 -->
<character>
<literal>月</literal>
<codepoint>
<cp_value cp_type="ucs">6708</cp_value>
</codepoint>
<radical>
<rad_value rad_type="classical">74</rad_value>
</radical>
<misc>
<grade>8</grade>
<stroke_count>4</stroke_count>
</misc>
<reading_meaning>
<rmgroup>
<reading r_type="ja_kun">つき</reading>
<meaning>moon</meaning>
<meaning>month</meaning>
</rmgroup>
</reading_meaning>
</character>
<character>
<literal>亀</literal>
<codepoint>
<cp_value cp_type="ucs">4e80</cp_value>
</codepoint>
<radical>
<rad_value rad_type="classical">213</rad_value>
<rad_value rad_type="nelson_c">5</rad_value>
</radical>
<misc>
<grade>9</grade>
<stroke_count>11</stroke_count>
</misc>
</character>
</kanjidic2>
"""


def element(xml: str) -> etree.Element:
    """Returns the element parsed from the text `xml`."""

    return etree.fromstring(xml.encode('utf-8'))


def stub_lookup(index: int) -> str:
    """Radical lookup returning the index formatted as ``rad<index>``."""

    return f'rad{index}'


def character_xml(misc: str = '<stroke_count>4</stroke_count>',
                  extra: str = '') -> str:
    """Returns the XML of a minimal ``<character>`` element."""

    return (
        '<character>'
        '<literal>日</literal>'
        '<codepoint><cp_value cp_type="ucs">65e5</cp_value></codepoint>'
        '<radical><rad_value rad_type="classical">72</rad_value></radical>'
        f'<misc>{misc}</misc>'
        f'{extra}'
        '</character>'
    )


def document_xml(*characters: str) -> bytes:
    """Returns a KANJIDIC2 document containing `characters`."""

    return (
        '<kanjidic2>'
        '<header>'
        '<file_version>4</file_version>'
        '<database_version>1.0</database_version>'
        '<date_of_creation>2024-01-01</date_of_creation>'
        '</header>'
        + ''.join(characters) +
        '</kanjidic2>'
    ).encode('utf-8')


@pytest.fixture
def sample_bytes() -> bytes:
    return SAMPLE_XML.encode('utf-8')


@pytest.fixture
def sample_file(tmp_path, sample_bytes):
    path = tmp_path / 'kanjidic2.xml'
    path.write_bytes(sample_bytes)
    return path


@pytest.fixture
def sample_gz_file(tmp_path, sample_bytes):
    path = tmp_path / 'kanjidic2.xml.gz'
    with gzip.open(path, 'wb') as gzf:
        gzf.write(sample_bytes)
    return path
