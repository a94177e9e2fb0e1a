"""Defines the KANJIDIC2 document loader."""

import gzip
import logging
import os

from typing import BinaryIO, Union

from lxml import etree

from .errors import SourceError, XmlError
from .models import Kanjidic
from .parsers import kanjidic2
from .radicals import RadicalLookup, index_radical

logger = logging.getLogger('pykanjidic')

Source = Union[bytes, str, os.PathLike, BinaryIO]


def read_source(source: Source) -> bytes:
    """Returns the bytes of `source`.

    Args:
        source: Raw bytes, a file object (text-mode files are re-encoded as
            UTF-8), or a path to a KANJIDIC2 file (gzip-compressed if its
            name ends with ``.gz``).

    Returns:
        The document bytes.

    Raises:
        SourceError: If `source` cannot be read.
    """

    if isinstance(source, (bytes, bytearray)):
        return bytes(source)

    try:
        if hasattr(source, 'read'):
            data = source.read()
            # Text-mode files yield str
            return data.encode('utf-8') if isinstance(data, str) else data

        path = os.fspath(source)
        opener = gzip.open if path.endswith('.gz') else open
        with opener(path, 'rb') as xmlf:
            return xmlf.read()
    except (OSError, EOFError, UnicodeDecodeError) as exc:
        raise SourceError(f'cannot read {source!r}: {exc}') from exc


def loads(
    data: bytes,
    radical_lookup: RadicalLookup = index_radical,
) -> Kanjidic:
    """Decodes the KANJIDIC2 document in `data`.

    Args:
        data: The document bytes.
        radical_lookup: Resolves radical numbers to their values.

    Returns:
        The fully populated document.

    Raises:
        ParseError: On the first structural or validation problem; no
            partial document is ever returned.
    """

    parser = etree.XMLParser(
        remove_comments=True,
        no_network=True,
        huge_tree=True,
    )
    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as exc:
        raise XmlError(str(exc)) from exc

    logger.debug('Parsing KANJIDIC2 tree (root = <%s>)', root.tag)
    kanjidic = kanjidic2.get_kanjidic(root, radical_lookup)
    logger.info(
        'Loaded %s entries (file version %s, database version %s)',
        len(kanjidic.entries),
        kanjidic.file_version,
        kanjidic.database_version,
    )
    return kanjidic


def load(
    source: Source,
    radical_lookup: RadicalLookup = index_radical,
) -> Kanjidic:
    """Reads and decodes the KANJIDIC2 document in `source`.

    Args:
        source: Raw bytes, a binary file object, or a path to a KANJIDIC2
            file (gzip-compressed if its name ends with ``.gz``).
        radical_lookup: Resolves radical numbers to their values.

    Returns:
        The fully populated document.
    """

    if not isinstance(source, (bytes, bytearray)):
        logger.info('Reading KANJIDIC2 XML (source = %s)', source)
    return loads(read_source(source), radical_lookup)
