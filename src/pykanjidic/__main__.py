"""The pykanjidic main script."""

import argparse
import logging
import sys

from typing import List, Optional, TextIO

from . import queries
from .errors import ParseError
from .loader import load
from .models import Entry, GradeType, Kanjidic, ReadingType

logger = logging.getLogger('pykanjidic')


def get_parser() -> argparse.ArgumentParser:
    """Gets an argument parser for the main program.

    Returns:
        The argument parser.
    """

    parser = argparse.ArgumentParser(description='KANJIDIC2 dictionary lookup')
    parser.add_argument('xml_file', help='KANJIDIC2 XML file (or .xml.gz)')
    parser.add_argument('-l', '--literal', action='append', default=[],
                        help='Kanji to look up (repeatable)')
    parser.add_argument('-m', '--meaning',
                        help='Find kanji having a meaning containing text')
    parser.add_argument('--language', default='en',
                        help='Meaning language for lookups and output')
    parser.add_argument('-g', '--grade', action='append', default=[],
                        choices=[grade.value for grade in GradeType],
                        help='Keep only kanji of this grade (repeatable)')
    parser.add_argument('--limit', type=int, default=None,
                        help='Print at most this many entries')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('-d', '--debug', action='store_true',
                       help='Display debug log messages')
    group.add_argument('-s', '--silent', action='store_true',
                       help='Display only warning log messages')

    return parser


def configure_logger(
    level: str,
    log: logging.Logger,
):
    """Configures `log` to use logging level `level`.

    Args:
        level: The logging level to use.
        log: The logger to configure.
    """

    # Set the log level
    log.setLevel(level)

    # Create the handler and set its level
    handler = logging.StreamHandler()
    handler.setLevel(level)

    # Create the formatter and add it to the handler
    formatter = logging.Formatter(fmt='%(levelname)s: %(message)s')
    handler.setFormatter(formatter)

    # Add the configured handler to the logger
    log.addHandler(handler)


def format_entry(entry: Entry, language: str = 'en') -> str:
    """Formats `entry` as a single tab-separated summary line.

    Args:
        entry: The entry to format.
        language: The language of the meanings to show.

    Returns:
        The summary line.
    """

    grade = entry.grade.type.value if entry.grade else '-'
    if entry.grade and entry.grade.year:
        grade = f'{grade}{entry.grade.year}'
    on = queries.readings_of(entry, ReadingType.ja_on)
    kun = queries.readings_of(entry, ReadingType.ja_kun)
    return '\t'.join([
        entry.literal,
        str(entry.stroke_count),
        grade,
        '、'.join(on + kun) or '-',
        '; '.join(queries.meanings_of(entry, language)) or '-',
    ])


def select(kanjidic: Kanjidic, args: argparse.Namespace) -> List[Entry]:
    """Returns the entries of `kanjidic` matching the query in `args`."""

    if args.literal:
        entries = [kanjidic.find_literal(literal) for literal in args.literal]
        missing = [literal for literal, entry in zip(args.literal, entries)
                   if entry is None]
        for literal in missing:
            logger.warning('No entry for %s', literal)
        entries = [entry for entry in entries if entry is not None]
    elif args.meaning:
        entries = kanjidic.filter_meaning(
            queries.meaning_contains(args.meaning, args.language),
        )
    else:
        entries = list(kanjidic.entries)

    if args.grade:
        grade_filter = queries.has_grade(*(GradeType(g) for g in args.grade))
        entries = [entry for entry in entries if grade_filter(entry)]

    return entries[:args.limit] if args.limit is not None else entries


def run(args: argparse.Namespace, out: Optional[TextIO] = None):
    """The central run function of :mod:`pykanjidic`.

    Args:
        args: Namespace of run function arguments.
        out: Stream to print matched entries to (default ``sys.stdout``).
    """

    out = out or sys.stdout

    kanjidic = load(args.xml_file)
    logger.info(
        'Database version %s, created %s',
        kanjidic.database_version,
        kanjidic.creation_date,
    )

    if not (args.literal or args.meaning or args.grade):
        print(f'{len(kanjidic.entries)} entries', file=out)
        return

    for entry in select(kanjidic, args):
        print(format_entry(entry, args.language), file=out)


def main(argv: List[str] = sys.argv[1:]) -> int:
    """The :mod:`pykanjidic` main function.

    Args:
        argv: The list of input arguments.

    Return:
        ``0`` upon successful completion, ``1`` otherwise.
    """

    # Parse input argv
    args = get_parser().parse_args(argv)

    # Configure logging
    level = 'DEBUG' if args.debug else 'WARNING' if args.silent else 'INFO'
    configure_logger(level, logger)

    # Run the program
    try:
        run(args)
    except KeyboardInterrupt:
        logger.critical('Interrupted by user, exiting')
        return 1
    except ParseError as exc:
        logger.error('Could not load %s: %s', args.xml_file, exc)
        return 1

    # Success
    return 0


if __name__ == '__main__':
    sys.exit(main())
