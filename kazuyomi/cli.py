"""
Command line interface for kazuyomi.

Usage:
    python -m kazuyomi.cli 12345          # kanji spelling
    python -m kazuyomi.cli -r 12345       # spoken reading
    python -m kazuyomi.cli -b 12345       # both
    python -m kazuyomi.cli -f 12345       # full JSON
    python -m kazuyomi.cli tree 12345     # place value tree as JSON
"""

import argparse
import json
import logging
import sys
from typing import Optional

from kazuyomi import __version__, settings
from kazuyomi.characters import SCRIPTS, convert_script
from kazuyomi.numbers import (
    SpellingError, place_tree, sanitize, spell_number, tree_to_dict,
)

logger = logging.getLogger(__name__)


def main_tree(args: list) -> int:
    """CLI entry point for tree subcommand."""
    parser = argparse.ArgumentParser(
        description='Show how a number splits into Japanese places',
        prog='kazuyomi tree',
    )

    parser.add_argument(
        'number',
        nargs='+',
        help='Number to split (spaces are ignored)',
    )

    parsed = parser.parse_args(args)

    try:
        tree = place_tree(sanitize(' '.join(parsed.number)))
    except SpellingError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    print(json.dumps(tree_to_dict(tree), ensure_ascii=False))
    return 0


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    # Check for subcommands
    args_list = args if args is not None else sys.argv[1:]

    if args_list and args_list[0] == 'tree':
        return main_tree(args_list[1:])

    parser = argparse.ArgumentParser(
        description='Spell out numbers in Japanese kanji numerals',
        prog='kazuyomi',
        epilog='Subcommands:\n  kazuyomi tree NUMBER    Show the place value tree as JSON',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        'number',
        nargs='*',
        help='Number to spell out (spaces are ignored)',
    )

    output = parser.add_mutually_exclusive_group()

    output.add_argument(
        '-r', '--reading',
        action='store_true',
        help='Print the spoken reading instead of kanji',
    )

    output.add_argument(
        '-b', '--both',
        action='store_true',
        help='Print kanji and reading',
    )

    output.add_argument(
        '-f', '--full',
        action='store_true',
        help='Full spelling info as JSON',
    )

    parser.add_argument(
        '-s', '--script',
        choices=SCRIPTS,
        default=settings.SCRIPT if settings.SCRIPT in SCRIPTS else 'hiragana',
        help='Script for the reading (default: hiragana)',
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Log debug information to stderr',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parsed = parser.parse_args(args)

    if parsed.version:
        print(f'kazuyomi {__version__}')
        return 0

    settings.configure_logging('DEBUG' if parsed.debug else None)

    text = ' '.join(parsed.number) if parsed.number else ''

    if not text:
        parser.print_help()
        return 1

    try:
        spelling = spell_number(sanitize(text))
    except SpellingError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    reading = convert_script(spelling.reading, parsed.script)
    logger.debug(f"{spelling.number} -> {spelling.kanji} / {spelling.reading}")

    if parsed.full:
        output = {
            'number': str(spelling.number),
            'kanji': spelling.kanji,
            'reading': reading,
            'tree': tree_to_dict(place_tree(spelling.number)),
        }
        print(json.dumps(output, ensure_ascii=False))
    elif parsed.reading:
        print(reading)
    elif parsed.both:
        print(f'{spelling.kanji} ({reading})')
    else:
        print(spelling.kanji)

    return 0


if __name__ == '__main__':
    sys.exit(main())
