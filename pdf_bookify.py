#!/usr/bin/env python3
"""
PDF Bookify

Rearranges the pages of a PDF for printing: booklet imposition (two-up or
four-up, folded or cut-and-folded) and manual double-sided splitting into
odd and even halves with optional 180° compensation.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from bookify import __version__
from bookify.config import DEFAULT_CONFIG_FILENAME, DEFAULT_TARGET_PAGE_COUNT, PAPER_SIZES
from bookify.errors import BookifyError
from bookify.models import (
    BookletOptions,
    DoubleSidedOptions,
    FlipDirection,
    FlipType,
    Layout,
    OddEven,
    ReadingDirection,
)
from bookify.services import ConfigService, ImpositionService


def _choices(enum_cls) -> List[str]:
    return [member.value for member in enum_cls]


def _add_output_arguments(parser: argparse.ArgumentParser):
    parser.add_argument('input', help='Input PDF file')
    output = parser.add_mutually_exclusive_group()
    output.add_argument('-o', '--output',
                        help='Output PDF file (default: <input>.imposed.pdf)')
    output.add_argument('--temp', action='store_true',
                        help='Write the output to a temporary file')


def _add_booklet_options(parser: argparse.ArgumentParser):
    parser.add_argument('--layout', choices=_choices(Layout),
                        help='Pages per sheet side: two-up or four-up (default: four-up)')
    parser.add_argument('--reading-direction', choices=_choices(ReadingDirection),
                        help='Reading direction (default: left-to-right)')
    parser.add_argument('--flip-direction', choices=_choices(FlipDirection),
                        help='Edge the printer flips the paper on (default: short-edge)')
    parser.add_argument('--paper-size', choices=list(PAPER_SIZES.keys()),
                        help='Print on this paper instead of a sheet sized to the pages')


def _add_double_sided_options(parser: argparse.ArgumentParser):
    parser.add_argument('--flip-type', choices=_choices(FlipType),
                        help='Rotate odd/even pages 180°: r = rotate, n = no (default: rr)')
    parser.add_argument('--odd-even', choices=_choices(OddEven),
                        help='Which pages to output (default: odd)')


def _booklet_options(args, defaults: BookletOptions) -> BookletOptions:
    """Command line flags layered over the saved defaults."""
    return BookletOptions(
        layout=args.layout or defaults.layout,
        reading_direction=args.reading_direction or defaults.reading_direction,
        flip_direction=args.flip_direction or defaults.flip_direction,
        paper_size=args.paper_size or defaults.paper_size,
        target_page_count=getattr(args, 'pages', None),
    )


def _double_sided_options(args, defaults: DoubleSidedOptions) -> DoubleSidedOptions:
    return DoubleSidedOptions(
        flip_type=args.flip_type or defaults.flip_type,
        odd_even=args.odd_even or defaults.odd_even,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pdf-bookify',
        description="Rearrange PDF pages for booklet or manual double-sided printing.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s booklet zine.pdf                               # four-up, cut and fold
  %(prog)s booklet zine.pdf --layout two-up -o print.pdf  # classic folded A5 booklet
  %(prog)s booklet manga.pdf --reading-direction right-to-left
  %(prog)s booklet flyer.pdf --layout two-up --pages      # legacy: pad to 16 pages
  %(prog)s double-sided report.pdf --odd-even odd --flip-type nn
  %(prog)s double-sided report.pdf --odd-even even --temp
  %(prog)s config save --layout two-up --flip-type nn     # remember defaults
        """
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--config',
                        help=f'JSON file with default options (default: ./{DEFAULT_CONFIG_FILENAME})')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log progress')

    subparsers = parser.add_subparsers(dest='command', required=True)

    booklet = subparsers.add_parser(
        'booklet', help='Convert a PDF to booklet format for double-sided printing')
    _add_output_arguments(booklet)
    _add_booklet_options(booklet)
    booklet.add_argument('--pages', type=int, nargs='?', const=DEFAULT_TARGET_PAGE_COUNT,
                         help=f'Pad the booklet up to this many pages '
                              f'(default when given bare: {DEFAULT_TARGET_PAGE_COUNT})')

    double_sided = subparsers.add_parser(
        'double-sided', help='Output the odd or even pages for manual double-sided printing')
    _add_output_arguments(double_sided)
    _add_double_sided_options(double_sided)

    config = subparsers.add_parser('config', help='Save, reset or locate the default options')
    actions = config.add_subparsers(dest='action', required=True)
    save = actions.add_parser('save', help='Store the given options as defaults')
    _add_booklet_options(save)
    _add_double_sided_options(save)
    actions.add_parser('reset', help='Delete the defaults file')
    actions.add_parser('path', help='Print where defaults are read from')

    return parser


def run_config(args, config_service: ConfigService) -> int:
    """Handle the config subcommand."""
    if args.action == 'path':
        print(config_service.get_config_path())
        return 0

    if args.action == 'reset':
        if config_service.reset_to_defaults():
            print(f"Removed: {config_service.get_config_path()}")
        else:
            print("No saved defaults")
        return 0

    booklet_defaults, double_sided_defaults = config_service.load()
    saved = config_service.save(_booklet_options(args, booklet_defaults),
                                _double_sided_options(args, double_sided_defaults))
    if not saved:
        print(f"Error: could not write {config_service.get_config_path()}", file=sys.stderr)
        return 1
    print(f"Saved: {config_service.get_config_path()}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(levelname)s: %(message)s'
    )

    config_service = ConfigService(Path(args.config) if args.config else None)
    service = ImpositionService()

    try:
        if args.command == 'config':
            return run_config(args, config_service)

        booklet_defaults, double_sided_defaults = config_service.load()

        if args.command == 'booklet':
            options = _booklet_options(args, booklet_defaults)
            output = service.make_booklet(args.input, options, args.output, temp=args.temp)
        else:
            options = _double_sided_options(args, double_sided_defaults)
            output = service.split_double_sided(args.input, options, args.output, temp=args.temp)

    except BookifyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Created: {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
