"""Command-line interface for globre with subcommands."""

import argparse
import logging
import sys

import globre
from ..exceptions import PatternError

logger = logging.getLogger(__name__)

EXIT_MATCH = 0
EXIT_NO_MATCH = 1
EXIT_BAD_PATTERN = 2


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='globre',
        description='Translate shell-style glob patterns to regular expressions and match text.',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {globre.__version__}')
    parser.add_argument(
        '-i', '--ignore-case', action='store_true', help='Match case-insensitively'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug output to stderr')
    subparsers = parser.add_subparsers(dest='command', title='commands')

    # translate - print the regex for a glob
    p = subparsers.add_parser(
        'translate',
        aliases=['t'],
        help='Print the regular expression each glob pattern translates to',
    )
    p.add_argument('patterns', type=str, nargs='+', help='Glob patterns')

    # match - test strings given as arguments
    p = subparsers.add_parser(
        'match',
        aliases=['m'],
        help='Print the strings that match the glob (exit 1 if none do)',
    )
    p.add_argument('pattern', type=str, help='Glob pattern')
    p.add_argument('texts', type=str, nargs='+', help='Strings to match')

    # filter - test strings read from a file or stdin
    p = subparsers.add_parser(
        'filter',
        aliases=['f'],
        help='Print the lines of a file (or stdin) that match the glob (exit 1 if none do)',
    )
    p.add_argument('pattern', type=str, help='Glob pattern')
    p.add_argument(
        '-T',
        '--files-from',
        type=str,
        default='-',
        metavar='FILE',
        help='Read candidates from FILE (default: - for stdin)',
    )
    p.add_argument(
        '-0',
        '--null',
        action='store_true',
        help='Candidates are null-separated, and so is the output (for use with find -print0)',
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, stream=sys.stderr, format='%(name)s: %(message)s'
        )

    if args.command is None:
        parser.print_help()
        return 0

    # File names need not be valid UTF-8, pass undecodable bytes through unchanged
    _use_surrogateescape(sys.stdin, sys.stdout)

    # Dispatch to handlers
    if args.command in ('translate', 't'):
        return _handle_translate(args)
    elif args.command in ('match', 'm'):
        return _handle_match(args, args.texts)
    elif args.command in ('filter', 'f'):
        return _handle_match(args, _read_candidates(args.files_from, args.null), args.null)


def _handle_translate(args):
    """Handle translate command."""
    status = 0
    for pattern in args.patterns:
        print(globre.translate(pattern))
        try:
            globre.compile(pattern, ignore_case=args.ignore_case)
        except PatternError as e:
            print(f'Error: {e}', file=sys.stderr)
            status = EXIT_BAD_PATTERN
    return status


def _handle_match(args, candidates, print0=False):
    """Handle match and filter commands."""
    try:
        matcher = globre.compile(args.pattern, ignore_case=args.ignore_case)
    except PatternError as e:
        print(f'Error: {e}', file=sys.stderr)
        return EXIT_BAD_PATTERN

    end = '\0' if print0 else '\n'
    num_matched = 0
    for candidate in matcher.filter(candidates):
        print(candidate, end=end)
        num_matched += 1

    logger.debug('%d candidate(s) matched %r', num_matched, args.pattern)
    return EXIT_MATCH if num_matched else EXIT_NO_MATCH


def _read_candidates(path, null=False):
    """Read candidate strings from a file, or stdin if ``path`` is '-'."""
    if path == '-':
        text = sys.stdin.read()
    else:
        with open(path, encoding='utf-8', errors='surrogateescape') as f:
            text = f.read()

    if null:
        return [c for c in text.split('\0') if c]
    return [line for line in text.splitlines() if line]


def _use_surrogateescape(*streams):
    for stream in streams:
        if hasattr(stream, 'reconfigure'):
            stream.reconfigure(errors='surrogateescape')


def console_main():
    sys.exit(main())


if __name__ == '__main__':
    console_main()
