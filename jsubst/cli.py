"""
# jsubst: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import contextlib
import sys
from typing import Optional

from jsubst._version import __version__
from jsubst.constants import COMMAND_LINE_ERROR_EXIT_CODE, GENERIC_ERROR_EXIT_CODE
from jsubst.core import replace
from jsubst.exceptions import EvaluateRuntimeException

DESCRIPTION = '''
    Find occurrences of a regex pattern in text and replace them.
'''
PATTERN_HELP = '''
    regex pattern to find (must be non-empty)
'''
REPLACEMENT_HELP = '''
    replacement template,
    where `$$` is a literal dollar sign, `$0` is the whole match, and `$N` is the Nth captured group
'''
FILE_NAME_HELP = '''
    name of file to be read (defaults to standard input)
'''
LIMIT_HELP = '''
    maximum number of replacements
    (each replacement rewrites the first match in the result of the previous one)
'''
OUTPUT_FILE_NAME_HELP = '''
    name of file to be written (defaults to standard output)
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every replacement pass applied)
'''


def parse_command_line_arguments(argv: Optional[list[str]] = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(prog='jsubst', description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-l', '--limit',
        dest='limit',
        default=None,
        help=LIMIT_HELP,
        type=int,
    )
    argument_parser.add_argument(
        '-o', '--output',
        dest='output_file_name',
        default=None,
        help=OUTPUT_FILE_NAME_HELP,
        metavar='output.txt',
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'pattern',
        help=PATTERN_HELP,
    )
    argument_parser.add_argument(
        'replacement',
        help=REPLACEMENT_HELP,
    )
    argument_parser.add_argument(
        'file_name',
        default=None,
        help=FILE_NAME_HELP,
        metavar='file.txt',
        nargs='?',
    )

    return argument_parser.parse_args(argv)


def read_subject(file_name: Optional[str]) -> str:
    if file_name is None:
        return sys.stdin.read()

    try:
        with open(file_name, 'r', encoding='utf-8') as file:
            return file.read()
    except FileNotFoundError:
        print(f'error: argument `{file_name}`: file not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)


def write_result(result: str, output_file_name: Optional[str]):
    if output_file_name is None:
        sys.stdout.write(result)
        return

    try:
        with open(output_file_name, 'w', encoding='utf-8') as output_file:
            output_file.write(result)
        print(f'success: wrote to `{output_file_name}`')
    except IOError:
        print(f'error: cannot write to `{output_file_name}`', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def main(argv: Optional[list[str]] = None):
    parsed_arguments = parse_command_line_arguments(argv)

    subject = read_subject(parsed_arguments.file_name)

    # verbose passes must not be interleaved with a result written to stdout
    if parsed_arguments.output_file_name is None:
        verbose_stream = sys.stderr
    else:
        verbose_stream = sys.stdout

    try:
        with contextlib.redirect_stdout(verbose_stream):
            result = replace(
                subject,
                parsed_arguments.pattern,
                parsed_arguments.replacement,
                parsed_arguments.limit,
                verbose_mode_enabled=parsed_arguments.verbose_mode_enabled,
            )
    except EvaluateRuntimeException as evaluate_runtime_exception:
        print(f'error: {evaluate_runtime_exception.kind}: {evaluate_runtime_exception.message}', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    write_result(result, parsed_arguments.output_file_name)


if __name__ == '__main__':
    main()
