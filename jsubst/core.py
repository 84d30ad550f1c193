"""
# jsubst: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core replacement logic.

`replace(subject, pattern, replacement, limit)` validates its arguments strictly left to right,
raising on the first violation, and then performs either
- an unlimited replacement: one global pass replacing every non-overlapping match, or
- a bounded replacement: `limit` passes, each replacing only the first match
  in the string as rewritten by the previous passes, stopping early once nothing matches.

Note that in the bounded case a substitute that itself matches the pattern
may be replaced again by a later pass, e.g.
        replace('a', 'a', 'aa', limit=3) == 'aaaa'
since each pass rewrites the leading `a`.
"""

import re
from typing import Any, Optional

from jsubst.bases import Substitution
from jsubst.constants import (
    ERR_MSG_ARG1_BAD_TYPE,
    ERR_MSG_ARG2_BAD_TYPE,
    ERR_MSG_ARG2_EMPTY_STR,
    ERR_MSG_ARG2_INVALID_REGEX,
    ERR_MSG_ARG4_BAD_TYPE,
    FUNCTION_REPLACE,
    VERBOSE_MODE_DIVIDER_SYMBOL_COUNT,
)
from jsubst.exceptions import (
    BadLimitTypeException,
    BadPatternTypeException,
    BadSubjectTypeException,
    EmptyPatternException,
    InvalidPatternException,
)
from jsubst.substitutions import build_substitution
from jsubst.utilities import is_integral, is_textual


def compile_pattern(pattern: Any) -> re.Pattern:
    """
    Compile a pattern argument to a regex.

    A string is compiled as a Python regex;
    an already-compiled regex (a regex literal in the host language) is used as is.
    """
    if isinstance(pattern, re.Pattern):
        if not is_textual(pattern.pattern):
            raise BadPatternTypeException(ERR_MSG_ARG2_BAD_TYPE.format(FUNCTION_REPLACE))
        if pattern.pattern == '':
            raise EmptyPatternException(ERR_MSG_ARG2_EMPTY_STR.format(FUNCTION_REPLACE))

        return pattern

    if not is_textual(pattern):
        raise BadPatternTypeException(ERR_MSG_ARG2_BAD_TYPE.format(FUNCTION_REPLACE))
    if pattern == '':
        raise EmptyPatternException(ERR_MSG_ARG2_EMPTY_STR.format(FUNCTION_REPLACE))

    try:
        return re.compile(pattern)
    except re.error as regex_error:
        raise InvalidPatternException(
            ERR_MSG_ARG2_INVALID_REGEX.format(FUNCTION_REPLACE, regex_error)
        ) from regex_error


def validate_limit(limit: Any, null_limit_is_unlimited: bool = True) -> Optional[int]:
    """
    Validate a limit argument, returning None for unlimited.

    JSON numbers with an integral value (such as `2.0`) are accepted.
    When `null_limit_is_unlimited` is False, None is a JSON null supplied by the caller
    and is rejected like any other non-number.
    """
    if limit is None and null_limit_is_unlimited:
        return None

    if not is_integral(limit) or limit < 0:
        raise BadLimitTypeException(ERR_MSG_ARG4_BAD_TYPE.format(FUNCTION_REPLACE))

    return int(limit)


def replace(subject: Any, pattern: Any, replacement: Any, limit: Any = None,
            verbose_mode_enabled: bool = False, null_limit_is_unlimited: bool = True) -> str:
    """
    Replace occurrences of `pattern` within `subject` by `replacement`.

    - `subject`: string
    - `pattern`: non-empty regex string, or compiled regex
    - `replacement`: template string, or callback taking a MatchRecord and returning a string
    - `limit`: maximum number of replacements, None for unlimited
      (unless `null_limit_is_unlimited` is False, in which case None is rejected)
    """
    if not is_textual(subject):
        raise BadSubjectTypeException(ERR_MSG_ARG1_BAD_TYPE.format(FUNCTION_REPLACE))

    pattern_compiled = compile_pattern(pattern)
    substitution = build_substitution(replacement)
    limit = validate_limit(limit, null_limit_is_unlimited)

    if limit is None:
        return unlimited_replace(subject, pattern_compiled, substitution, verbose_mode_enabled)

    return bounded_replace(subject, pattern_compiled, substitution, limit, verbose_mode_enabled)


def unlimited_replace(string: str, pattern_compiled: re.Pattern, substitution: Substitution,
                      verbose_mode_enabled: bool = False) -> str:
    string_before = string
    string = pattern_compiled.sub(repl=substitution, string=string)

    if verbose_mode_enabled:
        print_verbose_pass(pattern_compiled, 'unlimited pass', string_before, string)

    return string


def bounded_replace(string: str, pattern_compiled: re.Pattern, substitution: Substitution, limit: int,
                    verbose_mode_enabled: bool = False) -> str:
    for pass_number in range(1, limit + 1):
        string_before = string
        string, substitution_count = pattern_compiled.subn(repl=substitution, string=string, count=1)

        if substitution_count == 0:
            break

        if verbose_mode_enabled:
            print_verbose_pass(pattern_compiled, f'pass {pass_number} of {limit}', string_before, string)

    return string


def print_verbose_pass(pattern_compiled: re.Pattern, pass_description: str, string_before: str, string_after: str):
    if string_before == string_after:
        no_change_indicator = ' (no change)'
    else:
        no_change_indicator = ''

    print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE /{pattern_compiled.pattern}/ {pass_description}')
    print(string_before)
    print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator)
    print(string_after)
    print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER /{pattern_compiled.pattern}/ {pass_description}')
    print('\n\n\n\n')
