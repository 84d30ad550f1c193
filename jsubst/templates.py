"""
# jsubst: templates.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Replacement template expansion.

In a replacement template:
- `$$` is a literal dollar sign
- `$0` is the whole match
- `$«N»` is the «N»th captured group,
  or the empty string if the group did not participate or does not exist
- any other dollar sign is literal.

A group reference consumes at most as many digits as there are in the group count,
so that with fewer than 10 groups `$10` means group 1 followed by a literal `0`.
If the digits consumed name a group beyond the count, the last digit is given back.
"""

import re
from typing import Callable

_DOLLAR_SEQUENCE_PATTERN_COMPILED = re.compile(
    pattern=r'''
        [$]
        (?:
            (?P<dollar> [$] )
                |
            (?P<digits> [0-9]+ )
        )
    ''',
    flags=re.ASCII | re.VERBOSE,
)


def expand_template(template: str, match: re.Match) -> str:
    """
    Expand a replacement template against a regex match.
    """
    return _DOLLAR_SEQUENCE_PATTERN_COMPILED.sub(
        repl=build_dollar_substitute_function(match),
        string=template,
    )


def build_dollar_substitute_function(match: re.Match) -> Callable[[re.Match], str]:
    group_count = match.re.groups
    max_digit_count = len(str(group_count))

    def dollar_substitute_function(dollar_match: re.Match) -> str:
        if dollar_match.group('dollar') is not None:
            return '$'

        digits = dollar_match.group('digits')
        reference_digits = digits[:max_digit_count]
        if int(reference_digits) > group_count and len(reference_digits) > 1:
            reference_digits = reference_digits[:-1]
        literal_digits = digits[len(reference_digits):]

        return extract_group(match, int(reference_digits)) + literal_digits

    return dollar_substitute_function


def extract_group(match: re.Match, group_number: int) -> str:
    if group_number > match.re.groups:
        return ''

    group = match.group(group_number)
    if group is None:
        return ''

    return group
