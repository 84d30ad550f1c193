"""
# jsubst: functions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Built-in functions exposed to the host expression engine.
"""

from typing import Any

from jsubst.arguments import MISSING, ArgumentResolver
from jsubst.bases import Function
from jsubst.constants import (
    ERR_MSG_ARG1_BAD_TYPE,
    ERR_MSG_ARG2_BAD_TYPE,
    ERR_MSG_BAD_CONTEXT,
    ERR_MSG_MISSING_REPLACEMENT,
    ERR_MSG_TOO_MANY_ARGUMENTS,
    FUNCTION_REPLACE,
    REPLACE_SIGNATURE,
)
from jsubst.core import compile_pattern, replace
from jsubst.exceptions import (
    ArityException,
    BadPatternTypeException,
    BadSubjectTypeException,
    MissingReplacementException,
)
from jsubst.utilities import is_textual


class ReplaceFunction(Function):
    """
    `$replace(str, pattern, replacement [, limit])`

    Finds occurrences of `pattern` within `str` and replaces them with `replacement`.
    If `str` is omitted, the context value is used.
    `replacement` is a template string (`$$`, `$0`, `$«N»`)
    or a function taking a match record and returning a string.
    `limit` is the maximum number of replacements to make.

    Examples:
    ````
    $replace("John Smith and John Jones", "John", "Mr") == "Mr Smith and Mr Jones"
    $replace("John Smith and John Jones", "John", "Mr", 1) == "Mr Smith and John Jones"
    $replace("abracadabra", "a.*?a", "*") == "*c*bra"
    $replace("John Smith", "(\\w+)\\s(\\w+)", "$2, $1") == "Smith, John"
    $replace("265USD", "([0-9]+)USD", "$$$1") == "$265"
    ````
    """
    @property
    def name(self) -> str:
        return FUNCTION_REPLACE

    @property
    def signature(self) -> str:
        return REPLACE_SIGNATURE

    def _invoke(self, argument_resolver: ArgumentResolver) -> Any:
        argument_count = argument_resolver.argument_count
        maximum_argument_count = self._parsed_signature.maximum_parameter_count

        subject = argument_resolver.get_argument(0)
        if argument_count < 1:
            raise BadSubjectTypeException(ERR_MSG_ARG1_BAD_TYPE.format(FUNCTION_REPLACE))
        if argument_resolver.uses_context_value and not is_textual(subject):
            raise BadSubjectTypeException(ERR_MSG_BAD_CONTEXT.format(FUNCTION_REPLACE))
        if argument_count > maximum_argument_count:
            raise ArityException(
                ERR_MSG_TOO_MANY_ARGUMENTS.format(FUNCTION_REPLACE, maximum_argument_count, argument_count)
            )
        if not is_textual(subject):
            raise BadSubjectTypeException(ERR_MSG_ARG1_BAD_TYPE.format(FUNCTION_REPLACE))

        if argument_count < 2:
            raise BadPatternTypeException(ERR_MSG_ARG2_BAD_TYPE.format(FUNCTION_REPLACE))
        pattern = argument_resolver.get_argument(1)

        if argument_count < 3:
            # the pattern is validated ahead of reporting the missing replacement
            compile_pattern(pattern)
            raise MissingReplacementException(ERR_MSG_MISSING_REPLACEMENT.format(FUNCTION_REPLACE))
        replacement = argument_resolver.get_argument(2)

        # only an omitted limit means unlimited; a null limit is a bad limit
        limit = argument_resolver.get_argument(3)
        if limit is MISSING:
            return replace(subject, pattern, replacement, verbose_mode_enabled=self._verbose_mode_enabled)

        return replace(
            subject,
            pattern,
            replacement,
            limit,
            verbose_mode_enabled=self._verbose_mode_enabled,
            null_limit_is_unlimited=False,
        )
