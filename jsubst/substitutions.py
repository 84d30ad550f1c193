"""
# jsubst: substitutions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Replacement shapes.

A replacement is either a template string or a callback,
and which of the two is decided once, by `build_substitution(...)`,
before any matching happens.
"""

import re
from typing import Any, Callable

from jsubst.bases import Substitution
from jsubst.constants import (
    ERR_MSG_ARG3_BAD_TYPE,
    ERR_MSG_CALLBACK_BAD_RETURN,
    ERROR_CODE_CALLBACK_BAD_RETURN,
    FUNCTION_REPLACE,
)
from jsubst.exceptions import BadReplacementTypeException
from jsubst.matches import MatchRecord, build_match_record
from jsubst.templates import expand_template
from jsubst.utilities import describe_type, is_invocable, is_textual


class TemplateSubstitution(Substitution):
    """
    Substitution by a replacement template (see templates.py).
    """
    _template: str

    def __init__(self, template: str):
        self._template = template

    @property
    def template(self) -> str:
        return self._template

    def substitute(self, match: re.Match) -> str:
        return expand_template(self._template, match)


class CallbackSubstitution(Substitution):
    """
    Substitution by the result of a callback invoked with a match record.

    The callback must return a string;
    anything else raises BadReplacementTypeException at the offending match.
    """
    _callback: Callable[[MatchRecord], Any]

    def __init__(self, callback: Callable[[MatchRecord], Any]):
        self._callback = callback

    @property
    def callback(self) -> Callable[[MatchRecord], Any]:
        return self._callback

    def substitute(self, match: re.Match) -> str:
        substitute = self._callback(build_match_record(match))
        if not is_textual(substitute):
            raise BadReplacementTypeException(
                ERR_MSG_CALLBACK_BAD_RETURN.format(FUNCTION_REPLACE, describe_type(substitute)),
                code=ERROR_CODE_CALLBACK_BAD_RETURN,
            )

        return substitute


def build_substitution(replacement: Any) -> Substitution:
    if isinstance(replacement, Substitution):
        return replacement

    if is_textual(replacement):
        return TemplateSubstitution(replacement)

    if is_invocable(replacement):
        return CallbackSubstitution(replacement)

    raise BadReplacementTypeException(ERR_MSG_ARG3_BAD_TYPE.format(FUNCTION_REPLACE))
