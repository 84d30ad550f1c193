"""
# jsubst: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.

Each evaluation error kind is its own class so that hosts can branch on kind.
"""

from typing import Optional

from jsubst.constants import (
    ERROR_CODE_BAD_ARGUMENT,
    ERROR_CODE_BAD_LIMIT,
    ERROR_CODE_EMPTY_PATTERN,
    ERROR_CODE_INVALID_PATTERN,
)


class EvaluateRuntimeException(Exception):
    """
    Base class for errors raised while evaluating a function call.
    """
    DEFAULT_CODE: str = ERROR_CODE_BAD_ARGUMENT
    KIND: Optional[str] = None

    _message: str
    _code: str

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self._message = message
        self._code = code if code is not None else self.DEFAULT_CODE

    @property
    def message(self) -> str:
        return self._message

    @property
    def code(self) -> str:
        return self._code

    @property
    def kind(self) -> str:
        if self.KIND is not None:
            return self.KIND

        return type(self).__name__.removesuffix('Exception')


class BadSubjectTypeException(EvaluateRuntimeException):
    pass


class BadPatternTypeException(EvaluateRuntimeException):
    pass


class EmptyPatternException(EvaluateRuntimeException):
    DEFAULT_CODE = ERROR_CODE_EMPTY_PATTERN
    KIND = 'EmptyPatternError'


class InvalidPatternException(BadPatternTypeException):
    DEFAULT_CODE = ERROR_CODE_INVALID_PATTERN


class MissingReplacementException(EvaluateRuntimeException):
    pass


class BadReplacementTypeException(EvaluateRuntimeException):
    pass


class BadLimitTypeException(EvaluateRuntimeException):
    DEFAULT_CODE = ERROR_CODE_BAD_LIMIT


class ArityException(EvaluateRuntimeException):
    KIND = 'ArityError'


class MalformedSignatureException(Exception):
    pass
