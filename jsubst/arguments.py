"""
# jsubst: arguments.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Argument resolution.

The host evaluator hands over the explicit (already evaluated) arguments of a call,
and, separately, the context value it is currently evaluating against.
When the call has fewer explicit arguments than the signature requires,
and the first parameter may be taken from the context,
the context value is put in front of the explicit arguments.
"""

from typing import Any, Sequence

from jsubst.signatures import Signature


class _Sentinel:
    _name: str

    def __init__(self, name: str):
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __bool__(self) -> bool:
        return False


NO_CONTEXT = _Sentinel('NO_CONTEXT')
MISSING = _Sentinel('MISSING')


class ArgumentResolver:
    """
    Resolver of the effective positional arguments of a function call.

    Effective arguments are the explicit arguments,
    preceded by the context value if it stands in for an omitted first argument.
    Note that JSON null (None) is a legitimate context value;
    the absence of a context value is represented by NO_CONTEXT.
    """
    _arguments: tuple[Any, ...]
    _context_value: Any
    _uses_context_value: bool

    def __init__(self, arguments: Sequence[Any], signature: Signature, context_value: Any = NO_CONTEXT):
        self._arguments = tuple(arguments)
        self._context_value = context_value
        self._uses_context_value = (
            context_value is not NO_CONTEXT
            and signature.uses_context_value(len(self._arguments))
        )

    @property
    def uses_context_value(self) -> bool:
        return self._uses_context_value

    @property
    def context_value(self) -> Any:
        return self._context_value

    @property
    def explicit_argument_count(self) -> int:
        return len(self._arguments)

    @property
    def argument_count(self) -> int:
        if self._uses_context_value:
            return len(self._arguments) + 1

        return len(self._arguments)

    def get_argument(self, index: int) -> Any:
        """
        Get the effective argument at `index`, or MISSING if there is none.
        """
        if self._uses_context_value:
            if index == 0:
                return self._context_value
            index -= 1

        if 0 <= index < len(self._arguments):
            return self._arguments[index]

        return MISSING
