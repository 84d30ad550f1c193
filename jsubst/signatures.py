"""
# jsubst: signatures.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Function signatures.

A signature is written as
````
<«parameters»:«return_type»>
````
where each parameter is a type symbol, or a parenthesised union of type symbols,
followed by optional modifiers:
- `-` the argument may be taken from the context value when it is omitted
- `?` the argument is optional
- `+` the argument may be repeated
Type symbols are
`b` boolean, `n` number, `s` string, `l` null, `a` array, `o` object,
`f` function, `j` any JSON value, `x` any value, `u` boolean-number-string-null.
Arrays may be subtyped as `a<«type»>`.

For example, `<s-(sf)(sf)n?:s>` is the signature of `$replace`.
"""

import re
from typing import NamedTuple, Optional

from jsubst.constants import ERR_MSG_BAD_SIGNATURE
from jsubst.exceptions import MalformedSignatureException

TYPE_SYMBOLS = 'bnslaofjxu'

_PARAMETER_REGEX = fr'''
    (?P<type_symbols>
        [{TYPE_SYMBOLS}] (?: < [^>]* > )?
            |
        \( [{TYPE_SYMBOLS}]+ \)
    )
    (?P<modifiers> [-?+]* )
'''
_PARAMETER_PATTERN_COMPILED = re.compile(pattern=_PARAMETER_REGEX, flags=re.VERBOSE)
_SIGNATURE_PATTERN_COMPILED = re.compile(
    pattern=fr'''
        <
        (?P<parameters> (?: {_PARAMETER_REGEX} )* )
        :
        (?P<return_type> [{TYPE_SYMBOLS}] (?: < [^>]* > )? )
        >
    ''',
    flags=re.VERBOSE,
)


class Parameter(NamedTuple):
    type_symbols: str
    uses_context: bool
    is_optional: bool
    is_variadic: bool


class Signature:
    """
    A parsed function signature.
    """
    _signature: str
    _parameters: tuple[Parameter, ...]

    def __init__(self, signature: str, parameters: tuple[Parameter, ...]):
        self._signature = signature
        self._parameters = parameters

    def __repr__(self) -> str:
        return f'Signature({self._signature!r})'

    @property
    def parameters(self) -> tuple[Parameter, ...]:
        return self._parameters

    @property
    def required_parameter_count(self) -> int:
        return sum(1 for parameter in self._parameters if not parameter.is_optional)

    @property
    def maximum_parameter_count(self) -> Optional[int]:
        """
        The most arguments a call may have, or None if a parameter is variadic.
        """
        if any(parameter.is_variadic for parameter in self._parameters):
            return None

        return len(self._parameters)

    def uses_context_value(self, argument_count: int) -> bool:
        """
        Whether a call with `argument_count` explicit arguments takes its first argument from the context value.
        """
        if len(self._parameters) == 0 or not self._parameters[0].uses_context:
            return False

        return argument_count < self.required_parameter_count

    @staticmethod
    def parse(signature: str) -> 'Signature':
        signature_match = _SIGNATURE_PATTERN_COMPILED.fullmatch(signature)
        if signature_match is None:
            raise MalformedSignatureException(ERR_MSG_BAD_SIGNATURE.format(signature))

        parameters = tuple(
            Signature.build_parameter(parameter_match)
            for parameter_match in _PARAMETER_PATTERN_COMPILED.finditer(signature_match.group('parameters'))
        )
        return Signature(signature, parameters)

    @staticmethod
    def build_parameter(parameter_match: re.Match) -> Parameter:
        type_symbols = parameter_match.group('type_symbols')
        modifiers = parameter_match.group('modifiers')

        if type_symbols.startswith('('):
            type_symbols = type_symbols[1:-1]
        elif type_symbols.startswith('a<'):
            type_symbols = 'a'

        return Parameter(
            type_symbols=type_symbols,
            uses_context='-' in modifiers,
            is_optional='?' in modifiers,
            is_variadic='+' in modifiers,
        )
