"""
# jsubst: bases.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Base classes for built-in functions and replacement shapes.
"""

import abc
import re
from typing import Any, Sequence

from jsubst.arguments import NO_CONTEXT, ArgumentResolver
from jsubst.signatures import Signature


class Function(abc.ABC):
    """
    Base class for a built-in function of the expression engine.

    The host evaluator calls `invoke(arguments, context_value)`
    with the evaluated explicit arguments of the call site
    and the context value the call is being evaluated against.
    """
    _verbose_mode_enabled: bool
    _parsed_signature: Signature

    def __init__(self, verbose_mode_enabled: bool = False):
        self._verbose_mode_enabled = verbose_mode_enabled
        self._parsed_signature = Signature.parse(self.signature)

    @property
    @abc.abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def signature(self) -> str:
        raise NotImplementedError

    @property
    def parsed_signature(self) -> Signature:
        return self._parsed_signature

    def invoke(self, arguments: Sequence[Any], context_value: Any = NO_CONTEXT) -> Any:
        argument_resolver = ArgumentResolver(arguments, self._parsed_signature, context_value)
        return self._invoke(argument_resolver)

    @abc.abstractmethod
    def _invoke(self, argument_resolver: ArgumentResolver) -> Any:
        """
        Evaluate the function against its resolved arguments.
        """
        raise NotImplementedError


class Substitution(abc.ABC):
    """
    Base class for the text substituted for each match.
    """
    @abc.abstractmethod
    def substitute(self, match: re.Match) -> str:
        raise NotImplementedError

    def __call__(self, match: re.Match) -> str:
        return self.substitute(match)
