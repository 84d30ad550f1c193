"""
# jsubst: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions over the JSON value model.

Values are plain Python objects as produced by `json.loads`:
`str`, `int`, `float`, `bool`, `None`, `list`, `dict`,
plus callables standing in for host functions.
"""

import math
from typing import Any, Optional


def is_textual(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """
    Whether a value is a JSON number.

    `bool` is a subclass of `int` in Python but is not a JSON number.
    Infinities and NaN are not representable in JSON and so are excluded.
    """
    if isinstance(value, bool):
        return False

    if isinstance(value, int):
        return True

    return isinstance(value, float) and math.isfinite(value)


def is_integral(value: Any) -> bool:
    if not is_number(value):
        return False

    return isinstance(value, int) or value.is_integer()


def is_invocable(value: Any) -> bool:
    return callable(value)


def describe_type(value: Any) -> str:
    """
    Name the JSON type of a value, for use in error messages.
    """
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if is_number(value):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, (list, tuple)):
        return 'array'
    if isinstance(value, dict):
        return 'object'
    if callable(value):
        return 'function'

    return type(value).__name__


def none_to_empty_string(string: Optional[str]) -> str:
    if string is None:
        return ''

    return string
