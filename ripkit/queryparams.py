"""Lenient parsing of URL query parameters."""

from __future__ import annotations

import re
from typing import Mapping, Sequence, Union

QueryValue = Union[str, Sequence[str]]

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class RangeError(ValueError):
    """An index parameter lies outside its allowed range."""

    def __init__(self, name: str, arg: int, n: int) -> None:
        self.name = name
        self.arg = arg
        self.n = n
        super().__init__(f"{name} {arg} out of range 0-{n - 1}")


def _first(query: Mapping[str, QueryValue], name: str) -> str:
    value = query.get(name, "")
    if isinstance(value, str):
        return value
    return value[0] if value else ""


def _parse_int(text: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def parse_go_bool(text: str) -> bool:
    """Parse 1/t/T/TRUE/true/True or 0/f/F/FALSE/false/False."""
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"invalid boolean: {text!r}")


def get_int_param(query: Mapping[str, QueryValue], name: str, default: int) -> int:
    """Return the first value of the named parameter as an int, else default."""
    try:
        return _parse_int(_first(query, name))
    except ValueError:
        return default


def get_bool_param(query: Mapping[str, QueryValue], name: str, default: bool) -> bool:
    """Return the first value of the named parameter as a bool, else default."""
    try:
        return parse_go_bool(_first(query, name))
    except ValueError:
        return default


def check_in_range(name: str, arg: int, n: int) -> int:
    """Return arg, raising RangeError when the range check rejects it.

    The check accepts arg when it is non-negative or below n.
    """
    if arg >= 0 or arg < n:
        return arg
    raise RangeError(name, arg, n)