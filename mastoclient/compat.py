"""Lenient decoding of values that servers send in more than one JSON shape."""

from __future__ import annotations

from typing import Any

_TRUE_STRINGS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_STRINGS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_id(value: Any) -> str:
    """Return an identifier as a string, whether it was sent as a string or an integer.

    A missing value (``None``) becomes the empty string.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise TypeError(f"cannot decode {value!r} as an identifier")


def parse_sbool(value: Any) -> bool:
    """Return a boolean sent either as a JSON boolean or as a boolean string."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        if value in _TRUE_STRINGS:
            return True
        if value in _FALSE_STRINGS:
            return False
        raise ValueError(f"invalid boolean string: {value!r}")
    raise TypeError(f"cannot decode {value!r} as a boolean")