"""Emptiness checks and conditional value helpers."""

from __future__ import annotations

from collections.abc import Sized
from numbers import Number
from typing import Any


def is_empty_value(value: Any) -> bool:
    """Tell whether a value is a zero value (None, False, 0, or empty)."""
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, Number):
        return value == 0
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def if_undef(default: Any, *args: Any) -> Any:
    """Return default when no value, or only None, is supplied."""
    if not args:
        return default
    if len(args) == 1:
        return default if args[0] is None else args[0]
    return list(args)


def iif(test_value: Any, value_true: Any, value_false: Any) -> Any:
    """Return value_true unless test_value is empty."""
    if is_empty_value(test_value):
        return value_false
    return value_true


def default(value: Any, default_value: Any) -> Any:
    """Return value unless it is empty, in which case return default_value."""
    return iif(value, value, default_value)