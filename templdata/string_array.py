"""A list of strings with element-wise string operations."""

from __future__ import annotations

from itertools import dropwhile
from typing import Any, Callable, Iterable

from templdata.string_util import (
    center_string,
    indent as _indent,
    indent_n as _indent_n,
    sprint,
    unindent as _unindent,
    wrap_string,
)

Predicate = Callable[[str], bool]


def _is_separator(ch: str) -> bool:
    if ch.isascii():
        return not (ch.isalnum() or ch == "_")
    if ch.isalpha() or ch.isdigit():
        return False
    return ch.isspace()


def _title(s: str) -> str:
    out = []
    previous = " "
    for ch in s:
        if _is_separator(previous):
            titled = ch.title()
            out.append(titled if len(titled) == 1 else ch)
        else:
            out.append(ch)
        previous = ch
    return "".join(out)


def _trim_left_func(s: str, predicate: Predicate) -> str:
    return "".join(dropwhile(predicate, s))


def _trim_right_func(s: str, predicate: Predicate) -> str:
    return "".join(dropwhile(predicate, reversed(s)))[::-1]


class StringArray(list):
    """A list of strings whose methods apply a string operation to every element."""

    def _apply(self, func: Callable[[str], str]) -> StringArray:
        return StringArray(func(str(item)) for item in self)

    def strings(self) -> list[str]:
        """Return the elements as a plain list of str."""
        return [str(item) for item in self]

    def title(self) -> StringArray:
        return self._apply(_title)

    def to_title(self) -> StringArray:
        return self._apply(str.upper)

    def to_lower(self) -> StringArray:
        return self._apply(str.lower)

    def to_upper(self) -> StringArray:
        return self._apply(str.upper)

    def trim(self, cutset: str) -> StringArray:
        return self._apply(lambda s: s.strip(cutset))

    def trim_func(self, predicate: Predicate) -> StringArray:
        return self._apply(lambda s: _trim_right_func(_trim_left_func(s, predicate), predicate))

    def trim_left(self, cutset: str) -> StringArray:
        return self._apply(lambda s: s.lstrip(cutset))

    def trim_left_func(self, predicate: Predicate) -> StringArray:
        return self._apply(lambda s: _trim_left_func(s, predicate))

    def trim_prefix(self, prefix: str) -> StringArray:
        return self._apply(lambda s: s.removeprefix(prefix))

    def trim_right(self, cutset: str) -> StringArray:
        return self._apply(lambda s: s.rstrip(cutset))

    def trim_right_func(self, predicate: Predicate) -> StringArray:
        return self._apply(lambda s: _trim_right_func(s, predicate))

    def trim_space(self) -> StringArray:
        return self._apply(str.strip)

    def trim_suffix(self, suffix: str) -> StringArray:
        return self._apply(lambda s: s.removesuffix(suffix))

    def center(self, width: int) -> StringArray:
        return self._apply(lambda s: center_string(s, width))

    def wrap(self, width: int) -> StringArray:
        return self._apply(lambda s: wrap_string(s, width))

    def indent(self, indent: str) -> StringArray:
        return self._apply(lambda s: _indent(s, indent))

    def indent_n(self, indent: int) -> StringArray:
        return self._apply(lambda s: _indent_n(s, indent))

    def unindent(self) -> StringArray:
        return self._apply(_unindent)

    def join(self, sep: Any) -> str:
        """Join the elements using the representation of sep."""
        return sprint(sep).join(self.strings())

    def sorted(self) -> StringArray:
        """Return a sorted copy."""
        return StringArray(sorted(self.strings()))


def string_array(values: Iterable[Any]) -> StringArray:
    """Build a StringArray from any iterable of values."""
    return StringArray(str(value) for value in values)