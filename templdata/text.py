"""An enhanced string type with the text helpers used by templates."""

from __future__ import annotations

import math
import re
import unicodedata
from itertools import dropwhile, groupby
from typing import Any, Callable

from templdata.string_array import StringArray
from templdata.string_util import (
    center_string,
    indent as _indent,
    indent_n as _indent_n,
    to_strings,
    unindent as _unindent,
    wrap_string,
)

Predicate = Callable[[str], bool]

_REPLACEMENT_FORMAT = '"\u2660{}"'
_REPLACEMENT_REGEX = re.compile('"\u2660(\\d+)"')
_QUOTES_REGEX = re.compile('[`"]')

_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _quote(s: str) -> str:
    out = ['"']
    for ch in s:
        code = ord(ch)
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch == " " or (ch.isprintable() and not ch.isspace()):
            out.append(ch)
        elif code < 0x20 or code == 0x7F:
            out.append(f"\\x{code:02x}")
        elif code < 0x10000:
            out.append(f"\\u{code:04x}")
        else:
            out.append(f"\\U{code:08x}")
    out.append('"')
    return "".join(out)


def _is_punct(ch: str) -> bool:
    return unicodedata.category(ch).startswith("P")


def _split(s: str, sep: str, keep_sep: bool, n: int) -> StringArray:
    if n == 0:
        return StringArray()
    if sep == "":
        chars = list(s)
        if 0 < n < len(chars):
            chars = chars[: n - 1] + ["".join(chars[n - 1 :])]
        return StringArray(chars)
    parts = s.split(sep) if n < 0 else s.split(sep, n - 1)
    if keep_sep:
        parts = [part + sep for part in parts[:-1]] + parts[-1:]
    return StringArray(parts)


def _trim_left_func(s: str, predicate: Predicate) -> str:
    return "".join(dropwhile(predicate, s))


def _trim_right_func(s: str, predicate: Predicate) -> str:
    return "".join(dropwhile(predicate, reversed(s)))[::-1]


def _index_all(s: str, substr: str) -> list[int]:
    if not substr or not s:
        return []
    result = []
    pos = s.find(substr)
    while pos >= 0:
        result.append(pos)
        pos = s.find(substr, pos + len(substr))
    return result


def _escaped(s: str, index: int) -> bool:
    count = 0
    while index - count >= 0 and s[index - count] == "\\":
        count += 1
    return count % 2 == 1


class String(str):
    """A str with additional text manipulation methods."""

    def compare(self, other: str) -> int:
        """Return -1, 0 or 1 comparing self with other lexicographically."""
        return (str(self) > other) - (str(self) < other)

    def contains(self, substr: str) -> bool:
        return substr in self

    def contains_any(self, chars: str) -> bool:
        return any(ch in self for ch in chars)

    def equal_fold(self, other: str) -> bool:
        return self.casefold() == other.casefold()

    def fields(self) -> StringArray:
        return StringArray(self.split())

    def fields_func(self, predicate: Predicate) -> StringArray:
        """Split at each run of characters satisfying predicate."""
        return StringArray("".join(group) for is_sep, group in groupby(self, key=predicate) if not is_sep)

    def fields_id(self) -> StringArray:
        """Split at every character that cannot be part of an identifier."""
        return self.fields_func(lambda ch: not (ch.isalpha() or unicodedata.category(ch).startswith("N") or ch == "_"))

    def has_prefix(self, prefix: str) -> bool:
        return self.startswith(prefix)

    def has_suffix(self, suffix: str) -> bool:
        return self.endswith(suffix)

    def index_any(self, chars: str) -> int:
        return next((i for i, ch in enumerate(self) if ch in chars), -1)

    def index_func(self, predicate: Predicate) -> int:
        return next((i for i, ch in enumerate(self) if predicate(ch)), -1)

    def last_index_any(self, chars: str) -> int:
        return max((self.rfind(ch) for ch in chars), default=-1)

    def last_index_func(self, predicate: Predicate) -> int:
        return next((i for i in range(len(self) - 1, -1, -1) if predicate(self[i])), -1)

    def join_values(self, *args: Any) -> String:
        """Join the representations of args using self as separator."""
        return String(str(self).join(to_strings(list(args))))

    def lines(self) -> StringArray:
        return self.split_all("\n")

    def map_runes(self, mapping: Callable[[str], str | None]) -> String:
        """Map every character; characters mapped to None are dropped."""
        return String("".join(result for result in map(mapping, self) if result is not None))

    def repeat(self, count: int) -> String:
        if count < 0:
            raise ValueError("negative repeat count")
        return String(str(self) * count)

    def split_all(self, sep: str) -> StringArray:
        return _split(str(self), sep, False, -1)

    def split_n(self, sep: str, n: int) -> StringArray:
        return _split(str(self), sep, False, n)

    def split_after(self, sep: str) -> StringArray:
        return _split(str(self), sep, True, -1)

    def split_after_n(self, sep: str, n: int) -> StringArray:
        return _split(str(self), sep, True, n)

    def title(self) -> String:
        return String(StringArray([str(self)]).title()[0])

    def to_lower(self) -> String:
        return String(self.lower())

    def to_upper(self) -> String:
        return String(self.upper())

    def to_title(self) -> String:
        return String(self.upper())

    def trim(self, cutset: str) -> String:
        return String(self.strip(cutset)) if cutset else String(self)

    def trim_func(self, predicate: Predicate) -> String:
        return String(_trim_right_func(_trim_left_func(self, predicate), predicate))

    def trim_left(self, cutset: str) -> String:
        return String(self.lstrip(cutset)) if cutset else String(self)

    def trim_left_func(self, predicate: Predicate) -> String:
        return String(_trim_left_func(self, predicate))

    def trim_right(self, cutset: str) -> String:
        return String(self.rstrip(cutset)) if cutset else String(self)

    def trim_right_func(self, predicate: Predicate) -> String:
        return String(_trim_right_func(self, predicate))

    def trim_prefix(self, prefix: str) -> String:
        return String(self.removeprefix(prefix))

    def trim_suffix(self, suffix: str) -> String:
        return String(self.removesuffix(suffix))

    def trim_space(self) -> String:
        return String(self.strip())

    def quote(self) -> String:
        """Return the string between double quotes with escapes applied."""
        return String(_quote(str(self)))

    def escape(self) -> String:
        """Return the escaped representation without surrounding quotes."""
        return String(self.quote()[1:-1])

    def center(self, width: int) -> String:  # type: ignore[override]
        return String(center_string(str(self), width))

    def wrap(self, width: int) -> String:
        return String(wrap_string(str(self), width))

    def replace_n(self, old: str, new: str, n: int) -> String:
        """Replace the first n occurrences of old (all of them if n < 0)."""
        return String(str(self).replace(old, new, n))

    def indent(self, indent: str) -> String:
        return String(_indent(str(self), indent))

    def indent_n(self, indent: int) -> String:
        return String(_indent_n(str(self), indent))

    def unindent(self) -> String:
        return String(_unindent(str(self)))

    def get_word_at_position(self, pos: int, *args: str) -> tuple[String, int]:
        """Return the word around pos and its start position, or ("", -1)."""
        if pos < 0 or pos >= len(self):
            return String(""), -1
        accept = "".join(args)

        def is_break(ch: str) -> bool:
            return ch.isspace() or (_is_punct(ch) and ch not in accept)

        begin = end = pos
        while begin >= 0 and not is_break(self[begin]):
            begin -= 1
        while end < len(self) and not is_break(self[end]):
            end += 1
        if begin != end:
            begin += 1
        return String(self[begin:end]), begin

    def select_word(self, pos: int, *args: str) -> String:
        return self.get_word_at_position(pos, *args)[0]

    def index_all(self, substr: str) -> list[int]:
        """Return every non-overlapping position of substr."""
        return _index_all(str(self), substr)

    def get_context_at_position(self, pos: int, left: str, right: str) -> tuple[String, int]:
        """Extend the selection around pos to the enclosing left/right boundaries."""
        s = str(self)
        if pos < 0 or pos >= len(s):
            return String(""), -1

        def find_left(p: int) -> int:
            return p if not left else s[:p].rfind(left)

        begin, end = find_left(pos), pos + 1
        if begin >= 0 and right:
            end = s[pos:].find(right)
            if end >= 0:
                end += pos + len(right)
                back = find_left(end - len(right))
                if left and back != begin:
                    start = begin + len(left)
                    lefts = _index_all(s[start:], left)
                    rights = _index_all(s[start:], right)
                    for i, left_pos in enumerate(lefts):
                        if i == len(rights):
                            return String(""), -1
                        if left_pos > rights[i]:
                            return String(s[begin : rights[i] + start + len(right)]), begin
                    if len(rights) > len(lefts):
                        return String(s[begin : rights[len(lefts)] + start + len(right)]), begin
                    end = -1
        if begin < 0 or end < 0:
            return String(""), -1
        return String(s[begin:end]), begin

    def select_context(self, pos: int, left: str, right: str) -> String:
        return self.get_context_at_position(pos, left, right)[0]

    def protect(self) -> tuple[String, StringArray]:
        """Replace quoted strings by tokens; return the result and the replaced strings."""
        s = str(self)
        result: list[str] = []
        array = StringArray()
        while (match := _QUOTES_REGEX.search(s)) is not None:
            pos = match.start()
            quote_char = s[pos]
            end = s.find(quote_char, pos + 1)
            while end >= 0 and quote_char == '"' and _escaped(s, end - 1):
                end = s.find('"', end + 1)
            if end < 0:
                break
            array.append(s[pos : end + 1])
            result.append(s[:pos] + _REPLACEMENT_FORMAT.format(len(array) - 1))
            s = s[end + 1 :]
        result.append(s)
        return String("".join(result)), array

    def restore_protected(self, array: list[str]) -> String:
        """Restore a string transformed by protect to its original value."""
        return String(_REPLACEMENT_REGEX.sub(lambda m: str(array[int(m.group(1))]), str(self)))

    def add_line_number(self, space: int) -> String:
        """Prefix every line with its number, right aligned on space characters."""
        lines = self.lines()
        if space <= 0:
            space = int(math.log10(len(lines))) + 1
        return String("\n".join(f"{number:>{space}d} {line}" for number, line in enumerate(lines, 1)))

    def parse_bool(self) -> bool:
        """Return False for clearly false values (empty, 0, off, no, n, false, f)."""
        text = str(self)
        if text in _TRUE_VALUES:
            return True
        if text in _FALSE_VALUES:
            return False
        return text.upper() not in {"", "N", "NO", "OFF"}