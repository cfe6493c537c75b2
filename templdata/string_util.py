"""String helpers: formatting, wrapping, centering and indentation."""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from templdata.utils import is_empty_value


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    sign = "-" if value < 0 else ""
    parts = Decimal(repr(abs(value))).as_tuple()
    raw = "".join(str(d) for d in parts.digits)
    digits = raw.rstrip("0")
    point = len(digits) + parts.exponent + (len(raw) - len(digits))
    exponent = point - 1
    if exponent < -4 or exponent >= 6:
        mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
        exp_sign = "-" if exponent < 0 else "+"
        return f"{sign}{mantissa}e{exp_sign}{abs(exponent):02d}"
    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return sign + digits + "0" * (point - len(digits))
    return f"{sign}{digits[:point]}.{digits[point:]}"


def _plain_container(value: Any) -> bool:
    return type(value).__str__ is object.__str__


def _sorted_keys(mapping: Mapping) -> list:
    try:
        return sorted(mapping)
    except TypeError:
        return sorted(mapping, key=sprint)


def sprint(value: Any) -> str:
    """Render a value in the compact textual form used throughout the package."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (bytes, bytearray)):
        return "[" + " ".join(str(b) for b in value) + "]"
    if isinstance(value, Mapping) and _plain_container(value):
        entries = (f"{sprint(key)}:{sprint(value[key])}" for key in _sorted_keys(value))
        return "map[" + " ".join(entries) + "]"
    if isinstance(value, (list, tuple)) and _plain_container(value):
        return "[" + " ".join(sprint(item) for item in value) + "]"
    return str(value)


def center_string(s: str, width: int) -> str:
    """Return s centered within width."""
    length = len(s)
    if length > width:
        return s
    left = (width - length) // 2
    right = width - left - length
    return " " * left + s + " " * right


def wrap_string(s: str, width: int) -> str:
    """Wrap long lines of s so that they do not exceed width when possible."""
    result = []
    for line in s.split("\n"):
        current: list[str] = []
        length = 0
        for word in line.rstrip("\t ").split():
            if length > 0 and length + len(word) > width:
                result.append(" ".join(current))
                current, length = [], 0
            length += len(word)
            if current:
                length += 1
            current.append(word)
        result.append(" ".join(current))
    return "\n".join(result)


def interface_to_string(value: Any) -> str:
    """Return the string representation of any value."""
    return value if isinstance(value, str) else sprint(value)


def concat(*args: Any) -> str:
    """Concatenate the representations of all arguments without separator."""
    return "".join(sprint(arg) for arg in args)


def to_strings(value: Any) -> list[str]:
    """Convert a value, or each element of a sequence, to strings (None is skipped)."""
    if value is None:
        return []
    if isinstance(value, (list, tuple, bytes, bytearray)):
        return [sprint(item) for item in value if item is not None]
    return [sprint(value)]


def to_interfaces(*args: str) -> list:
    """Return the supplied strings as a list."""
    return list(args)


def split_lines(content: Any) -> list[str]:
    """Split content into lines, ignoring one trailing newline."""
    text = interface_to_string(content)
    return text.removesuffix("\n").split("\n")


def join_lines(*args: Any) -> str:
    """Join the representations of the arguments with newlines."""
    return "\n".join(sprint(arg) for arg in args)


def split2(source: str, sep: str) -> tuple[str, str]:
    """Split source at the first sep, returning left and right parts."""
    left, _, right = source.partition(sep)
    return left, right


def unindent(s: str) -> str:
    """Remove the common leading whitespace if every non-blank line shares it."""
    lines = s.split("\n")
    if len(lines) <= 1:
        return s
    spaces: str | None = None
    result = []
    for line in lines:
        if spaces is None:
            if not line.strip():
                result.append(line)
                continue
            spaces = line[: len(line) - len(line.lstrip())]
        if not line.startswith(spaces) and line.strip():
            return s
        result.append(line.removeprefix(spaces))
    return "\n".join(result)


def indent(s: str, indent: str) -> str:
    """Prefix every line of s with indent."""
    return "\n".join(indent + line for line in s.split("\n"))


def indent_n(s: str, indent: int) -> str:
    """Prefix every line of s with the given number of spaces."""
    return globals_indent(s, " " * indent)


globals_indent = indent


def _is_struct(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def pretty_print_struct(obj: Any) -> str:
    """Return a readable listing of an object's non-empty public fields."""
    if _is_struct(obj):
        items = [(field.name, getattr(obj, field.name)) for field in dataclasses.fields(obj)]
    else:
        items = list(vars(obj).items())

    rows = []
    for name, value in items:
        if name.startswith("_") or is_empty_value(value):
            continue
        lines = unindent(sprint(value)).strip().split("\n")
        if _is_struct(value):
            text = "\n" + indent_n("\n".join(lines), 4)
        elif len(lines) > 1:
            text = lines[0] + " ..."
        else:
            text = lines[0]
        rows.append((name, text))

    width = max((len(name) for name, _ in rows), default=0)
    return "".join(f"{name:<{width}} = {text}\n" for name, text in rows)