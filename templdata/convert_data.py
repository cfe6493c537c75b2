"""Conversion of text into data, and of data into native values and bash declarations."""

from __future__ import annotations

import dataclasses
import json
import re
import sys
from collections.abc import Mapping
from typing import Any, Callable

import yaml

from templdata.errors import ErrorArray
from templdata.string_util import sprint, to_strings
from templdata.text import String
from templdata.utils import is_empty_value

Converter = Callable[[str], Any]

_TAG_CATEGORIES = ("hcl", "json", "yaml", "xml", "toml")
_ASSIGNMENT = re.compile(r"[ \t]*=[ \t]*")
_BLANKS = re.compile(r"[ \t]+")


def _json_converter(data: str) -> Any:
    return json.loads(data)


def _yaml_converter(data: str) -> Any:
    return yaml.safe_load(data)


_converters: dict[str, Converter] = {
    "json": _json_converter,
    "yaml": _yaml_converter,
}


def register_converter(name: str, converter: Converter | None) -> None:
    """Register a text converter under name; passing None removes it.

    Converters are tried in alphabetical order of their names and must raise on failure.
    """
    if converter is None:
        _converters.pop(name, None)
    else:
        _converters[name] = converter


def _simplified(data: str) -> Any:
    """Convert a relaxed "a = 10 b = text" form by rewriting it as YAML."""
    if "=" not in data:
        raise ValueError("Not simplifiable")
    text = _ASSIGNMENT.sub(":", data)
    text = _BLANKS.sub("\n", text)
    return convert_data(text.replace(":", ": ") + "\n")


def convert_data(data: str) -> Any:
    """Return the data represented by the text (JSON, YAML or the relaxed assignment form).

    Raises ErrorArray holding the error of every converter that was tried.
    """
    errors: list[BaseException] = []
    for name in sorted(_converters):
        try:
            result = _converters[name](data)
        except Exception as exc:  # converters are pluggable and may raise anything
            errors.append(ValueError(f"Trying {name}: {exc}"))
            continue
        # A converter that cannot make sense of the text may hand it back as a plain string.
        if isinstance(result, str) and result == data and any(ch in data for ch in "=:{}"):
            try:
                simplified = _simplified(data)
            except (ValueError, ErrorArray):
                raise ErrorArray(errors) from None
            if sprint(simplified) != data:
                return simplified
            raise ErrorArray(errors)
        return result

    if errors:
        try:
            return _simplified(data)
        except (ValueError, ErrorArray):
            raise ErrorArray(errors) from None
    return None


def load_data(filename: str) -> Any:
    """Return the data held in a file (JSON, YAML or the relaxed assignment form)."""
    with open(filename, encoding="utf-8") as handle:
        return convert_data(handle.read())


def quote(s: str) -> str:
    """Quote s if it holds characters that are significant in bash array syntax."""
    if any(ch in s for ch in " \t,[]()"):
        return str(String(s).quote())
    return s


def _as_sequence(value: Any) -> list | None:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return None


def _to_bash(value: Any, level: int) -> str:
    if isinstance(value, str):
        if any(ch in value for ch in " \t\n[]()"):
            return str(String(value).quote())
        return str(value)

    sequence = _as_sequence(value)
    if sequence is not None:
        items = [quote(item) for item in to_strings(sequence)]
        if level == 2:
            return ",".join(items)
        return f"({' '.join(items)})"

    if isinstance(value, Mapping):
        keys = sorted(value, key=sprint)
        if level == 0:
            lines = []
            for key in keys:
                name = sprint(key)
                item = value[key]
                rendered = _to_bash(item, level + 1)
                if _as_sequence(item) is not None:
                    lines.append(f"declare -a {name}\n{name}={rendered}")
                elif isinstance(item, Mapping):
                    lines.append(f"declare -A {name}\n{name}={rendered}")
                else:
                    lines.append(f"{name}={rendered}")
            return "\n".join(lines)
        if level == 1:
            entries = []
            for key in keys:
                rendered = _to_bash(value[key], level + 1).replace("$", "\\$")
                entries.append(f"[{sprint(key)}]={rendered}")
            return f"({' '.join(entries)})"
        return ",".join(f"{sprint(key)}={quote(_to_bash(value[key], level + 1))}" for key in keys)

    return sprint(value)


def to_bash(value: Any) -> str:
    """Return the bash 4 variable declarations representing value."""
    return _to_bash(marshal_go(value), 0)


def is_exported(identifier: str) -> bool:
    """Tell whether an identifier starts with an upper case letter."""
    return bool(identifier) and identifier[0].isupper()


def _get_tags(cls: type, fields: tuple) -> tuple[list[tuple[str, set[str]]], int | None]:
    tags: list[tuple[str, set[str]]] = []
    key_index: int | None = None
    error: str | None = None
    for index, field in enumerate(fields):
        tag = next((field.metadata[category] for category in _TAG_CATEGORIES if field.metadata.get(category)), "")
        name, *options = tag.split(",")
        option_set = set(options)
        if "key" in option_set:
            if key_index is not None:
                error = (
                    f"Multiple keys defined on struct '{cls.__name__}' "
                    f"('{fields[key_index].name}' and '{field.name}')"
                )
            key_index = index
        tags.append((name, option_set))
    if error is not None:
        raise ValueError(error)
    return tags, key_index


def _marshal_struct(obj: Any) -> dict:
    fields = dataclasses.fields(obj)
    tags, key_index = _get_tags(type(obj), fields)
    result: dict[str, Any] = {}
    for field, (name, options) in zip(fields, tags):
        if field.name.startswith("_") or name == "-":
            continue
        raw = getattr(obj, field.name)
        omit_empty = "omitempty" in options
        if omit_empty and is_empty_value(raw):
            continue
        name = name or field.name

        if options & {"inline", "squash"}:
            nested = marshal_go(raw)
            if not isinstance(nested, dict):
                raise ValueError(f"Cannot apply inline or squash to non struct on field '{field.name}'")
            result.update(nested)
            continue

        converted = marshal_go(raw)
        if omit_empty and isinstance(converted, dict) and not converted:
            continue
        if key_index is not None:
            result[sprint(getattr(obj, fields[key_index].name))] = {name: converted}
        else:
            result[name] = converted
    return result


def marshal_go(value: Any) -> Any:
    """Convert any object into plain values: scalars, dicts with string keys and lists.

    Objects may customise this with a ``marshal_go(value)`` method. Dataclass fields
    are named by their ``hcl``, ``json``, ``yaml``, ``xml`` or ``toml`` metadata tag,
    which accepts the options ``omitempty``, ``inline``, ``squash`` and ``key``.
    """
    if value is None:
        return None

    custom = getattr(value, "marshal_go", None)
    if callable(custom) and not isinstance(value, type):
        return custom(value)

    if isinstance(value, bool):
        return bool(value)
    if isinstance(value, str):
        return str(value)
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return float(value)
    if isinstance(value, (list, tuple, bytes, bytearray)):
        items = [marshal_go(item) for item in value]
        if len(items) == 1 and isinstance(items[0], dict):
            # A list holding a single mapping is reduced to that mapping.
            return items[0]
        return items
    if isinstance(value, Mapping):
        return {sprint(key): marshal_go(item) for key, item in value.items()}
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _marshal_struct(value)

    print(f"Unknown type {type(value).__name__} : {sprint(value)}", file=sys.stderr)
    return sprint(value)