"""Building the template context from variable files and named values."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable

from templdata.convert_data import convert_data, load_data
from templdata.errors import ErrorArray, ManagedError
from templdata.generic_dict import BaseDict
from templdata.registry import as_dictionary, create_dictionary, set_helpers, try_as_dictionary
from templdata.string_util import split2, sprint

_log = logging.getLogger(__name__)

_STDIN = "-"


@dataclass
class _VarDef:
    value: Any
    name: str = ""
    unnamed: bool = False
    required: bool = False


def _parse_named_var(text: str) -> list[_VarDef]:
    try:
        data = convert_data(text)
    except ErrorArray:
        data = None
    if not isinstance(data, Mapping):
        name, value = split2(text, "=")
        if value == "":
            return [_VarDef(value=name, unnamed=True)]
        return [_VarDef(value=value, name=name)]
    if not data and "=" in text:
        # "value=" may be understood as an empty map rather than an empty value.
        name, value = split2(text, "=")
        return [_VarDef(value=value, name=name)]
    return [_VarDef(value=value, name=sprint(key)) for key, value in data.items()]


def _load_file(definition: _VarDef, filename: str) -> Any:
    try:
        content = load_data(filename)
    except OSError:
        if not definition.name:
            if definition.required:
                raise
            return None
        try:
            content = convert_data(filename)
        except ErrorArray:
            content = definition.value
        return as_dictionary({definition.name: content})

    name = definition.name
    if not name and not definition.unnamed:
        try:
            return try_as_dictionary(content)
        except TypeError:
            pass
    if not name:
        name = os.path.splitext(os.path.basename(filename))[0]
    return as_dictionary({name: content})


def _load_stdin(definition: _VarDef) -> Any:
    content = convert_data(sys.stdin.read())
    if not definition.name:
        try:
            return try_as_dictionary(content)
        except TypeError:
            pass
    return as_dictionary({definition.name or "STDIN": content})


def create_context(
    vars_files: Iterable[str] = (),
    vars_files_if_exist: Iterable[str] = (),
    named_vars: Iterable[str] = (),
    mode: str = "",
    ignore_missing_files: bool = False,
) -> BaseDict | None:
    """Build the context dictionary from variable files and "name=value" arguments.

    Required files that are missing raise ManagedError unless ignore_missing_files is set;
    optional ones are skipped. "-" reads the data from standard input. Returns None when
    nothing was supplied and no mode was given.
    """
    context = create_dictionary() if mode else None

    definitions = [_VarDef(value=path, required=True) for path in vars_files]
    definitions += [_VarDef(value=path) for path in vars_files_if_exist]
    for text in named_vars:
        definitions += _parse_named_var(text)

    for definition in definitions:
        filename = definition.value if isinstance(definition.value, str) else ""
        if not filename:
            if context is None:
                context = create_dictionary()
            context.set(definition.name, definition.value)
            continue

        try:
            if filename == _STDIN:
                content = _load_stdin(definition)
            else:
                content = _load_file(definition, filename)
        except OSError as err:
            if ignore_missing_files:
                _log.info("Import: %s not found. Skipping the import", filename)
                continue
            raise ManagedError(f"Error {err} while loading variable file {filename}") from err
        except (ValueError, ErrorArray) as err:
            raise ManagedError(f"Error {err} while loading variable file {filename}") from err

        if content is None:
            continue
        if context is None:
            context = content.create()
            set_helpers(*content.get_helpers())
        for key, value in content.as_map().items():
            context.set(key, value)

    return context