"""Process-wide registry of the helpers that build dictionaries and lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class _DictionaryLike(Protocol):
    def as_map(self) -> Any: ...

    def get_helpers(self) -> Any: ...


@runtime_checkable
class _ListLike(Protocol):
    def as_array(self) -> Any: ...

    def get_helpers(self) -> Any: ...


@dataclass
class _Registry:
    dictionary_helper: Any = None
    list_helper: Any = None


_registry = _Registry()


def set_helpers(dictionary_helper: Any, list_helper: Any) -> None:
    """Configure the default dictionary and list helpers."""
    _registry.dictionary_helper = dictionary_helper
    _registry.list_helper = list_helper


def get_helpers() -> tuple[Any, Any]:
    """Return the configured (dictionary helper, list helper) pair."""
    return _registry.dictionary_helper, _registry.list_helper


def _dictionary_helper() -> Any:
    if _registry.dictionary_helper is None:
        raise RuntimeError("DictionaryHelper not configured")
    return _registry.dictionary_helper


def _list_helper() -> Any:
    if _registry.list_helper is None:
        raise RuntimeError("ListHelper not configured")
    return _registry.list_helper


def try_as_dictionary(obj: Any) -> Any:
    """Return obj as a dictionary, converting it with the configured helper if needed."""
    if isinstance(obj, _DictionaryLike):
        return obj
    return _dictionary_helper().try_as_dictionary(obj)


def as_dictionary(obj: Any) -> Any:
    """Return obj as a dictionary; raise if it cannot be converted."""
    return try_as_dictionary(obj)


def create_dictionary(*args: int) -> Any:
    """Create a new dictionary with an optional size."""
    return _dictionary_helper().create_dictionary(*args)


def try_as_list(obj: Any) -> Any:
    """Return obj as a generic list, converting it with the configured helper if needed."""
    if isinstance(obj, _ListLike):
        return obj
    return _list_helper().try_as_list(obj)


def as_list(obj: Any) -> Any:
    """Return obj as a generic list, or a new list holding obj if it is not a sequence."""
    try:
        return try_as_list(obj)
    except (TypeError, ValueError):
        return new_list(obj)


def create_list(*args: int) -> Any:
    """Create a new generic list with optional size and capacity."""
    return _list_helper().create_list(*args)


def new_list(*args: Any) -> Any:
    """Create a new generic list from the supplied values."""
    return _list_helper().new_list(*args)


def new_string_list(*args: str) -> Any:
    """Create a new generic list from the supplied strings."""
    return _list_helper().new_string_list(*args)