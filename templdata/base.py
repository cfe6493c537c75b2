"""Conversion of arbitrary values into one implementation of dictionaries and lists."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from templdata.string_util import sprint


def _is_dictionary(obj: Any) -> bool:
    return callable(getattr(type(obj), "as_map", None))


def _is_list(obj: Any) -> bool:
    return callable(getattr(type(obj), "as_array", None))


def _is_sequence(obj: Any) -> bool:
    return isinstance(obj, (list, tuple))


def _type_name_of(obj: Any) -> str:
    method = getattr(obj, "type_name", None)
    return str(method()) if callable(method) else ""


def need_conversion(obj: Any, strict: bool, type_name: str) -> bool:
    """Tell whether obj, or anything nested in it, must be converted.

    With strict, dictionaries and lists of another implementation also need conversion.
    """
    if obj is None:
        return False
    if isinstance(obj, Mapping):
        if not _is_dictionary(obj) or (strict and _type_name_of(obj) != type_name):
            return True
        return any(need_conversion(value, strict, type_name) for value in obj.values())
    if _is_sequence(obj):
        if not _is_list(obj) or (strict and _type_name_of(obj) != type_name):
            return True
        return any(need_conversion(item, strict, type_name) for item in obj)
    return False


class BaseHelper:
    """Builds and converts the dictionaries and lists of one implementation.

    ``list_type`` is called as ``list_type(items, capacity=n)`` and ``dict_type``
    as ``dict_type(mapping)``. The dictionary type may be assigned later.
    """

    def __init__(
        self,
        list_type: Callable[..., Any],
        dict_type: Callable[..., Any] | None = None,
        type_name: str = "base",
    ) -> None:
        self.list_type = list_type
        self.dict_type = dict_type
        self.type_name = type_name

    def _make_dict(self, mapping: dict) -> Any:
        if self.dict_type is None:
            raise RuntimeError("dictionary type not configured")
        return self.dict_type(mapping)

    def _make_list(self, items: list, capacity: int = 0) -> Any:
        return self.list_type(items, capacity=max(capacity, len(items)))

    def _needs_conversion(self, obj: Any, strict: bool) -> bool:
        return need_conversion(obj, strict, self.type_name)

    def as_list(self, obj: Any) -> Any:
        """Convert obj to a list; raise TypeError if impossible."""
        return self.try_as_list(obj)

    def as_dictionary(self, obj: Any) -> Any:
        """Convert obj to a dictionary; raise TypeError if impossible."""
        return self.try_as_dictionary(obj)

    def convert(self, obj: Any) -> Any:
        """Return obj converted to a dictionary or list, or unchanged."""
        return self.try_convert(obj)[0]

    def create_list(self, *args: int) -> Any:
        """Create a list with optional size and capacity."""
        if len(args) > 2:
            raise ValueError("create_list only accepts 2 arguments, size and capacity")
        size = args[0] if args else 0
        capacity = args[1] if len(args) > 1 else 0
        if size < 0 or capacity < 0:
            raise ValueError("size and capacity must not be negative")
        return self._make_list([None] * size, capacity)

    def create_dictionary(self, *args: int) -> Any:
        """Create an empty dictionary; one optional size argument is accepted."""
        if len(args) > 1:
            raise ValueError("create_dictionary only accepts 1 argument for size")
        return self._make_dict({})

    def try_as_dictionary(self, obj: Any) -> Any:
        """Convert obj to a dictionary of this implementation if possible."""
        return self._try_as_dictionary(obj, strict=False)

    def try_as_dictionary_strict(self, obj: Any) -> Any:
        """Like try_as_dictionary, also converting dictionaries of other implementations."""
        return self._try_as_dictionary(obj, strict=True)

    def _try_as_dictionary(self, obj: Any, strict: bool) -> Any:
        if _is_dictionary(obj):
            result = obj
        elif obj is None:
            result = self.create_dictionary()
        elif isinstance(obj, Mapping):
            return self._make_dict({sprint(key): self.convert(value) for key, value in obj.items()})
        else:
            raise TypeError(f"Object cannot be converted to dictionary: {type(obj).__name__}")
        if self._needs_conversion(result, strict):
            result = self._make_dict({key: self.convert(value) for key, value in result.as_map().items()})
        return result

    def try_as_list(self, obj: Any) -> Any:
        """Convert obj to a list of this implementation if possible."""
        return self._try_as_list(obj)

    def try_as_list_strict(self, obj: Any) -> Any:
        """Convert obj to a list of this implementation if possible."""
        return self._try_as_list(obj)

    def _try_as_list(self, obj: Any) -> Any:
        if _is_list(obj):
            result = obj
        elif obj is None:
            result = self.create_list()
        elif _is_sequence(obj):
            return self._make_list([self.convert(item) for item in obj])
        else:
            raise TypeError(f"Object cannot be converted to generic list: {type(obj).__name__}")
        if self._needs_conversion(result, False):
            result = self._make_list([self.convert(item) for item in result.as_array()])
        return result

    def try_convert(self, obj: Any) -> tuple[Any, bool]:
        """Return (converted, True) if obj became a dictionary or list, else (obj, False)."""
        if obj is not None:
            try:
                return self.try_as_dictionary(obj), True
            except TypeError:
                pass
            try:
                return self.try_as_list(obj), True
            except TypeError:
                pass
        return obj, False

    def new_list(self, *args: Any) -> Any:
        """Create a list from the values; a single sequence argument is unpacked."""
        items = list(args[0]) if len(args) == 1 and _is_sequence(args[0]) else list(args)
        return self._make_list([self.convert(item) for item in items], len(items))

    def new_string_list(self, *args: str) -> Any:
        """Create a list from the supplied strings."""
        return self._make_list(list(args), len(args))