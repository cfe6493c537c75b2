"""The default dictionary implementation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable

from templdata.base import BaseHelper
from templdata.generic_list import HELPER, TYPE_NAME, BaseList
from templdata.registry import try_as_list
from templdata.string_array import StringArray
from templdata.string_util import sprint
from templdata.text import String


def _is_dictionary(obj: Any) -> bool:
    return callable(getattr(type(obj), "as_map", None))


def _deep_copy(value: Any) -> Any:
    try:
        return HELPER.try_as_dictionary(value).clone()
    except TypeError:
        pass
    try:
        return HELPER.try_as_list(value).clone()
    except TypeError:
        return value


def _deep_merge(target: Any, source: Any) -> Any:
    target_map = target.as_map()
    for key, source_value in list(source.as_map().items()):
        if key not in target_map:
            target_map[key] = source_value
            continue
        target_value = target_map[key]
        if _is_dictionary(target_value) and _is_dictionary(source_value):
            target_map[key] = _deep_merge(target_value, source_value)
    return target


def _native(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {sprint(key): _native(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        items = [_native(item) for item in value]
        if len(items) == 1 and isinstance(items[0], dict):
            # A list holding a single mapping is reduced to that mapping.
            return items[0]
        return items
    if isinstance(value, str):
        return str(value)
    return value


class BaseDict(dict):
    """A dictionary with string keys whose values are kept as dictionaries and lists."""

    def __str__(self) -> str:
        entries = " ".join(f"{key}:{sprint(self[key])}" for key in self.keys_as_string())
        return f"dict[{entries}]"

    def add(self, key: Any, value: Any) -> BaseDict:
        """Add value to key; an existing value becomes a list holding both."""
        name = sprint(key)
        if name in self:
            current = self[name]
            try:
                current_list = try_as_list(current)
            except TypeError:
                self[name] = self.create_list().append_items(current, value)
            else:
                self[name] = current_list.append_items(value)
        else:
            self[name] = HELPER.convert(value)
        return self

    def as_map(self) -> BaseDict:
        """Return the underlying mapping (the dictionary itself)."""
        return self

    def clone(self, *args: Any) -> BaseDict:
        """Return a deep copy holding only the given keys, or all keys if none are given."""
        keys: Iterable[Any] = args or tuple(self.get_keys())
        result = self.create()
        for key in keys:
            value = self.fetch(key)
            if value is not None:
                value = _deep_copy(value)
            result.set(key, value)
        return result

    def create(self, *args: int) -> BaseDict:
        """Create a new empty dictionary; one optional size argument is accepted."""
        return HELPER.create_dictionary(*args)

    def create_list(self, *args: int) -> BaseList:
        """Create a new list with optional size and capacity."""
        return HELPER.create_list(*args)

    def default(self, key: Any, default_value: Any) -> Any:
        """Return the value of key, or default_value if the key is absent."""
        if not self.has(key):
            return default_value
        return self.fetch(key)

    def delete(self, key: Any, *args: Any) -> BaseDict:
        """Remove the keys in order; raise KeyError at the first one that is missing."""
        return self._delete((key, *args), must_exist=True)

    def flush(self, *args: Any) -> BaseDict:
        """Remove the given keys, or every key if none are given."""
        keys = args or tuple(self.keys())
        return self._delete(keys, must_exist=False)

    def _delete(self, keys: Iterable[Any], must_exist: bool) -> BaseDict:
        for key in keys:
            if must_exist and not self.has(key):
                raise KeyError(f"key {sprint(key)} not found")
            dict.pop(self, sprint(key), None)
        return self

    def fetch(self, *args: Any) -> Any:
        """Return the value of one key, or a list of the values of several keys."""
        if not args:
            return None
        if len(args) == 1:
            return dict.get(self, sprint(args[0]))
        return BaseList((self.fetch(key) for key in args), capacity=len(args))

    def get_helpers(self) -> tuple[BaseHelper, BaseHelper]:
        """Return the (dictionary helper, list helper) of this implementation."""
        return HELPER, HELPER

    def get_keys(self) -> BaseList:
        """Return the keys in alphabetical order."""
        return BaseList(self.keys_as_string(), capacity=len(self))

    def get_values(self) -> BaseList:
        """Return the values in alphabetical order of their keys."""
        return BaseList((self[key] for key in self.keys_as_string()), capacity=len(self))

    def has(self, *args: Any) -> bool:
        """Tell whether every key is present; an empty dictionary has nothing."""
        return all(sprint(key) in self for key in args) and len(self) > 0

    def keys_as_string(self) -> StringArray:
        """Return the keys in alphabetical order."""
        return StringArray(String(key) for key in sorted(self))

    def merge(self, dictionary: Any, *args: Any) -> Any:
        """Merge the dictionaries into this one; existing values are kept, nested dictionaries merged."""
        target: Any = self
        for source in (dictionary, *args):
            if source is None:
                continue
            if not _is_dictionary(source):
                source = HELPER.as_dictionary(source)
            target = _deep_merge(target, source)
        return target

    def native(self) -> dict:
        """Return the content as plain dicts, lists and scalars."""
        return _native(self)

    def omit(self, key: Any, *args: Any) -> BaseDict:
        """Return a deep copy without the given keys."""
        excluded = {sprint(item) for item in (key, *args)}
        keep = [name for name in self if name not in excluded]
        return self.clone(*keep) if keep else self.create()

    def pop_keys(self, *args: Any) -> Any:
        """Remove the keys and return their values (a list if several keys are given)."""
        if not args:
            return None
        result = self.fetch(*args)
        self._delete(args, must_exist=False)
        return result

    def set(self, key: Any, value: Any) -> BaseDict:
        """Set key to value, converting mappings and sequences."""
        self[sprint(key)] = HELPER.convert(value)
        return self

    def transpose(self) -> BaseDict:
        """Return a dictionary mapping each value to its key (or to a list of keys)."""
        result = self.create()
        for key in self.get_keys():
            value = self.fetch(key)
            try:
                values = try_as_list(value)
            except TypeError:
                result.add(value, key)
            else:
                for item in values.as_array():
                    result.add(item, key)
        return result

    def type_name(self) -> String:
        return String(TYPE_NAME)

    def pretty_print(self) -> str:
        return str(self)


HELPER.dict_type = BaseDict