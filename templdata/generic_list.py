"""The default generic list implementation."""

from __future__ import annotations

from typing import Any, Iterable

from templdata.base import BaseHelper
from templdata.registry import set_helpers
from templdata.string_array import StringArray
from templdata.string_util import sprint, to_strings
from templdata.text import String

TYPE_NAME = "base"


def _rendered(values: Iterable[Any]) -> set[str]:
    return {sprint(value) for value in values}


def _contains(items: Iterable[Any], values: Iterable[Any]) -> bool:
    rendered = _rendered(items)
    return bool(rendered) and all(sprint(value) in rendered for value in values)


class BaseList(list):
    """A list whose operations return new lists and compare elements by representation."""

    def __init__(self, items: Iterable[Any] = (), capacity: int = 0) -> None:
        super().__init__(items)
        self._capacity = capacity

    def __str__(self) -> str:
        return sprint(list(self))

    def as_array(self) -> list:
        """Return the elements as a plain list."""
        return list(self)

    def cap(self) -> int:
        return max(self._capacity, len(self))

    def capacity(self) -> int:
        return self.cap()

    def clone(self) -> BaseList:
        """Return a distinct copy."""
        return HELPER.new_list(list(self))

    def contains(self, *args: Any) -> bool:
        """Tell whether every value is in the list; an empty list contains nothing."""
        return _contains(self, args)

    def has(self, *args: Any) -> bool:
        return self.contains(*args)

    def create(self, *args: int) -> BaseList:
        """Create a new list with optional size and capacity."""
        return HELPER.create_list(*args)

    def create_dict(self, *args: int) -> Any:
        """Create a new dictionary of the matching implementation."""
        return HELPER.create_dictionary(*args)

    def first(self) -> Any:
        return self.get(0)

    def last(self) -> Any:
        return self.get(len(self) - 1)

    def get(self, *args: int) -> Any:
        """Return the element at an index (negative counts from the end), or a list of them.

        Out-of-range indexes yield None.
        """
        if not args:
            return None
        if len(args) == 1:
            index = args[0]
            if index < 0:
                index += len(self)
            return self[index] if 0 <= index < len(self) else None
        return BaseList((self.get(index) for index in args), capacity=len(args))

    def get_helpers(self) -> tuple[BaseHelper, BaseHelper]:
        """Return the (dictionary helper, list helper) of this implementation."""
        return HELPER, HELPER

    def append_items(self, *args: Any) -> BaseList:
        """Return a new list with the values added at the end."""
        return BaseList(list(self) + [HELPER.convert(value) for value in args])

    def prepend_items(self, *args: Any) -> BaseList:
        """Return a new list with the values added at the beginning."""
        return BaseList([HELPER.convert(value) for value in args] + list(self))

    def intersect(self, *args: Any) -> BaseList:
        """Return the unique elements that are also among the values."""
        include = _rendered(args)
        return BaseList(item for item in self.unique() if sprint(item) in include)

    def union(self, *args: Any) -> BaseList:
        """Return the unique elements of the list followed by the new values."""
        return self.append_items(*args).unique()

    def unique(self) -> BaseList:
        """Return a copy without duplicate elements, keeping first occurrences."""
        seen: set[str] = set()
        result = BaseList(capacity=len(self))
        for item in self:
            key = sprint(item)
            if key not in seen:
                seen.add(key)
                result.append(item)
        return result

    def without(self, *args: Any) -> BaseList:
        """Return a copy without the specified values."""
        exclude = _rendered(args)
        return BaseList((item for item in self if sprint(item) not in exclude), capacity=len(self))

    def join(self, sep: Any) -> String:
        return self.string_array().join(sep)

    def new(self, *args: Any) -> BaseList:
        """Create a new list from the values."""
        return HELPER.new_list(*args)

    def pop_items(self, *args: int) -> tuple[Any, BaseList]:
        """Return the elements at the indexes (the last one by default) and the list without them."""
        indexes = args or (len(self) - 1,)
        return self.get(*indexes), self.remove_indexes(*indexes)

    def remove_indexes(self, *args: int) -> BaseList:
        """Return a new list without the elements at the indexes."""
        discard = {index + len(self) if index < 0 else index for index in args}
        return BaseList(
            (item for position, item in enumerate(self) if position not in discard),
            capacity=len(self),
        )

    def reversed_copy(self) -> BaseList:
        return BaseList(reversed(self))

    def set(self, index: int, value: Any) -> BaseList:
        """Set the value at index, enlarging the list with None if needed."""
        if index < 0:
            raise IndexError("index must be positive number")
        if index >= len(self):
            self.extend([None] * (index + 1 - len(self)))
        self[index] = HELPER.convert(value)
        return self

    def string_array(self) -> StringArray:
        return StringArray(String(sprint(item)) for item in self)

    def strings(self) -> list[str]:
        """Return the representations of the non-None elements."""
        return to_strings(list(self))

    def type_name(self) -> String:
        return String(TYPE_NAME)

    def pretty_print(self) -> str:
        return str(self)


HELPER = BaseHelper(BaseList, type_name=TYPE_NAME)
set_helpers(HELPER, HELPER)