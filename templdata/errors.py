"""Error types and helpers for reporting and collecting failures."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Iterator

_RED = "\x1b[31m"
_RESET = "\x1b[0m"


class ManagedError(Exception):
    """An error that is handled properly and needs no stack trace."""


class TemplateNotFoundError(Exception):
    """Raised when a named template does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Template {self.name} not found"


class ErrorArray(Exception):
    """A collection of errors reported together."""

    def __init__(self, errors: Iterable[BaseException | None] = ()) -> None:
        self.errors = list(errors)
        super().__init__(*self.errors)

    def __iter__(self) -> Iterator[BaseException | None]:
        return iter(self.errors)

    def __str__(self) -> str:
        return "\n".join(str(error) for error in self.errors if error is not None)

    def as_error(self) -> BaseException | None:
        """Return None when empty, the sole error when alone, otherwise the array."""
        if not self.errors:
            return None
        if len(self.errors) == 1:
            return self.errors[0]
        return self


def must(*args: Any) -> Any:
    """Return the leading values if the last one is None, otherwise raise.

    The last argument is treated as an error indicator.
    """
    if not args:
        return None
    *results, err = args
    if err is not None:
        if isinstance(err, BaseException):
            raise err
        raise ManagedError(f"must call failed: {err}")
    if not results:
        return None
    if len(results) == 1:
        return results[0]
    return results


def trap(source_err: BaseException | None, recovered: Any) -> BaseException | None:
    """Combine an existing error with a caught failure."""
    if recovered is None:
        return source_err
    caught = recovered if isinstance(recovered, BaseException) else ManagedError(str(recovered))
    if source_err is not None:
        return ErrorArray([source_err, caught])
    return caught


def _format(format: str, args: tuple) -> str:
    return format % args if args else format


def raise_error(format: str, *args: Any) -> None:
    """Raise a ManagedError with a formatted message."""
    raise ManagedError(_format(format, args))


def print_error(err: Any) -> None:
    """Write the error to standard error, in red on a terminal."""
    message = str(err)
    if sys.stderr.isatty():
        message = f"{_RED}{message}{_RESET}"
    print(message, file=sys.stderr)


def printf(format: str, *args: Any) -> None:
    """Write a formatted error message to standard error."""
    print_error(_format(format, args))