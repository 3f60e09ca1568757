"""Shared constant-returning callbacks.

Filters registered with one of these can later be removed again, since
every component refers to the same function object.
"""

from typing import Any


def return_true(*args: Any) -> bool:
    return True


def return_false(*args: Any) -> bool:
    return False


def return_none(*args: Any) -> None:
    return None


def return_value(value: Any):
    """Build a callback that ignores its arguments and returns ``value``."""

    def callback(*args: Any) -> Any:
        return value

    return callback
