"""Output formatters for recorded host calls."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from themecore.infrastructure.memory_host import HostCall


def describe(value: Any) -> str:
    """Short, stable rendering of a call argument.

    Callables are shown by qualified name instead of their ``repr`` so the
    output does not contain memory addresses.

    Example:
        >>> describe(len)
        'len'
    """
    if isinstance(value, str):
        return repr(value)
    if callable(value):
        name = getattr(value, "__qualname__", None) or type(value).__name__
        return name.replace(".<locals>", "")
    if isinstance(value, dict):
        items = ", ".join(f"{describe(key)}: {describe(item)}" for key, item in value.items())
        return "{" + items + "}"
    if isinstance(value, (list, tuple)):
        items = ", ".join(describe(item) for item in value)
        return f"[{items}]" if isinstance(value, list) else f"({items})"
    return repr(value)


class CallLogFormatter:
    """Formats a host call log for display.

    Calls are numbered in the order they were made. Event subscriptions can
    be left out so only the visible effects remain.
    """

    SUBSCRIPTION_CALLS = frozenset({"add_action", "add_filter", "remove_action", "remove_filter"})

    def __init__(self, include_subscriptions: bool = True, width: int = 100) -> None:
        """Initialize formatter.

        Args:
            include_subscriptions: Whether to list hook (un)subscriptions.
            width: Maximum line length; longer lines are truncated.
        """
        self._include_subscriptions = include_subscriptions
        self._width = width

    def format(self, calls: Sequence[HostCall]) -> str:
        shown = [
            call
            for call in calls
            if self._include_subscriptions or call.name not in self.SUBSCRIPTION_CALLS
        ]
        if not shown:
            return "No host calls recorded."

        lines = ["HOST CALLS", "=" * 70]
        for number, call in enumerate(shown, start=1):
            args = ", ".join(describe(arg) for arg in call.args)
            line = f"{number:>4}. {call.name}({args})"
            if len(line) > self._width:
                line = line[: self._width - 3] + "..."
            lines.append(line)
        lines.append("-" * 70)
        lines.append(f"{len(shown)} call(s)")
        return "\n".join(lines)
