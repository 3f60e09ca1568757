"""Result types for component initialization."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from themecore.contracts.host import Callback


class SubscriptionKind(str, Enum):
    """Whether a callback was added as an action or as a filter."""

    ACTION = "action"
    FILTER = "filter"


@dataclass(frozen=True)
class Subscription:
    """A callback a component registered on the host event bus.

    Attributes:
        kind: Action or filter.
        event: Event (hook) name.
        callback: The registered callable or host function name.
        priority: Dispatch priority.
        accepted_args: Number of arguments the callback receives.
    """

    kind: SubscriptionKind
    event: str
    callback: Callback
    priority: int = 10
    accepted_args: int = 1
