"""Shared base class for theme components."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from themecore.contracts.host import Callback, Host

from .results import Subscription, SubscriptionKind

logger = logging.getLogger(__name__)


def iter_entries(config: Mapping[str, Any] | Sequence[Any]) -> list[Mapping[str, Any]]:
    """Entries may be listed or keyed by an arbitrary name."""
    if isinstance(config, Mapping):
        return list(config.values())
    return list(config)


class ThemeComponent:
    """Base class holding a read-only configuration slice.

    Subclasses implement ``setup()``, checking which capability keys are
    present in ``self.config`` and subscribing handlers through
    ``add_action``/``add_filter`` so the subscriptions made during
    ``init`` are reported back to the caller.

    Attributes:
        config: Read-only view of the component's configuration slice.
    """

    def __init__(self, config: Mapping[str, Any] | None = None) -> None:
        self.config: Mapping[str, Any] = MappingProxyType(dict(config or {}))
        self._host: Host | None = None
        self._subscriptions: list[Subscription] = []
        self._initializing = False

    @property
    def host(self) -> Host:
        if self._host is None:
            raise RuntimeError(f"{type(self).__name__} has not been initialized")
        return self._host

    def init(self, host: Host) -> tuple[Subscription, ...]:
        """Initialize the component against ``host``.

        Raises:
            RuntimeError: If the component was already initialized.
        """
        if self._host is not None:
            raise RuntimeError(f"{type(self).__name__} is already initialized")
        self._host = host
        self._initializing = True
        try:
            self.setup()
        finally:
            self._initializing = False
        logger.debug(
            f"{type(self).__name__} initialized with {len(self._subscriptions)} subscriptions"
        )
        return tuple(self._subscriptions)

    def setup(self) -> None:
        raise NotImplementedError

    def add_action(
        self, tag: str, callback: Callback, priority: int = 10, accepted_args: int = 1
    ) -> None:
        self.host.add_action(tag, callback, priority, accepted_args)
        self._record(SubscriptionKind.ACTION, tag, callback, priority, accepted_args)

    def add_filter(
        self, tag: str, callback: Callback, priority: int = 10, accepted_args: int = 1
    ) -> None:
        self.host.add_filter(tag, callback, priority, accepted_args)
        self._record(SubscriptionKind.FILTER, tag, callback, priority, accepted_args)

    def _record(
        self,
        kind: SubscriptionKind,
        tag: str,
        callback: Callback,
        priority: int,
        accepted_args: int,
    ) -> None:
        if self._initializing:
            self._subscriptions.append(Subscription(kind, tag, callback, priority, accepted_args))
