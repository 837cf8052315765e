"""Synchronous change notification for watched paths.

Each subscription remembers the last value it reported (initially the value
at subscribe time). After every mutation the notifier re-reads each watched
path, and a listener is called with ``(new_value, old_value)`` only when the
two differ structurally. Listeners run in subscription order, on the caller's
stack; an exception raised by a listener propagates to the mutating call.
"""
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from .utils import MISSING, deep_equal

logger = logging.getLogger(__name__)

Listener = Callable[[Any, Any], None]
Reader = Callable[[Optional[str]], Any]


@dataclass(eq=False)
class Subscription:
    path: Optional[str]
    listener: Listener
    last: Any


def _public(value: Any) -> Any:
    return None if value is MISSING else value


class ChangeNotifier:
    """Ordered registry of (path, listener) subscriptions.

    A ``path`` of ``None`` watches the whole document.
    """

    def __init__(self) -> None:
        self._subscriptions: List[Subscription] = []

    def subscribe(self, path: Optional[str], listener: Listener, current: Any) -> Callable[[], None]:
        subscription = Subscription(path, listener, copy.deepcopy(current))
        self._subscriptions.append(subscription)

        def unsubscribe() -> None:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

        return unsubscribe

    def notify(self, read: Reader) -> int:
        """Fire listeners whose watched value changed; returns how many fired."""
        fired = 0
        for subscription in list(self._subscriptions):
            if subscription not in self._subscriptions:
                continue
            new_value = read(subscription.path)
            if deep_equal(new_value, subscription.last):
                continue
            old_value = subscription.last
            subscription.last = copy.deepcopy(new_value)
            logger.debug("Change at %s", subscription.path or "<root>")
            subscription.listener(_public(copy.deepcopy(new_value)), _public(old_value))
            fired += 1
        return fired

    def __len__(self) -> int:
        return len(self._subscriptions)


__all__ = [
    "ChangeNotifier",
    "Listener",
    "Subscription",
]
