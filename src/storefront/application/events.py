"""Notifications the presentation layer can observe.

The core never renders anything. When an intent has a visible side
effect outside the navigation state (drawer opening, scrolling, the
order confirmation, a failed save) it is published here as an event.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union


@dataclass(frozen=True)
class CartOpened:
    line_count: int


@dataclass(frozen=True)
class CartClosed:
    line_count: int


@dataclass(frozen=True)
class ScrollRequested:
    anchor: str  # empty means top of page


@dataclass(frozen=True)
class OrderPlaced:
    order_id: str
    message: str


@dataclass(frozen=True)
class StorageFailed:
    document: str
    reason: str


Event = Union[CartOpened, CartClosed, ScrollRequested, OrderPlaced, StorageFailed]
Listener = Callable[[Event], None]


class EventBus:

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, event: Event) -> None:
        for listener in list(self._listeners):
            listener(event)
