"""Abstract repository for the order ledger document."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def load(self) -> list[Order] | None:
        """Return stored orders most recent first, or None if absent or unreadable."""

    @abstractmethod
    def save_all(self, orders: list[Order]) -> None:
        """Rewrite the whole order document.

        Raises StorageError if the document cannot be written.
        """
