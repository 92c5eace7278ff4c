"""Abstract repository for the product catalog document.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, in-memory)
live in the infrastructure layer and in the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def load(self) -> list[Product] | None:
        """Return the stored catalog, or None if absent or unreadable."""

    @abstractmethod
    def save_all(self, products: list[Product]) -> None:
        """Rewrite the whole catalog document.

        Raises StorageError if the document cannot be written.
        """
