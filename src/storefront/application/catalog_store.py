"""Catalog store: the in-memory product list and its persistence.

The store owns the ordered list of products. Every successful mutation
rewrites the whole catalog document through the repository. A failed
write is logged and published, never raised: the list in memory stays
the source of truth for the rest of the session.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from storefront.application.default_catalog import default_products
from storefront.application.dto import ProductDraft
from storefront.application.events import EventBus, StorageFailed
from storefront.domain.exceptions import StorageError
from storefront.domain.model.product import Category, Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CatalogStore:

    def __init__(
        self,
        product_repo: ProductRepository,
        events: EventBus | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._product_repo = product_repo
        self._events = events or EventBus()
        self._clock = clock
        self._products: list[Product] = []
        self._initialized = False

    # --- Lifecycle ------------------------------------------------------------

    def initialize(self) -> None:
        """Load the catalog, seeding the defaults when nothing is stored.

        Runs once; later calls are ignored.
        """
        if self._initialized:
            return
        stored = self._product_repo.load()
        if stored is None:
            logger.info("No stored catalog, seeding default products")
            self._products = default_products()
            self._sync()
        else:
            self._products = stored
        self._initialized = True
        logger.debug("Catalog initialized with %d products", len(self._products))

    # --- Queries --------------------------------------------------------------

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    def get(self, product_id: str) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    # --- Mutations ------------------------------------------------------------

    def add(self, draft: ProductDraft) -> Product:
        """Create a product from a partial draft and append it.

        Missing fields get defaults. Duplicate names are allowed.
        """
        description = draft.description or ""
        product = Product(
            id=self._next_id(),
            name=draft.name or "",
            tagline=draft.tagline or "",
            description=description,
            long_description=draft.long_description or description,
            price=Money.coerce(draft.price),
            category=Category.parse(draft.category),
            image_url=draft.image_url or "",
            features=list(draft.features),
        )
        self._products.append(product)
        logger.info("Added product %s '%s'", product.id, product.name)
        self._sync()
        return product

    def update(self, product: Product) -> bool:
        """Replace the entry with the same id.

        Returns False, leaving the catalog untouched, if no entry matches.
        """
        for i, existing in enumerate(self._products):
            if existing.id == product.id:
                self._products[i] = product.snapshot()
                logger.info("Updated product %s", product.id)
                self._sync()
                return True
        logger.debug("Update ignored, no product with id %s", product.id)
        return False

    def remove(self, product_id: str) -> bool:
        """Delete the entry with *product_id*; False if there was none.

        Orders placed earlier keep their own snapshot of the product.
        """
        for i, existing in enumerate(self._products):
            if existing.id == product_id:
                del self._products[i]
                logger.info("Removed product %s", product_id)
                self._sync()
                return True
        logger.debug("Remove ignored, no product with id %s", product_id)
        return False

    # --- Internal helpers -----------------------------------------------------

    def _next_id(self) -> str:
        """Time-based token ``p<epoch-millis>``, bumped until unused."""
        millis = int(self._clock() * 1000)
        taken = {p.id for p in self._products}
        while f"p{millis}" in taken:
            millis += 1
        return f"p{millis}"

    def _sync(self) -> None:
        try:
            self._product_repo.save_all(self._products)
        except StorageError as exc:
            logger.error("Catalog not saved, keeping in-memory state: %s", exc)
            self._events.publish(StorageFailed(document="products", reason=str(exc)))
