"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from storefront.application.catalog_store import CatalogStore
from storefront.application.events import EventBus
from storefront.application.order_ledger import OrderLedger
from storefront.application.storefront import Storefront
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

DATA_DIR_ENV = "STOREFRONT_DATA_DIR"
PRODUCTS_DOCUMENT = "products.json"
ORDERS_DOCUMENT = "orders.json"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir(override: str | Path | None = None) -> Path:
    """Explicit override, then $STOREFRONT_DATA_DIR, then <project>/data."""
    if override:
        return Path(override)
    from_env = os.environ.get(DATA_DIR_ENV)
    if from_env:
        return Path(from_env)
    return _DEFAULT_DATA_DIR


def product_repository(directory: Path) -> JsonProductRepository:
    return JsonProductRepository(directory / PRODUCTS_DOCUMENT)


def order_repository(directory: Path) -> JsonOrderRepository:
    return JsonOrderRepository(directory / ORDERS_DOCUMENT)


def build_storefront(directory: str | Path | None = None) -> Storefront:
    """Construct the stores once and load persisted state."""
    root = data_dir(directory)
    events = EventBus()
    storefront = Storefront(
        catalog=CatalogStore(product_repository(root), events),
        ledger=OrderLedger(order_repository(root), events),
        events=events,
    )
    storefront.start()
    return storefront
