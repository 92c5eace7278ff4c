"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from storefront.domain.exceptions import StorageError, ValidationError
from storefront.domain.model.product import Category, Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

# Anything a hand-edited or truncated document can throw while being decoded.
MALFORMED_DOCUMENT_ERRORS = (
    OSError,
    ValueError,
    KeyError,
    TypeError,
    AttributeError,
    RecursionError,
    ValidationError,
)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- ProductRepository interface ------------------------------------------

    def load(self) -> list[Product] | None:
        if not self._file_path.exists():
            return None
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return [product_to_domain(item) for item in raw]
        except MALFORMED_DOCUMENT_ERRORS as exc:
            logger.warning("Ignoring unreadable catalog %s: %s", self._file_path, exc)
            return None

    def save_all(self, products: list[Product]) -> None:
        write_document(self._file_path, [product_to_raw(p) for p in products])


# --- Serialization ------------------------------------------------------------


def product_to_raw(product: Product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "tagline": product.tagline,
        "description": product.description,
        "long_description": product.long_description,
        "price": str(product.price.amount),
        "currency": product.price.currency,
        "category": product.category.value,
        "image_url": product.image_url,
        "features": list(product.features),
    }


def product_to_domain(raw: dict) -> Product:
    price = Money.of(raw["price"])
    return Product(
        id=str(raw["id"]),
        name=raw["name"],
        tagline=raw.get("tagline", ""),
        description=raw.get("description", ""),
        long_description=raw.get("long_description"),
        price=Money(price.amount, raw.get("currency", "USD")),
        category=Category(raw["category"]),
        image_url=raw.get("image_url", ""),
        features=[str(f) for f in raw.get("features", [])],
    )


# --- File helpers -------------------------------------------------------------


def write_document(file_path: Path, records: list[dict]) -> None:
    """Rewrite *file_path* wholesale. Raises StorageError on failure."""
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Cannot write {file_path}: {exc}") from exc
