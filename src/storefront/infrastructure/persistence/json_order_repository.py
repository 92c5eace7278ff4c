"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from storefront.domain.model.order import Customer, Order, OrderStatus
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_product_repository import (
    MALFORMED_DOCUMENT_ERRORS,
    product_to_domain,
    product_to_raw,
    write_document,
)

logger = logging.getLogger(__name__)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- OrderRepository interface --------------------------------------------

    def load(self) -> list[Order] | None:
        if not self._file_path.exists():
            return None
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return [self._to_domain(item) for item in raw]
        except MALFORMED_DOCUMENT_ERRORS as exc:
            logger.warning("Ignoring unreadable orders %s: %s", self._file_path, exc)
            return None

    def save_all(self, orders: list[Order]) -> None:
        write_document(self._file_path, [self._to_raw(o) for o in orders])

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer": {
                "name": order.customer.name,
                "email": order.customer.email,
            },
            "status": order.status.value,
            "placed_at": order.placed_at.isoformat(),
            "date": order.date,
            "total": str(order.total.amount),
            "items": [product_to_raw(item) for item in order.items],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        # "total" and "date" are derived; they are written for readers of
        # the document and recomputed from the items on load.
        return Order(
            id=str(raw["id"]),
            customer=Customer(
                name=raw["customer"]["name"],
                email=raw["customer"]["email"],
            ),
            items=[product_to_domain(item) for item in raw["items"]],
            status=OrderStatus(raw["status"]),
            placed_at=datetime.fromisoformat(raw["placed_at"]),
        )
