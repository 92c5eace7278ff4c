"""Order ledger: placed orders, most recent first.

Orders are only ever prepended. There is no update or delete; an
order's content is fixed when checkout records it.
"""

from __future__ import annotations

import logging
import random
import string

from storefront.application.events import EventBus, StorageFailed
from storefront.domain.exceptions import StorageError, ValidationError
from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)

ORDER_ID_LENGTH = 9
_ORDER_ID_ALPHABET = string.ascii_uppercase + string.digits


class OrderLedger:

    def __init__(
        self,
        order_repo: OrderRepository,
        events: EventBus | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._events = events or EventBus()
        self._rng = rng or random.Random()
        self._orders: list[Order] = []
        self._initialized = False

    def initialize(self) -> None:
        """Load stored orders. Absent or unreadable data gives an empty ledger."""
        if self._initialized:
            return
        self._orders = self._order_repo.load() or []
        self._initialized = True
        logger.debug("Ledger initialized with %d orders", len(self._orders))

    @property
    def orders(self) -> list[Order]:
        return list(self._orders)

    def get(self, order_id: str) -> Order | None:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None

    def next_id(self) -> str:
        """Generate a display token not used by any recorded order."""
        taken = {o.id for o in self._orders}
        while True:
            candidate = "".join(self._rng.choices(_ORDER_ID_ALPHABET, k=ORDER_ID_LENGTH))
            if candidate not in taken:
                return candidate

    def record(self, order: Order) -> None:
        """Prepend *order* and rewrite the order document."""
        if self.get(order.id) is not None:
            raise ValidationError(f"Order #{order.id} already recorded")
        self._orders.insert(0, order)
        logger.info("Recorded order #%s (%s)", order.id, order.total)
        try:
            self._order_repo.save_all(self._orders)
        except StorageError as exc:
            logger.error("Orders not saved, keeping in-memory state: %s", exc)
            self._events.publish(StorageFailed(document="orders", reason=str(exc)))
