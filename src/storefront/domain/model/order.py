"""Order aggregate.

The Order owns deep copies of the products it was placed with, so later
catalog edits or deletions never change a placed order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


class OrderStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# Shipping is free for every order.
SHIPPING_FEE = Money.zero()


@dataclass(frozen=True)
class Customer:
    name: str
    email: str

    @staticmethod
    def create(name: str, email: str) -> Customer:
        if not name or not name.strip():
            raise ValidationError("Customer name is required")
        if not email or not email.strip():
            raise ValidationError("Customer email is required")
        return Customer(name=name.strip(), email=email.strip())


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use the ``Order.create()`` factory for new orders: it takes the
    snapshots and enforces the invariants. ``__init__`` stays simple so
    the repository can reconstitute persisted orders as they were stored.
    """

    id: str
    customer: Customer
    items: list[Product]
    status: OrderStatus = OrderStatus.PENDING
    placed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        order_id: str,
        customer: Customer,
        items: list[Product],
        status: OrderStatus = OrderStatus.COMPLETED,
        placed_at: datetime | None = None,
    ) -> Order:
        """Create a new order from the given products."""
        if not order_id:
            raise ValidationError("Order ID is required")
        if not items:
            raise ValidationError("Order must contain at least one item")

        return Order(
            id=order_id,
            customer=customer,
            items=[item.snapshot() for item in items],
            status=status,
            placed_at=placed_at or datetime.now(timezone.utc),
        )

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Money:
        return Money.total_of(item.price for item in self.items)

    @property
    def shipping(self) -> Money:
        return SHIPPING_FEE

    @property
    def total(self) -> Money:
        return self.subtotal + self.shipping

    @property
    def date(self) -> str:
        """Placement date in the local timezone and locale format."""
        return self.placed_at.astimezone().strftime("%x")
