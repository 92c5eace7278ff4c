"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the presentation (CLI) and application layers
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.model.order import Order


@dataclass(frozen=True)
class ProductDraft:
    """Input: the admin product form. Every field may be missing."""

    name: str | None = None
    tagline: str | None = None
    description: str | None = None
    long_description: str | None = None
    price: object = None  # raw form value, coerced by the catalog store
    category: str | None = None
    image_url: str | None = None
    features: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CustomerInput:
    """Input: the checkout contact form."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name.strip()} {self.last_name.strip()}".strip()


@dataclass(frozen=True)
class CheckoutQuote:
    """Output: the order summary shown next to the checkout form."""

    line_count: int
    subtotal: str
    shipping: str
    total: str


@dataclass(frozen=True)
class Receipt:
    """Output: confirmation of a placed order."""

    order_id: str
    subtotal: str
    shipping: str
    total: str
    message: str


@dataclass(frozen=True)
class OrderLineDTO:
    product_id: str
    product_name: str
    category: str
    price: str  # formatted, e.g. "$29.00"


@dataclass(frozen=True)
class OrderDTO:
    """Output: a placed order as displayed on the dashboard."""

    id: str
    customer_name: str
    customer_email: str
    status: str
    items: list[OrderLineDTO]
    total: str
    date: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            customer_name=order.customer.name,
            customer_email=order.customer.email,
            status=order.status.value,
            items=[
                OrderLineDTO(
                    product_id=item.id,
                    product_name=item.name,
                    category=item.category.value,
                    price=str(item.price),
                )
                for item in order.items
            ],
            total=str(order.total),
            date=order.date,
        )
