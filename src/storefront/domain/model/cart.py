"""Cart: the visitor's selection awaiting checkout.

Each line is one unit of one product. Adding the same product twice
gives two lines. The cart lives only as long as the session and is
never persisted.
"""

from __future__ import annotations

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


class Cart:

    def __init__(self) -> None:
        self._lines: list[Product] = []

    @property
    def lines(self) -> list[Product]:
        return list(self._lines)

    @property
    def count(self) -> int:
        return len(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def add_line(self, product: Product) -> Product:
        """Append a snapshot of *product* and return it."""
        line = product.snapshot()
        self._lines.append(line)
        return line

    def remove_line(self, index: int) -> bool:
        """Remove the line at *index*.

        Out-of-range positions, negative ones included, leave the cart
        untouched and return False.
        """
        if not 0 <= index < len(self._lines):
            return False
        del self._lines[index]
        return True

    def clear(self) -> None:
        self._lines.clear()

    def subtotal(self) -> Money:
        return Money.total_of(line.price for line in self._lines)
