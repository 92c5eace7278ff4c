"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable

from storefront.domain.exceptions import ValidationError

# Largest power of ten an entered price may reach. Sums of such prices stay
# well inside the default Decimal context.
MAX_AMOUNT_EXPONENT = 12


@dataclass(frozen=True)
class Money:
    """Monetary amount in dollars.

    Uses Decimal so that a cart of 29 + 49 totals exactly 78, with no
    floating-point drift in subtotals.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            money = Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if money.amount.adjusted() > MAX_AMOUNT_EXPONENT:
            raise ValidationError(f"Money amount is out of range, got {amount!r}")
        return money

    @staticmethod
    def coerce(amount: object) -> Money:
        """Lenient factory for admin form input.

        Anything that does not parse to a finite, non-negative number
        becomes zero instead of raising.
        """
        if amount is None or isinstance(amount, bool):
            return Money.zero()
        try:
            return Money.of(amount)  # type: ignore[arg-type]
        except ValidationError:
            return Money.zero()

    @staticmethod
    def total_of(amounts: Iterable[Money]) -> Money:
        result = Money.zero()
        for amount in amounts:
            result = result + amount
        return result
