"""Checkout workflow: turns the cart into a recorded order.

Two phases. While ``COLLECTING`` the visitor is filling in the form;
a rejected submit leaves the cart and view as they were and puts the
phase back to ``COLLECTING``. A valid submit moves to ``SUBMITTING``,
records the order, clears the cart and sends the visitor home.
"""

from __future__ import annotations

import logging
from enum import Enum

from storefront.application.dto import CheckoutQuote, CustomerInput, Receipt
from storefront.application.events import EventBus, OrderPlaced
from storefront.application.order_ledger import OrderLedger
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.navigation import CheckoutView, Navigator
from storefront.domain.model.order import SHIPPING_FEE, Customer, Order, OrderStatus

logger = logging.getLogger(__name__)


class CheckoutPhase(Enum):
    COLLECTING = "collecting"
    SUBMITTING = "submitting"


class CheckoutWorkflow:

    def __init__(
        self,
        cart: Cart,
        ledger: OrderLedger,
        navigator: Navigator,
        events: EventBus,
    ) -> None:
        self._cart = cart
        self._ledger = ledger
        self._navigator = navigator
        self._events = events
        self.phase = CheckoutPhase.COLLECTING

    def begin(self) -> None:
        self.phase = CheckoutPhase.COLLECTING
        self._navigator.go(CheckoutView())

    def quote(self) -> CheckoutQuote:
        subtotal = self._cart.subtotal()
        return CheckoutQuote(
            line_count=self._cart.count,
            subtotal=str(subtotal),
            shipping=str(SHIPPING_FEE),
            total=str(subtotal + SHIPPING_FEE),
        )

    def submit(self, customer_input: CustomerInput) -> Receipt:
        """Place an order for the current cart.

        Raises ValidationError, leaving the cart, ledger and view untouched,
        if the email or first name is blank, or if the cart is empty (which
        is also what stops a second submit of the same checkout).
        """
        self.phase = CheckoutPhase.COLLECTING
        if not customer_input.email.strip() or not customer_input.first_name.strip():
            raise ValidationError("Please enter at least your name and email.")
        if self._cart.is_empty:
            raise ValidationError("Your cart is empty.")

        customer = Customer.create(customer_input.full_name, customer_input.email)
        order = Order.create(
            order_id=self._ledger.next_id(),
            customer=customer,
            items=self._cart.lines,
            status=OrderStatus.COMPLETED,
        )

        self.phase = CheckoutPhase.SUBMITTING
        self._ledger.record(order)
        self._cart.clear()
        self._navigator.go_home()

        message = f"Order Placed Successfully! Your Order ID is #{order.id}"
        logger.info("Checkout complete for %s: order #%s", customer.email, order.id)
        self._events.publish(OrderPlaced(order_id=order.id, message=message))

        return Receipt(
            order_id=order.id,
            subtotal=str(order.subtotal),
            shipping=str(order.shipping),
            total=str(order.total),
            message=message,
        )
