"""Storefront: the single entry point for user intents.

The presentation layer holds one Storefront, raises intents by calling
its methods, then re-renders from ``view``, ``cart``, ``catalog`` and
``ledger`` and calls ``commit()`` once the new state is on screen.
Stores are passed in explicitly; nothing here is global.
"""

from __future__ import annotations

import logging
from typing import Iterable

from storefront.application.catalog_store import CatalogStore
from storefront.application.checkout import CheckoutWorkflow
from storefront.application.default_catalog import ARTICLES
from storefront.application.dto import CustomerInput, ProductDraft, Receipt
from storefront.application.events import (
    CartClosed,
    CartOpened,
    EventBus,
    ScrollRequested,
)
from storefront.application.order_ledger import OrderLedger
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.article import Article
from storefront.domain.model.cart import Cart
from storefront.domain.model.navigation import (
    ArticleView,
    DashboardView,
    Navigator,
    ProductView,
    View,
)
from storefront.domain.model.product import Product

logger = logging.getLogger(__name__)

DASHBOARD_ANCHOR = "dashboard"
PRODUCTS_ANCHOR = "products"


class Storefront:

    def __init__(
        self,
        catalog: CatalogStore,
        ledger: OrderLedger,
        events: EventBus,
        articles: Iterable[Article] = ARTICLES,
    ) -> None:
        self.catalog = catalog
        self.ledger = ledger
        self.events = events
        self.cart = Cart()
        self.navigator = Navigator()
        self.checkout = CheckoutWorkflow(self.cart, ledger, self.navigator, events)
        self.cart_open = False
        self._articles = {a.id: a for a in articles}

    def start(self) -> None:
        """Load persisted state. Call once, before the first render."""
        self.catalog.initialize()
        self.ledger.initialize()

    # --- Read side ------------------------------------------------------------

    @property
    def view(self) -> View:
        return self.navigator.current

    @property
    def articles(self) -> list[Article]:
        return list(self._articles.values())

    def commit(self) -> int:
        """Signal that the current view has been rendered."""
        return self.navigator.commit()

    # --- Navigation intents ---------------------------------------------------

    def select_product(self, product_id: str) -> Product:
        product = self._require_product(product_id)
        self.navigator.go(ProductView(product))
        return product

    def select_article(self, article_id: str) -> Article:
        article = self._articles.get(article_id)
        if article is None:
            raise EntityNotFoundError(f"Article '{article_id}' not found")
        self.navigator.go(ArticleView(article))
        return article

    def go_home(self) -> None:
        self.navigator.go_home()

    def go_dashboard(self) -> None:
        self.navigator.go(DashboardView())

    def navigate_to_anchor(self, anchor: str) -> None:
        """Handle a nav-bar or footer link."""
        if anchor == DASHBOARD_ANCHOR:
            self._scroll("")
            self.go_dashboard()
            return
        self.navigator.navigate_to_anchor(anchor, self._scroll)

    def back_to_products(self) -> None:
        """Leave a product page for the product grid on the home screen."""
        self.navigator.go_home()
        self.navigator.after_commit(lambda: self._scroll(PRODUCTS_ANCHOR))

    # --- Cart intents ---------------------------------------------------------

    def add_to_cart(self, product_id: str) -> Product:
        line = self.cart.add_line(self._require_product(product_id))
        self.open_cart()
        return line

    def remove_from_cart(self, index: int) -> bool:
        return self.cart.remove_line(index)

    def open_cart(self) -> None:
        self.cart_open = True
        self.events.publish(CartOpened(line_count=self.cart.count))

    def close_cart(self) -> None:
        self.cart_open = False
        self.events.publish(CartClosed(line_count=self.cart.count))

    # --- Checkout intents -----------------------------------------------------

    def begin_checkout(self) -> None:
        if self.cart_open:
            self.close_cart()
        self.checkout.begin()

    def submit_order(self, customer_input: CustomerInput) -> Receipt:
        return self.checkout.submit(customer_input)

    # --- Admin intents --------------------------------------------------------

    def create_product(self, draft: ProductDraft) -> Product:
        return self.catalog.add(draft)

    def update_product(self, product: Product) -> bool:
        return self.catalog.update(product)

    def delete_product(self, product_id: str) -> bool:
        return self.catalog.remove(product_id)

    # --- Internal helpers -----------------------------------------------------

    def _require_product(self, product_id: str) -> Product:
        product = self.catalog.get(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product

    def _scroll(self, anchor: str) -> None:
        logger.debug("Scroll to '%s'", anchor or "top")
        self.events.publish(ScrollRequested(anchor=anchor))
