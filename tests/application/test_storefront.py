"""Intent-level tests for the Storefront facade."""

import pytest

from storefront.application.catalog_store import CatalogStore
from storefront.application.dto import CustomerInput, ProductDraft
from storefront.application.events import (
    CartClosed,
    CartOpened,
    EventBus,
    OrderPlaced,
    ScrollRequested,
)
from storefront.application.order_ledger import OrderLedger
from storefront.application.storefront import Storefront
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.navigation import (
    ArticleView,
    CheckoutView,
    DashboardView,
    Home,
    ProductView,
)
from storefront.domain.model.product import Category, Product
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeOrderRepository, FakeProductRepository


def _setup():
    products = [
        Product(id="p1", name="Buds", price=Money.of("29"), category=Category.AUDIO),
        Product(id="p2", name="Band", price=Money.of("49"), category=Category.WEARABLE),
    ]
    product_repo = FakeProductRepository(products)
    order_repo = FakeOrderRepository()
    events = EventBus()
    shop = Storefront(
        catalog=CatalogStore(product_repo, events),
        ledger=OrderLedger(order_repo, events),
        events=events,
    )
    shop.start()
    seen = []
    events.subscribe(seen.append)
    return shop, seen, product_repo, order_repo


class TestNavigationIntents:

    def test_select_product(self):
        shop, _, _, _ = _setup()
        shop.select_product("p1")
        assert isinstance(shop.view, ProductView)
        assert shop.view.product.name == "Buds"

    def test_select_unknown_product_raises(self):
        shop, _, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            shop.select_product("nope")
        assert isinstance(shop.view, Home)

    def test_select_article(self):
        shop, _, _, _ = _setup()
        article = shop.articles[0]
        shop.select_article(article.id)
        assert shop.view == ArticleView(article)

    def test_select_unknown_article_raises(self):
        shop, _, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            shop.select_article("nope")

    def test_product_dashboard_home(self):
        shop, _, _, _ = _setup()
        shop.select_product("p1")
        shop.go_dashboard()
        shop.go_home()
        assert shop.view == Home()

    def test_dashboard_anchor_goes_to_dashboard(self):
        shop, seen, _, _ = _setup()
        shop.navigate_to_anchor("dashboard")
        assert isinstance(shop.view, DashboardView)
        assert seen == [ScrollRequested(anchor="")]

    def test_anchor_from_home_scrolls_now(self):
        shop, seen, _, _ = _setup()
        shop.navigate_to_anchor("about")
        assert seen == [ScrollRequested(anchor="about")]

    def test_anchor_from_elsewhere_scrolls_after_commit(self):
        shop, seen, _, _ = _setup()
        shop.select_product("p1")
        shop.navigate_to_anchor("journal")
        assert shop.view == Home()
        assert seen == []
        shop.commit()
        assert seen == [ScrollRequested(anchor="journal")]

    def test_back_to_products(self):
        shop, seen, _, _ = _setup()
        shop.select_product("p2")
        shop.back_to_products()
        assert shop.view == Home()
        shop.commit()
        assert seen == [ScrollRequested(anchor="products")]


class TestCartIntents:

    def test_add_to_cart_opens_drawer(self):
        shop, seen, _, _ = _setup()
        shop.add_to_cart("p1")
        assert shop.cart.count == 1
        assert shop.cart_open is True
        assert seen == [CartOpened(line_count=1)]

    def test_add_unknown_product_raises(self):
        shop, _, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            shop.add_to_cart("nope")
        assert shop.cart.count == 0

    def test_remove_from_cart(self):
        shop, _, _, _ = _setup()
        shop.add_to_cart("p1")
        assert shop.remove_from_cart(5) is False
        assert shop.remove_from_cart(0) is True
        assert shop.cart.is_empty

    def test_open_close(self):
        shop, seen, _, _ = _setup()
        shop.open_cart()
        shop.close_cart()
        assert shop.cart_open is False
        assert seen == [CartOpened(line_count=0), CartClosed(line_count=0)]

    def test_cart_not_persisted(self):
        shop, _, product_repo, order_repo = _setup()
        shop.add_to_cart("p1")
        restarted = Storefront(
            catalog=CatalogStore(product_repo),
            ledger=OrderLedger(order_repo),
            events=EventBus(),
        )
        restarted.start()
        assert restarted.cart.is_empty
        assert len(restarted.catalog.products) == 2


class TestCheckoutIntents:

    def test_full_purchase(self):
        shop, seen, _, order_repo = _setup()
        shop.add_to_cart("p1")
        shop.add_to_cart("p2")
        shop.begin_checkout()

        assert shop.cart_open is False
        assert isinstance(shop.view, CheckoutView)
        assert shop.navigator.shows_chrome is False

        receipt = shop.submit_order(
            CustomerInput(first_name="Alice", email="alice@example.com")
        )

        assert receipt.total == "$78.00"
        assert shop.cart.is_empty
        assert shop.view == Home()
        assert order_repo.stored[0].id == receipt.order_id
        assert isinstance(seen[-1], OrderPlaced)

    def test_deleting_product_leaves_order_snapshot(self):
        shop, _, _, _ = _setup()
        shop.add_to_cart("p1")
        shop.begin_checkout()
        receipt = shop.submit_order(
            CustomerInput(first_name="Alice", email="alice@example.com")
        )

        assert shop.delete_product("p1") is True

        order = shop.ledger.get(receipt.order_id)
        assert [item.id for item in order.items] == ["p1"]
        assert order.items[0].name == "Buds"
        assert order.total == Money.of("29")

    def test_editing_product_leaves_order_snapshot(self):
        shop, _, _, _ = _setup()
        shop.add_to_cart("p1")
        shop.begin_checkout()
        receipt = shop.submit_order(
            CustomerInput(first_name="Alice", email="alice@example.com")
        )

        edited = shop.catalog.get("p1").snapshot()
        edited.price = Money.of("99")
        shop.update_product(edited)

        assert shop.ledger.get(receipt.order_id).items[0].price == Money.of("29")


class TestAdminIntents:

    def test_create_update_delete(self):
        shop, _, product_repo, _ = _setup()
        lamp = shop.create_product(ProductDraft(name="Lamp", price="45"))
        assert lamp.category is Category.HOME

        lamp_edit = lamp.snapshot()
        lamp_edit.name = "Floor Lamp"
        assert shop.update_product(lamp_edit) is True
        assert shop.catalog.get(lamp.id).name == "Floor Lamp"

        assert shop.delete_product(lamp.id) is True
        assert shop.delete_product(lamp.id) is False
        assert [p.id for p in product_repo.stored] == ["p1", "p2"]
