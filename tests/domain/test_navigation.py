"""Unit tests for the navigation state machine."""

from storefront.domain.model.article import Article
from storefront.domain.model.navigation import (
    ArticleView,
    CheckoutView,
    DashboardView,
    Home,
    Navigator,
    ProductView,
)
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


def _product(pid: str = "p1") -> Product:
    return Product(id=pid, name="Lamp", price=Money.of("10"))


class TestTransitions:

    def test_initial_state_is_home(self):
        assert isinstance(Navigator().current, Home)

    def test_any_state_reachable_from_any_other(self):
        nav = Navigator()
        article = Article(id="1", title="T", date="d", excerpt="e")
        for view in (DashboardView(), ProductView(_product()), CheckoutView(),
                     ArticleView(article), Home(), CheckoutView()):
            nav.go(view)
            assert nav.current == view

    def test_selecting_new_product_replaces_selection(self):
        nav = Navigator()
        nav.go(ProductView(_product("p1")))
        nav.go(ProductView(_product("p2")))
        assert nav.current.product.id == "p2"

    def test_product_then_dashboard_then_home_leaves_no_selection(self):
        nav = Navigator()
        nav.go(ProductView(_product()))
        nav.go(DashboardView())
        nav.go_home()
        assert nav.current == Home()
        assert not hasattr(nav.current, "product")

    def test_go_returns_previous(self):
        nav = Navigator()
        previous = nav.go(DashboardView())
        assert previous == Home()

    def test_kind_tags(self):
        assert Home().kind == "home"
        assert ProductView(_product()).kind == "product"
        assert CheckoutView().kind == "checkout"
        assert DashboardView().kind == "dashboard"


class TestChrome:

    def test_hidden_on_checkout_and_dashboard(self):
        nav = Navigator()
        nav.go(CheckoutView())
        assert nav.shows_chrome is False
        nav.go(DashboardView())
        assert nav.shows_chrome is False

    def test_shown_elsewhere(self):
        nav = Navigator()
        assert nav.shows_chrome is True
        nav.go(ProductView(_product()))
        assert nav.shows_chrome is True


class TestAnchorNavigation:

    def test_scrolls_immediately_when_home(self):
        nav = Navigator()
        scrolled = []
        nav.navigate_to_anchor("about", scrolled.append)
        assert scrolled == ["about"]
        assert nav.pending_actions == 0

    def test_goes_home_first_and_defers_scroll(self):
        nav = Navigator()
        nav.go(ProductView(_product()))
        scrolled = []

        nav.navigate_to_anchor("about", scrolled.append)

        assert nav.current == Home()
        assert scrolled == []
        assert nav.pending_actions == 1

        assert nav.commit() == 1
        assert scrolled == ["about"]

    def test_deferred_action_runs_once(self):
        nav = Navigator()
        nav.go(DashboardView())
        scrolled = []
        nav.navigate_to_anchor("products", scrolled.append)
        nav.commit()
        nav.commit()
        assert scrolled == ["products"]

    def test_action_queued_during_commit_waits_for_next_commit(self):
        nav = Navigator()
        calls = []
        nav.after_commit(lambda: nav.after_commit(lambda: calls.append("second")))
        nav.commit()
        assert calls == []
        nav.commit()
        assert calls == ["second"]
