"""Text rendering of the active view, one branch per view type."""

from __future__ import annotations

import click

from storefront.application.storefront import Storefront
from storefront.domain.model.navigation import (
    ArticleView,
    CheckoutView,
    DashboardView,
    Home,
    ProductView,
)
from storefront.domain.model.product import Product


def render(storefront: Storefront) -> None:
    """Echo the current screen, then mark it committed."""
    view = storefront.view
    if isinstance(view, Home):
        _render_product_table(storefront.catalog.products)
    elif isinstance(view, ProductView):
        _render_product(view.product)
    elif isinstance(view, ArticleView):
        click.echo(view.article.title)
        click.echo(view.article.date)
        click.echo()
        click.echo(view.article.content or view.article.excerpt)
    elif isinstance(view, CheckoutView):
        quote = storefront.checkout.quote()
        click.echo(f"Checkout  ({quote.line_count} items)")
        click.echo(f"  {'Subtotal':<12} {quote.subtotal:>10}")
        click.echo(f"  {'Shipping':<12} {'Free':>10}")
        click.echo(f"  {'Total':<12} {quote.total:>10}")
    elif isinstance(view, DashboardView):
        click.echo(
            f"Dashboard: {len(storefront.catalog.products)} products, "
            f"{len(storefront.ledger.orders)} orders"
        )
    else:
        raise AssertionError(f"Unhandled view: {view!r}")
    storefront.commit()


def _render_product_table(products: list[Product]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<16} {'Name':<24} {'Category':<10} {'Price':>10}")
    click.echo("-" * 63)
    for p in products:
        click.echo(f"{p.id:<16} {p.name:<24} {p.category.value:<10} {str(p.price):>10}")


def _render_product(product: Product) -> None:
    click.echo(f"{product.name}  ({product.category.value})  {product.price}")
    if product.tagline:
        click.echo(product.tagline)
    click.echo()
    click.echo(product.long_description or product.description)
    for feature in product.features:
        click.echo(f"  - {feature}")
