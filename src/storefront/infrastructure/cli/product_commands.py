"""CLI commands for the product catalog (admin dashboard)."""

from __future__ import annotations

import dataclasses

import click

from storefront.application.dto import ProductDraft
from storefront.application.storefront import Storefront
from storefront.domain.exceptions import DomainException
from storefront.domain.model.product import Category
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.cli.render import render

_CATEGORIES = click.Choice([c.value for c in Category], case_sensitive=False)


@click.command("list")
@click.pass_obj
def product_list(storefront: Storefront) -> None:
    """List all products in the catalog."""
    storefront.go_home()
    render(storefront)


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_show(storefront: Storefront, product_id: str) -> None:
    """Show the product page for one product."""
    try:
        storefront.select_product(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    render(storefront)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", default="0", help="Price in dollars (e.g. 45).")
@click.option("--category", type=_CATEGORIES, default=None, help="Defaults to Home.")
@click.option("--tagline", default=None)
@click.option("--description", default=None)
@click.option("--image-url", default=None)
@click.option("--feature", "features", multiple=True, help="Repeat for each feature.")
@click.pass_obj
def product_add(
    storefront: Storefront,
    name: str,
    price: str,
    category: str | None,
    tagline: str | None,
    description: str | None,
    image_url: str | None,
    features: tuple[str, ...],
) -> None:
    """Add a new product to the catalog."""
    draft = ProductDraft(
        name=name,
        tagline=tagline,
        description=description,
        price=price,
        category=category,
        image_url=image_url,
        features=list(features),
    )
    product = storefront.create_product(draft)
    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None)
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--category", type=_CATEGORIES, default=None)
@click.option("--tagline", default=None)
@click.option("--description", default=None)
@click.option("--image-url", default=None)
@click.pass_obj
def product_update(
    storefront: Storefront,
    product_id: str,
    name: str | None,
    price: str | None,
    category: str | None,
    tagline: str | None,
    description: str | None,
    image_url: str | None,
) -> None:
    """Edit a product. Options left out keep their current value."""
    current = storefront.catalog.get(product_id)
    if current is None:
        click.echo(f"No product with ID '{product_id}'; nothing changed.")
        return

    changes: dict = {}
    if name is not None:
        changes["name"] = name
    if price is not None:
        changes["price"] = Money.coerce(price)
    if category is not None:
        changes["category"] = Category.parse(category)
    if tagline is not None:
        changes["tagline"] = tagline
    if description is not None:
        changes["description"] = description
        changes["long_description"] = description
    if image_url is not None:
        changes["image_url"] = image_url

    storefront.update_product(dataclasses.replace(current, **changes))
    click.echo(f"Product #{product_id} updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_delete(storefront: Storefront, product_id: str) -> None:
    """Remove a product. Placed orders keep their copy."""
    if storefront.delete_product(product_id):
        click.echo(f"Product #{product_id} deleted")
    else:
        click.echo(f"No product with ID '{product_id}'; nothing changed.")
