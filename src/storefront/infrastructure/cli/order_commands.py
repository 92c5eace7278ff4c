"""CLI commands for the order ledger and the simulated checkout."""

from __future__ import annotations

import click

from storefront.application.dto import CustomerInput, OrderDTO
from storefront.application.storefront import Storefront
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli.render import render


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name} <{dto.customer_email}>")
    click.echo(f"Placed:   {dto.date}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Category':<10} {'Price':>10}")
    click.echo(f"  {'-'*46}")
    for item in dto.items:
        click.echo(f"  {item.product_name:<24} {item.category:<10} {item.price:>10}")
    click.echo(f"  {'-'*46}")
    click.echo(f"  {'Order Total':<24} {dto.total:>21}")


@click.command("list")
@click.pass_obj
def order_list(storefront: Storefront) -> None:
    """List placed orders, most recent first."""
    orders = storefront.ledger.orders
    if not orders:
        click.echo("No orders yet.")
        return

    click.echo(f"{'ID':<10} {'Date':<12} {'Customer':<24} {'Items':>5} {'Total':>10}")
    click.echo("-" * 65)
    for order in orders:
        click.echo(
            f"{order.id:<10} {order.date:<12} {order.customer.name:<24} "
            f"{len(order.items):>5} {str(order.total):>10}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(storefront: Storefront, order_id: str) -> None:
    """Show details of a placed order."""
    order = storefront.ledger.get(order_id.lstrip("#").upper())
    if order is None:
        raise click.ClickException(f"Order #{order_id} not found")

    _display_order(OrderDTO.from_order(order))


@click.command("checkout")
@click.option(
    "--product", "product_ids", multiple=True, required=True,
    help="Product ID to add to the cart. Repeat for more units.",
)
@click.option("--first-name", default="", help="Customer first name.")
@click.option("--last-name", default="", help="Customer last name.")
@click.option("--email", default="", help="Customer email.")
@click.pass_obj
def checkout(
    storefront: Storefront,
    product_ids: tuple[str, ...],
    first_name: str,
    last_name: str,
    email: str,
) -> None:
    """Fill a cart and place an order in one go."""
    try:
        for product_id in product_ids:
            storefront.add_to_cart(product_id)
        storefront.begin_checkout()
        render(storefront)
        receipt = storefront.submit_order(
            CustomerInput(first_name=first_name, last_name=last_name, email=email)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo()
    click.echo(receipt.message)
    click.echo(f"Total charged: {receipt.total}")
