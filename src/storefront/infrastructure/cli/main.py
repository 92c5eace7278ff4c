import logging

import click

from storefront.application.events import Event, OrderPlaced, StorageFailed
from storefront.infrastructure.bootstrap import DATA_DIR_ENV, build_storefront
from storefront.infrastructure.cli.article_commands import article_list, article_show
from storefront.infrastructure.cli.order_commands import checkout, order_list, order_show
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)


def _report(event: Event) -> None:
    if isinstance(event, StorageFailed):
        click.secho(
            f"Warning: {event.document} were not saved ({event.reason})",
            fg="yellow",
            err=True,
        )
    elif isinstance(event, OrderPlaced):
        logging.getLogger(__name__).debug("Order placed: %s", event.order_id)


@click.group()
@click.option(
    "--data-dir",
    envvar=DATA_DIR_ENV,
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding products.json and orders.json.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: str | None, verbose: bool) -> None:
    """Aura storefront: catalog, orders and checkout."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    storefront = build_storefront(data_dir)
    storefront.events.subscribe(_report)
    ctx.obj = storefront


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def order() -> None:
    """Review orders."""


@cli.group()
def article() -> None:
    """Read the journal."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
order.add_command(order_list)
order.add_command(order_show)
article.add_command(article_list)
article.add_command(article_show)
cli.add_command(checkout)
