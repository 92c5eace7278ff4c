"""CLI commands for the journal."""

from __future__ import annotations

import click

from storefront.application.storefront import Storefront
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli.render import render


@click.command("list")
@click.pass_obj
def article_list(storefront: Storefront) -> None:
    """List journal articles."""
    for article in storefront.articles:
        click.echo(f"{article.id:<4} {article.date:<16} {article.title}")


@click.command("show")
@click.option("--id", "article_id", required=True, help="Article ID.")
@click.pass_obj
def article_show(storefront: Storefront, article_id: str) -> None:
    """Read one journal article."""
    try:
        storefront.select_article(article_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    render(storefront)
