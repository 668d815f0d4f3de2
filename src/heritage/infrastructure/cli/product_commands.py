"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from heritage.application.list_products import ListCategoriesHandler, ListProductsHandler
from heritage.application.show_product import ShowProductHandler
from heritage.domain.exceptions import DomainException
from heritage.infrastructure import bootstrap


@click.command("list")
@click.option("--category", default=None, help="Only products in this category.")
@click.option("--featured", is_flag=True, default=False, help="Only featured pieces.")
def product_list(category: str | None, featured: bool) -> None:
    """List products in the catalog."""
    with bootstrap.http_client() as http:
        handler = ListProductsHandler(catalog=bootstrap.catalog_gateway(http))
        try:
            products = handler.handle(category=category, featured_only=featured)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<36} {'Era':<12} {'Price':>12}")
    click.echo("-" * 69)
    for p in products:
        marker = "*" if p.is_featured else " "
        click.echo(f"{p.id:<6} {p.name[:35]:<35}{marker} {p.era[:12]:<12} {p.price:>12}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show one product."""
    with bootstrap.http_client() as http:
        handler = ShowProductHandler(catalog=bootstrap.catalog_gateway(http))
        try:
            p = handler.handle(product_id)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"#{p.id}  {p.name}")
    click.echo(f"Price:     {p.price}")
    click.echo(f"Category:  {p.category}")
    click.echo(f"Era:       {p.era}")
    click.echo(f"Condition: {p.condition}")
    click.echo(f"Material:  {p.material}")
    if p.description:
        click.echo()
        click.echo(p.description)


@click.command("categories")
def category_list() -> None:
    """List catalog categories."""
    with bootstrap.http_client() as http:
        handler = ListCategoriesHandler(catalog=bootstrap.catalog_gateway(http))
        try:
            categories = handler.handle()
        except DomainException as exc:
            raise click.ClickException(str(exc))

    if not categories:
        click.echo("No categories found.")
        return
    for c in categories:
        click.echo(f"{c.id:<6} {c.name}")
