"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure import bootstrap
from storefront.infrastructure.config import Settings


@click.command("list")
@click.option("--in-stock", is_flag=True, default=False, help="Only show products with stock.")
@click.pass_obj
def catalog_list(config: Settings, in_stock: bool) -> None:
    """List all products in the catalog."""
    repo = bootstrap.product_repository(config)

    try:
        products = repo.list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if in_stock:
        products = [p for p in products if p.in_stock]

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<10} {'Name':<28} {'Price':>12} {'Stock':>6}")
    click.echo("-" * 59)
    for p in products:
        click.echo(f"{p.id:<10} {p.name:<28} {str(p.price):>12} {p.stock_quantity:>6}")
