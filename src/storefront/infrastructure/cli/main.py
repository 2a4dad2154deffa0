import click
import pydantic

from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.cart_commands import cart_apply
from storefront.infrastructure.cli.catalog_commands import catalog_list


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Storefront — catalog and shopping cart"""
    try:
        config = bootstrap.settings()
    except pydantic.ValidationError as exc:
        raise click.ClickException(f"Invalid settings: {exc}")
    bootstrap.configure_logging(config)
    ctx.obj = config


@cli.group()
def catalog() -> None:
    """Browse the product catalog."""


@cli.group()
def cart() -> None:
    """Work with a shopping cart."""


# Register subcommands
catalog.add_command(catalog_list)
cart.add_command(cart_apply)
