"""CLI commands for the shopping cart.

The cart only lives for the duration of one command: ``cart apply``
opens a fresh session, replays the given steps through the action
helpers and prints the resulting cart.
"""

from __future__ import annotations

from dataclasses import dataclass

import click

from storefront.application.checkout import CheckoutHandler
from storefront.application.dto import CartDTO
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import DomainException, EntityNotFoundError
from storefront.infrastructure import bootstrap
from storefront.infrastructure.config import Settings


@dataclass(frozen=True)
class CartStep:
    """One parsed step: ``add:<id>``, ``remove:<id>``, ``qty:<id>:<n>`` or ``clear``."""

    verb: str
    product_id: str | None = None
    quantity: int | None = None


def _parse_steps(raw_steps: tuple[str, ...]) -> list[CartStep]:
    """Parse ('add:cr-001', 'qty:cr-001:3', 'clear') into CartStep list."""
    steps: list[CartStep] = []
    for raw in raw_steps:
        parts = [p.strip() for p in raw.split(":")]
        verb = parts[0].lower()
        if verb == "clear" and len(parts) == 1:
            steps.append(CartStep("clear"))
        elif verb in ("add", "remove") and len(parts) == 2 and parts[1]:
            steps.append(CartStep(verb, product_id=parts[1]))
        elif verb == "qty" and len(parts) == 3 and parts[1]:
            try:
                qty = int(parts[2])
            except ValueError:
                raise click.BadParameter(
                    f"Invalid quantity '{parts[2]}' for product '{parts[1]}'."
                )
            steps.append(CartStep(verb, product_id=parts[1], quantity=qty))
        else:
            raise click.BadParameter(
                f"Invalid step '{raw}'. Expected 'add:ID', 'remove:ID', 'qty:ID:N' or 'clear'."
            )
    return steps


def _display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying a cart."""
    if dto.is_empty:
        click.echo("Your cart is empty.")
        return

    click.echo(f"Cart ({dto.item_count} item(s))")
    click.echo()
    click.echo(f"  {'Product':<28} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*60}")
    for item in dto.items:
        marker = " *" if item.at_stock_limit else ""
        click.echo(
            f"  {item.product_name:<28} {item.quantity:>5} {item.unit_price:>12} "
            f"{item.line_total:>12}{marker}"
        )
    click.echo(f"  {'-'*60}")
    click.echo(f"  {'Cart Total':<34} {dto.total:>25}")
    if any(item.at_stock_limit for item in dto.items):
        click.echo("  * no more stock available")


@click.command("apply")
@click.argument("steps", nargs=-1, required=True)
@click.option("--checkout", is_flag=True, default=False, help="Run checkout afterwards.")
@click.pass_obj
def cart_apply(config: Settings, steps: tuple[str, ...], checkout: bool) -> None:
    """Apply STEPS to a new cart and show the result.

    STEPS are 'add:ID', 'remove:ID', 'qty:ID:N' or 'clear', applied in order.
    """
    parsed = _parse_steps(steps)

    repo = bootstrap.product_repository(config)
    store = bootstrap.cart_store(config)
    actions = bootstrap.cart_actions(store)

    try:
        for step in parsed:
            if step.verb == "add":
                product = repo.get_by_id(step.product_id)
                if product is None:
                    raise EntityNotFoundError(f"Product not found: '{step.product_id}'")
                actions.add_to_cart(product)
            elif step.verb == "remove":
                actions.remove_from_cart(step.product_id)
            elif step.verb == "qty":
                actions.update_quantity(step.product_id, step.quantity)
            else:
                actions.clear_cart()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(ShowCartHandler(store).handle())

    if checkout:
        ack = CheckoutHandler().handle(store.state)
        click.echo()
        click.echo(ack.message)
