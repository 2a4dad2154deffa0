"""Data Transfer Objects — plain containers that cross layer boundaries.

Money values are pre-formatted so the presentation layer never touches
domain types.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartLineDTO:

    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$1,500.00"
    line_total: str
    at_stock_limit: bool


@dataclass(frozen=True)
class CartDTO:

    items: list[CartLineDTO]
    total: str
    item_count: int
    is_empty: bool


@dataclass(frozen=True)
class CheckoutAcknowledgement:
    """Placeholder answer from the checkout stub."""

    accepted: bool
    message: str
    item_count: int
    total: str
