"""Cart snapshot types.

A ``CartState`` is never mutated.  Every transition builds a fresh one
through ``CartState.from_lines()``, which derives ``total`` and
``item_count`` from the line list so the aggregates cannot drift from
the items they summarize.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money


@dataclass(frozen=True)
class CartLine:
    """One product's entry in the cart.

    Keeps the product snapshot that was first added; later adds of the
    same id only bump ``quantity``.
    """

    product: Product
    quantity: int

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity

    @property
    def at_stock_limit(self) -> bool:
        """True when the UI should stop offering another unit."""
        return self.quantity >= self.product.stock_quantity

    def with_quantity(self, quantity: int) -> CartLine:
        return replace(self, quantity=quantity)


@dataclass(frozen=True)
class CartState:
    """Immutable cart snapshot; build it with ``empty()`` or ``from_lines()``."""

    items: tuple[CartLine, ...]
    total: Money
    item_count: int
    currency: str = DEFAULT_CURRENCY

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def empty(currency: str = DEFAULT_CURRENCY) -> CartState:
        return CartState(items=(), total=Money.zero(currency), item_count=0, currency=currency)

    @staticmethod
    def from_lines(lines: Iterable[CartLine], currency: str = DEFAULT_CURRENCY) -> CartState:
        """Build a snapshot, recomputing both aggregates from scratch."""
        items = tuple(lines)
        total = Money.zero(currency)
        for line in items:
            total = total + line.line_total
        item_count = sum(line.quantity for line in items)
        return CartState(items=items, total=total, item_count=item_count, currency=currency)

    # --- Queries --------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.items

    def find_line(self, product_id: str) -> CartLine | None:
        for line in self.items:
            if line.product_id == product_id:
                return line
        return None

    def quantity_of(self, product_id: str) -> int:
        line = self.find_line(product_id)
        return line.quantity if line is not None else 0

    # --- Invariants -----------------------------------------------------------

    def assert_invariants(self) -> None:
        """Raise AssertionError if this snapshot is structurally broken.

        A failure here is a programming defect in a transition, not a
        condition callers are expected to handle.
        """
        ids = [line.product_id for line in self.items]
        if len(ids) != len(set(ids)):
            raise AssertionError(f"Duplicate product ids in cart: {ids}")

        for line in self.items:
            if line.quantity < 1:
                raise AssertionError(
                    f"Line for '{line.product_id}' has quantity {line.quantity}"
                )

        expected_total = Money.zero(self.currency)
        for line in self.items:
            expected_total = expected_total + line.line_total
        if self.total != expected_total:
            raise AssertionError(f"Cart total {self.total} != sum of lines {expected_total}")

        expected_count = sum(line.quantity for line in self.items)
        if self.item_count != expected_count:
            raise AssertionError(
                f"Cart item count {self.item_count} != sum of quantities {expected_count}"
            )
