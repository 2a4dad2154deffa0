"""Domain service: cart transitions.

``CartReducer.apply`` is a pure function of ``(CartState, action)``.  It
never mutates the incoming snapshot and never raises for bad input:
unknown ids are no-ops, a non-positive target quantity is a removal and a
product priced in another currency than the cart is not added.
Aggregates are recomputed from the resulting line list on every call.
"""

from __future__ import annotations

import logging
from enum import Enum

from storefront.domain.model.actions import (
    AddItem,
    CartAction,
    ClearCart,
    RemoveItem,
    UpdateQuantity,
)
from storefront.domain.model.cart import CartLine, CartState

logger = logging.getLogger(__name__)


class StockPolicy(Enum):
    """Whether the cart itself enforces ``stock_quantity``.

    UNCHECKED leaves the ceiling to the UI (the increment control is
    disabled at ``CartLine.at_stock_limit``).  CLAMP caps every line at
    the stock of the product snapshot it holds.
    """

    UNCHECKED = "unchecked"
    CLAMP = "clamp"


class CartReducer:

    def __init__(self, stock_policy: StockPolicy = StockPolicy.UNCHECKED) -> None:
        self._stock_policy = stock_policy

    @property
    def stock_policy(self) -> StockPolicy:
        return self._stock_policy

    def apply(self, state: CartState, action: CartAction) -> CartState:
        """Return the snapshot that results from applying *action* to *state*."""
        logger.debug("Cart action: %r", action)

        if isinstance(action, AddItem):
            lines = self._add(state, action)
        elif isinstance(action, RemoveItem):
            lines = [line for line in state.items if line.product_id != action.product_id]
        elif isinstance(action, UpdateQuantity):
            if action.quantity <= 0:
                return self.apply(state, RemoveItem(action.product_id))
            lines = self._set_quantity(state, action)
        elif isinstance(action, ClearCart):
            return CartState.empty(state.currency)
        else:
            raise TypeError(f"Unsupported cart action: {action!r}")

        return CartState.from_lines(lines, state.currency)

    # --- Transitions ----------------------------------------------------------

    def _add(self, state: CartState, action: AddItem) -> list[CartLine]:
        product = action.product
        if product.price.currency != state.currency:
            logger.warning(
                "Not adding '%s': priced in %s, cart is in %s",
                product.id, product.price.currency, state.currency,
            )
            return list(state.items)

        existing = state.find_line(product.id)

        if existing is None:
            if self._stock_policy is StockPolicy.CLAMP and not product.in_stock:
                logger.debug("Not adding '%s': out of stock", product.id)
                return list(state.items)
            return [*state.items, CartLine(product=product, quantity=1)]

        target = max(self._cap(existing, existing.quantity + 1), existing.quantity)
        return [
            line.with_quantity(target) if line.product_id == product.id else line
            for line in state.items
        ]

    def _set_quantity(self, state: CartState, action: UpdateQuantity) -> list[CartLine]:
        lines: list[CartLine] = []
        for line in state.items:
            if line.product_id != action.product_id:
                lines.append(line)
                continue
            target = self._cap(line, action.quantity)
            if target > 0:
                lines.append(line.with_quantity(target))
        return lines

    def _cap(self, line: CartLine, quantity: int) -> int:
        if self._stock_policy is StockPolicy.CLAMP:
            capped = min(quantity, line.product.stock_quantity)
            if capped != quantity:
                logger.debug(
                    "Clamped '%s' from %d to stock %d", line.product_id, quantity, capped
                )
            return capped
        return quantity
