"""Action-helper façade over a ``CartStore``.

Each helper dispatches exactly one action and then hands a
``Notification`` to every registered notifier.  No business logic lives
here; the transitions themselves stay in the reducer.
"""

from __future__ import annotations

import logging

from storefront.application.cart_store import CartStore
from storefront.application.notifier import Notification, Notifier
from storefront.domain.model.actions import AddItem, ClearCart, RemoveItem, UpdateQuantity
from storefront.domain.model.cart import CartState
from storefront.domain.model.product import Product

logger = logging.getLogger(__name__)


class CartActions:

    def __init__(self, store: CartStore, notifiers: list[Notifier] | None = None) -> None:
        self._store = store
        self._notifiers: list[Notifier] = list(notifiers or [])

    @property
    def store(self) -> CartStore:
        return self._store

    def add_notifier(self, notifier: Notifier) -> None:
        self._notifiers.append(notifier)

    # --- Helpers --------------------------------------------------------------

    def add_to_cart(self, product: Product) -> CartState:
        logger.info("Adding to cart: %s", product.name)
        state = self._store.dispatch(AddItem(product))
        self._notify(
            "Added to cart!",
            f"{product.name} has been added to your cart.",
        )
        return state

    def remove_from_cart(self, product_id: str) -> CartState:
        logger.info("Removing from cart: %s", product_id)
        state = self._store.dispatch(RemoveItem(product_id))
        self._notify(
            "Removed from cart",
            "The item has been removed from your cart.",
        )
        return state

    def update_quantity(self, product_id: str, quantity: int) -> CartState:
        logger.info("Updating quantity: %s -> %d", product_id, quantity)
        return self._store.dispatch(UpdateQuantity(product_id, quantity))

    def clear_cart(self) -> CartState:
        logger.info("Clearing cart")
        state = self._store.dispatch(ClearCart())
        self._notify(
            "Cart emptied",
            "All items have been removed from your cart.",
        )
        return state

    # --- Internal helpers -----------------------------------------------------

    def _notify(self, title: str, description: str) -> None:
        notification = Notification(title=title, description=description)
        for notifier in self._notifiers:
            notifier.notify(notification)
