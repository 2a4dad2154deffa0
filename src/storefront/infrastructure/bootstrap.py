"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  A cart store is built
per session here and handed to its consumers; nothing holds a global one.
"""

from __future__ import annotations

import logging

from storefront.application.cart_actions import CartActions
from storefront.application.cart_store import CartStore
from storefront.domain.service.cart_reducer import CartReducer
from storefront.infrastructure.config import Settings
from storefront.infrastructure.notifications.console_notifier import ConsoleNotifier
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def settings() -> Settings:
    return Settings()


def configure_logging(config: Settings) -> None:
    logging.basicConfig(level=config.log_level, format=config.log_format)


def product_repository(config: Settings) -> JsonProductRepository:
    return JsonProductRepository(config.catalog_path, currency=config.currency)


def cart_store(config: Settings) -> CartStore:
    return CartStore(CartReducer(config.stock_policy), currency=config.currency)


def cart_actions(store: CartStore) -> CartActions:
    return CartActions(store, notifiers=[ConsoleNotifier()])
