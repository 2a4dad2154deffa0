"""The closed set of actions a cart accepts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from storefront.domain.model.product import Product


class ActionType(Enum):
    ADD_ITEM = "ADD_ITEM"
    REMOVE_ITEM = "REMOVE_ITEM"
    UPDATE_QUANTITY = "UPDATE_QUANTITY"
    CLEAR_CART = "CLEAR_CART"


@dataclass(frozen=True)
class AddItem:
    product: Product
    type: ClassVar[ActionType] = ActionType.ADD_ITEM


@dataclass(frozen=True)
class RemoveItem:
    product_id: str
    type: ClassVar[ActionType] = ActionType.REMOVE_ITEM


@dataclass(frozen=True)
class UpdateQuantity:
    product_id: str
    quantity: int
    type: ClassVar[ActionType] = ActionType.UPDATE_QUANTITY


@dataclass(frozen=True)
class ClearCart:
    type: ClassVar[ActionType] = ActionType.CLEAR_CART


CartAction = Union[AddItem, RemoveItem, UpdateQuantity, ClearCart]
