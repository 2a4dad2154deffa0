"""Product record as supplied by the catalog.

The cart holds products by reference and never changes them.  Only
``id``, ``price`` and ``stock_quantity`` carry meaning for the cart;
everything else rides along in ``details``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """An immutable catalog entry.

    Equality ignores ``details``; two records with the same id, name,
    price and stock compare equal.
    """

    id: str
    name: str
    price: Money
    stock_quantity: int
    details: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        if not self.id or not str(self.id).strip():
            raise ValidationError("Product id is required")
        if isinstance(self.stock_quantity, bool) or not isinstance(self.stock_quantity, int):
            raise ValidationError(
                f"Stock quantity must be an integer, got {type(self.stock_quantity).__name__}"
            )
        if self.stock_quantity < 0:
            raise ValidationError(
                f"Stock quantity cannot be negative, got {self.stock_quantity}"
            )

    @property
    def in_stock(self) -> bool:
        return self.stock_quantity > 0
