"""Application service: render the current cart as a DTO."""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.application.dto import CartDTO, CartLineDTO
from storefront.domain.model.cart import CartState


class ShowCartHandler:

    def __init__(self, store: CartStore) -> None:
        self._store = store

    def handle(self) -> CartDTO:
        return self.to_dto(self._store.state)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def to_dto(state: CartState) -> CartDTO:
        return CartDTO(
            items=[
                CartLineDTO(
                    product_id=line.product_id,
                    product_name=line.product.name,
                    quantity=line.quantity,
                    unit_price=str(line.product.price),
                    line_total=str(line.line_total),
                    at_stock_limit=line.at_stock_limit,
                )
                for line in state.items
            ],
            total=str(state.total),
            item_count=state.item_count,
            is_empty=state.is_empty,
        )
