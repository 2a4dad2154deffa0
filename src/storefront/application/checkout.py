"""Application service: Checkout (stub).

Accepts the current snapshot and answers with a placeholder.  Nothing is
dispatched, so the cart is left exactly as it was.
"""

from __future__ import annotations

import logging

from storefront.application.dto import CheckoutAcknowledgement
from storefront.domain.model.cart import CartState

logger = logging.getLogger(__name__)

NOT_IMPLEMENTED_MESSAGE = "Checkout is not yet implemented."


class CheckoutHandler:

    def handle(self, state: CartState) -> CheckoutAcknowledgement:
        logger.info(
            "Checkout requested for %d item(s), total %s", state.item_count, state.total
        )
        return CheckoutAcknowledgement(
            accepted=False,
            message=NOT_IMPLEMENTED_MESSAGE,
            item_count=state.item_count,
            total=str(state.total),
        )
