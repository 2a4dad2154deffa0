"""Cart store: the single writer of a session's cart.

Holds the current ``CartState`` snapshot, applies one action at a time
through the ``CartReducer`` and publishes every new snapshot to
subscribers before ``dispatch`` returns.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from storefront.domain.model.actions import CartAction
from storefront.domain.model.cart import CartState
from storefront.domain.model.value_objects import DEFAULT_CURRENCY
from storefront.domain.service.cart_reducer import CartReducer

logger = logging.getLogger(__name__)

Subscriber = Callable[[CartState], None]


class CartStore:

    def __init__(
        self,
        reducer: CartReducer | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._reducer = reducer or CartReducer()
        self._state = CartState.empty(currency)
        self._subscribers: list[Subscriber] = []
        # Re-entrant so a subscriber may dispatch a follow-up action.
        self._lock = threading.RLock()

    @property
    def state(self) -> CartState:
        return self._state

    def dispatch(self, action: CartAction) -> CartState:
        """Apply *action*, publish the new snapshot and return the current one.

        If a subscriber dispatches while being notified, the nested call
        publishes its own newer snapshot and the remaining subscribers are
        not handed the older one.  Every subscriber is called even if an
        earlier one raises; the first error is re-raised afterwards and the
        new snapshot stays committed.
        """
        with self._lock:
            new_state = self._reducer.apply(self._state, action)
            if __debug__:
                new_state.assert_invariants()
            self._state = new_state

            errors: list[Exception] = []
            for subscriber in list(self._subscribers):
                if self._state is not new_state:
                    break
                try:
                    subscriber(new_state)
                except Exception as exc:
                    logger.exception("Cart subscriber %r failed", subscriber)
                    errors.append(exc)
            if errors:
                raise errors[0]
            return self._state

    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        """Register *subscriber*; the returned callable unregisters it."""
        with self._lock:
            self._subscribers.append(subscriber)
        logger.debug("Cart subscriber registered (%d total)", len(self._subscribers))

        def unsubscribe() -> None:
            with self._lock:
                if subscriber in self._subscribers:
                    self._subscribers.remove(subscriber)

        return unsubscribe
