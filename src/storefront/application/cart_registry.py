"""One cart store per session.

Stores are created lazily on first access and dropped when the session
closes.  Each store serializes its own dispatches, so callers sharing a
session id never interleave transitions on the same cart.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from storefront.application.cart_store import CartStore

logger = logging.getLogger(__name__)


class CartRegistry:

    def __init__(self, store_factory: Callable[[], CartStore] = CartStore) -> None:
        self._store_factory = store_factory
        self._stores: dict[str, CartStore] = {}
        self._lock = threading.Lock()

    def get(self, session_id: str) -> CartStore:
        with self._lock:
            store = self._stores.get(session_id)
            if store is None:
                store = self._store_factory()
                self._stores[session_id] = store
                logger.info("Opened cart for session %s", session_id)
            return store

    def close(self, session_id: str) -> None:
        with self._lock:
            if self._stores.pop(session_id, None) is not None:
                logger.info("Closed cart for session %s", session_id)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._stores

    def __len__(self) -> int:
        return len(self._stores)
