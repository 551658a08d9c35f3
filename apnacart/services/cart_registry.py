# apnacart/services/cart_registry.py
import threading
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Tuple

from apnacart.domain.errors import CartNotFound
from apnacart.services.cart_store import CartStore
from apnacart.utils.logging import get_logger

logger = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CartRegistry:
    """
    Session carts kept in process memory.

    Every access pushes the expiry forward by the TTL, so a cart only goes
    away after the customer stops using it.
    """

    def __init__(self, ttl_seconds: int, clock: Callable[[], datetime] = _utcnow):
        self.ttl = timedelta(seconds=ttl_seconds)
        self.clock = clock
        self._carts: Dict[str, Tuple[CartStore, datetime]] = {}
        # guards _carts, routes run on the threadpool
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._carts)

    def create(self) -> Tuple[str, CartStore]:
        cart_id = uuid.uuid4().hex
        store = CartStore()
        with self._lock:
            self.expire_stale()
            self._carts[cart_id] = (store, self.clock() + self.ttl)
        logger.info(f"Created cart session {cart_id}")
        return cart_id, store

    def get(self, cart_id: str) -> CartStore:
        with self._lock:
            entry = self._carts.get(cart_id)
            if not entry:
                raise CartNotFound(cart_id)

            store, expires_at = entry
            now = self.clock()
            if expires_at <= now:
                del self._carts[cart_id]
                logger.info(f"Cart session {cart_id} expired")
                raise CartNotFound(cart_id)

            self._carts[cart_id] = (store, now + self.ttl)
            return store

    def discard(self, cart_id: str) -> bool:
        with self._lock:
            if self._carts.pop(cart_id, None) is None:
                return False
        logger.info(f"Discarded cart session {cart_id}")
        return True

    def expire_stale(self) -> int:
        with self._lock:
            now = self.clock()
            stale = [cid for cid, (_, expires_at) in self._carts.items() if expires_at <= now]
            for cart_id in stale:
                del self._carts[cart_id]
        if stale:
            logger.info(f"Expired {len(stale)} cart sessions")
        return len(stale)
