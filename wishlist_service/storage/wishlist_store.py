"""In-memory wishlist store."""

import logging
import threading
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from wishlist_service.config import settings
from wishlist_service.core.models import Wishlist
from wishlist_service.core.updates import format_timestamp, utc_now_iso
from wishlist_service.storage.fixtures import load_seed_wishlists

logger = logging.getLogger(__name__)


class WishlistNotFoundError(LookupError):
    """No wishlist with the requested id."""

    def __init__(self, wishlist_id: str):
        super().__init__(f"Wishlist not found: {wishlist_id}")
        self.wishlist_id = wishlist_id


class WishlistStore:
    """Fixed set of wishlist records keyed by id.

    Records are seeded once; the only mutation is ``last_seen_at`` via
    ``mark_viewed``. Accessors hold a lock and hand out copies.
    """

    def __init__(self, wishlists: Iterable[Wishlist]):
        self._lock = threading.Lock()
        self._wishlists: Dict[str, Wishlist] = {}
        for wishlist in wishlists:
            if wishlist.wishlist_id in self._wishlists:
                logger.warning(f"Duplicate wishlist id {wishlist.wishlist_id}, keeping last")
            self._wishlists[wishlist.wishlist_id] = wishlist.model_copy(deep=True)

    @classmethod
    def from_fixtures(cls, path: Optional[str] = None) -> "WishlistStore":
        """Create store seeded from fixtures."""
        store = cls(load_seed_wishlists(path))
        logger.info(f"Seeded {len(store)} wishlists")
        return store

    def __len__(self) -> int:
        with self._lock:
            return len(self._wishlists)

    def __contains__(self, wishlist_id: object) -> bool:
        with self._lock:
            return wishlist_id in self._wishlists

    def ids(self) -> List[str]:
        """Wishlist ids in seed order."""
        with self._lock:
            return list(self._wishlists)

    def get(self, wishlist_id: str) -> Wishlist:
        """Get a copy of the wishlist, or raise WishlistNotFoundError."""
        with self._lock:
            wishlist = self._wishlists.get(wishlist_id)
            if wishlist is None:
                raise WishlistNotFoundError(wishlist_id)
            return wishlist.model_copy(deep=True)

    def mark_viewed(self, wishlist_id: str, now: Optional[datetime] = None) -> Wishlist:
        """Set ``last_seen_at`` to now and return the updated copy."""
        last_seen_at = format_timestamp(now) if now else utc_now_iso()

        with self._lock:
            wishlist = self._wishlists.get(wishlist_id)
            if wishlist is None:
                raise WishlistNotFoundError(wishlist_id)

            wishlist.last_seen_at = last_seen_at
            logger.debug(f"Wishlist {wishlist_id} last seen at {last_seen_at}")
            return wishlist.model_copy(deep=True)


# Global store instance
_store: Optional[WishlistStore] = None
_store_lock = threading.Lock()


def get_wishlist_store() -> WishlistStore:
    """Get wishlist store dependency."""
    global _store
    with _store_lock:
        if _store is None:
            _store = WishlistStore.from_fixtures(settings.WISHLIST_FIXTURES_PATH)
        return _store
