"""
Wishlist service.
"""
import logging
from typing import List, Optional

from shared.infrastructure.storage import LocalStore
from shared.interfaces import Notifier
from ...domain.entities.catalog import Catalog

logger = logging.getLogger(__name__)


class WishlistService:
    """Product ids the shopper saved for later, persisted as a JSON list."""

    def __init__(
        self,
        store: LocalStore,
        notifier: Notifier,
        catalog: Optional[Catalog] = None,
        key: str = 'tinystepsbd_wishlist',
    ):
        self.store = store
        self.notifier = notifier
        self.catalog = catalog
        self.key = key

    def items(self) -> List[str]:
        """Saved ids in insertion order. Malformed entries are dropped."""
        stored = self.store.get(self.key, [])
        if not isinstance(stored, list):
            return []
        ids: List[str] = []
        for value in stored:
            if isinstance(value, str) and value not in ids:
                ids.append(value)
        return ids

    def contains(self, product_id: str) -> bool:
        return product_id in self.items()

    def add(self, product_id: str) -> bool:
        """Save a product. Returns False if it was already saved."""
        ids = self.items()
        if product_id in ids:
            self.notifier.info("This product is already in your wishlist.")
            return False
        if self.catalog is not None and not self.catalog.is_empty and product_id not in self.catalog:
            logger.warning(f"Wishlisting product '{product_id}' that is not in the loaded catalog")
        ids.append(product_id)
        self.store.set(self.key, ids)
        self.notifier.success("Added to your wishlist.")
        return True

    def remove(self, product_id: str) -> bool:
        ids = self.items()
        if product_id not in ids:
            return False
        ids.remove(product_id)
        self.store.set(self.key, ids)
        self.notifier.info("Removed from your wishlist.")
        return True

    def toggle(self, product_id: str) -> bool:
        """Add or remove. Returns True when the product is now saved."""
        if self.contains(product_id):
            self.remove(product_id)
            return False
        return self.add(product_id)

    def clear(self) -> None:
        self.store.set(self.key, [])
