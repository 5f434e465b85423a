"""
Product cache kept in the persistent store.
"""
import logging
import time
from typing import List, Optional

from shared.infrastructure.storage import LocalStore
from ...domain.entities.product import Product
from ...domain.repositories.product_repository import ProductCacheRepository
from ...interfaces.serializers import ProductSerializer

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class StoredProductCache(ProductCacheRepository):
    """
    Stores ``{"products": [...], "timestamp": <epoch ms>}``.

    Entries older than ``ttl`` seconds are ignored on read.
    """

    def __init__(
        self,
        store: LocalStore,
        ttl: int = 300,
        products_key: str = 'products_cache',
        categories_key: str = 'categories_cache',
    ):
        self.store = store
        self.ttl = ttl
        self.products_key = products_key
        self.categories_key = categories_key

    def _is_fresh(self, entry) -> bool:
        if not isinstance(entry, dict):
            return False
        timestamp = entry.get('timestamp')
        if not isinstance(timestamp, (int, float)):
            return False
        return _now_ms() - timestamp < self.ttl * 1000

    def load(self) -> Optional[List[Product]]:
        entry = self.store.get(self.products_key)
        if not self._is_fresh(entry):
            return None

        records = entry.get('products')
        if not isinstance(records, list):
            return None

        products = []
        for record in records:
            serializer = ProductSerializer(data=record)
            if serializer.is_valid():
                products.append(serializer.save())
            else:
                logger.warning(f"Dropping cached product: {serializer.errors}")
        return products

    def save(self, products: List[Product]) -> bool:
        return self.store.set(self.products_key, {
            'products': ProductSerializer(products, many=True).data,
            'timestamp': _now_ms(),
        })

    def load_categories(self) -> Optional[List[str]]:
        entry = self.store.get(self.categories_key)
        if not self._is_fresh(entry):
            return None
        categories = entry.get('categories')
        return list(categories) if isinstance(categories, list) else None

    def save_categories(self, categories: List[str]) -> bool:
        return self.store.set(self.categories_key, {
            'categories': list(categories),
            'timestamp': _now_ms(),
        })
