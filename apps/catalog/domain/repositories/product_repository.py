"""
Product repository interfaces.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.product import Product


class ProductRepository(ABC):
    """Source of the full product list."""

    @abstractmethod
    def find_all(self) -> List[Product]:
        """
        Return every product.

        Raises:
            CatalogUnavailableError: the source could not provide products.
        """
        pass


class ProductCacheRepository(ABC):
    """Local cache of the last successfully loaded product list."""

    @abstractmethod
    def load(self) -> Optional[List[Product]]:
        """Return cached products, or None when missing or stale."""
        pass

    @abstractmethod
    def save(self, products: List[Product]) -> bool:
        """Cache the products. Returns False when nothing was persisted."""
        pass

    @abstractmethod
    def save_categories(self, categories: List[str]) -> bool:
        """Cache the category list derived from the products."""
        pass

    @abstractmethod
    def load_categories(self) -> Optional[List[str]]:
        """Return cached categories, or None when missing or stale."""
        pass
