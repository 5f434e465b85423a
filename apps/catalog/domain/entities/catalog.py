"""
Catalog: the explicitly owned list of loaded products.
"""
from typing import Dict, Iterable, Iterator, List, Optional

from ..exceptions import ProductNotFoundError
from ..value_objects.catalog_source import CatalogSource
from .product import Product


class Catalog:
    """Ordered product list with lookup by id."""

    def __init__(self, products: Iterable[Product] = (), source: CatalogSource = CatalogSource.EMPTY):
        self._products: Dict[str, Product] = {}
        self.source = CatalogSource.EMPTY
        self.replace(products, source)

    def replace(self, products: Iterable[Product], source: CatalogSource) -> None:
        """Swap in a freshly loaded product list. Later duplicates are ignored."""
        loaded: Dict[str, Product] = {}
        for product in products:
            loaded.setdefault(product.id, product)
        self._products = loaded
        self.source = source if loaded else CatalogSource.EMPTY

    def get(self, product_id: str) -> Product:
        """Return the product or raise ``ProductNotFoundError``."""
        product = self._products.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def find(self, product_id: str) -> Optional[Product]:
        return self._products.get(product_id)

    @property
    def products(self) -> List[Product]:
        return list(self._products.values())

    def categories(self) -> List[str]:
        """Distinct non-empty categories in catalog order."""
        seen: Dict[str, None] = {}
        for product in self._products.values():
            if product.category:
                seen.setdefault(product.category, None)
        return list(seen)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products.values())

    def __len__(self) -> int:
        return len(self._products)

    @property
    def is_empty(self) -> bool:
        return not self._products
