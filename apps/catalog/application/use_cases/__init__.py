# Use cases
from .load_catalog import LoadCatalogUseCase
from .search_products import SearchProductsUseCase, featured_products, related_products

__all__ = [
    'LoadCatalogUseCase',
    'SearchProductsUseCase',
    'featured_products',
    'related_products',
]
