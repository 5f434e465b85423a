# Repositories
from .product_repository import ProductRepository, ProductCacheRepository

__all__ = ['ProductRepository', 'ProductCacheRepository']
