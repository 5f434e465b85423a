# Repositories
from .remote_product_repository import RemoteProductRepository
from .stored_product_cache import StoredProductCache

__all__ = ['RemoteProductRepository', 'StoredProductCache']
