# DTOs
from .product_dto import ProductQueryDTO, CatalogLoadDTO

__all__ = ['ProductQueryDTO', 'CatalogLoadDTO']
