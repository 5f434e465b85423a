# Entities
from .product import Product, PLACEHOLDER_IMAGE
from .catalog import Catalog

__all__ = ['Product', 'PLACEHOLDER_IMAGE', 'Catalog']
