# Value objects
from .money import Money
from .catalog_source import CatalogSource

__all__ = ['Money', 'CatalogSource']
