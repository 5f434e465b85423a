"""
Catalog DTOs.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from ...domain.value_objects.catalog_source import CatalogSource


@dataclass
class ProductQueryDTO:
    """Filters, sort order and page for a product listing."""
    search: str = ""
    category: str = ""
    size: str = ""
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    in_stock_only: bool = False
    sort: str = "name"
    page: int = 1
    page_size: Optional[int] = None


@dataclass
class CatalogLoadDTO:
    """Outcome of a catalog load."""
    source: CatalogSource
    product_count: int
    categories: List[str] = field(default_factory=list)
