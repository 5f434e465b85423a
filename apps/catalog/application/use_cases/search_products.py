"""
Search products use case.
"""
from dataclasses import dataclass, field
from typing import Callable, Dict, List

from shared.application import UseCase, UseCaseResult
from shared.interfaces import PageResult, StandardPagination
from ...domain.entities.catalog import Catalog
from ...domain.entities.product import Product
from ..dtos.product_dto import ProductQueryDTO


def _by_name(products: List[Product]) -> List[Product]:
    return sorted(products, key=lambda p: p.name.lower())


def _by_price_low(products: List[Product]) -> List[Product]:
    return sorted(products, key=lambda p: p.price.amount)


def _by_price_high(products: List[Product]) -> List[Product]:
    return sorted(products, key=lambda p: p.price.amount, reverse=True)


def _newest(products: List[Product]) -> List[Product]:
    # Newer sheet rows carry higher product ids.
    return sorted(products, key=lambda p: p.id, reverse=True)


SORTERS: Dict[str, Callable[[List[Product]], List[Product]]] = {
    'name': _by_name,
    'price-low': _by_price_low,
    'price-high': _by_price_high,
    'newest': _newest,
}


@dataclass
class SearchProductsUseCase(UseCase[ProductQueryDTO, PageResult[Product]]):
    """Filter, sort and paginate the loaded catalog."""

    catalog: Catalog
    pagination: StandardPagination = field(default_factory=StandardPagination)

    def execute(self, input_dto: ProductQueryDTO) -> UseCaseResult[PageResult[Product]]:
        products = self.filter(input_dto)
        sorter = SORTERS.get(input_dto.sort, _by_name)
        page = self.pagination.paginate(sorter(products), input_dto.page, input_dto.page_size)
        return UseCaseResult.ok(page)

    def filter(self, query: ProductQueryDTO) -> List[Product]:
        products = self.catalog.products
        if query.search:
            products = [p for p in products if p.matches(query.search)]
        if query.category:
            products = [p for p in products if p.category == query.category]
        if query.size:
            products = [p for p in products if p.has_size(query.size)]
        if query.min_price is not None:
            products = [p for p in products if p.price.amount >= query.min_price]
        if query.max_price is not None:
            products = [p for p in products if p.price.amount <= query.max_price]
        if query.in_stock_only:
            products = [p for p in products if p.in_stock]
        return products


def featured_products(catalog: Catalog, limit: int = 6) -> List[Product]:
    """The first products of the sheet are the featured ones."""
    return catalog.products[:limit]


def related_products(catalog: Catalog, product: Product, limit: int = 4) -> List[Product]:
    """Other products from the same category."""
    return [
        p for p in catalog
        if p.category == product.category and p.id != product.id
    ][:limit]
