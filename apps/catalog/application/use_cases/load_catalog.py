"""
Load catalog use case.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from shared.application import UseCase, UseCaseResult
from shared.interfaces import Notifier, handle_domain_exception
from ...domain.entities.catalog import Catalog
from ...domain.entities.product import Product
from ...domain.exceptions import CatalogUnavailableError
from ...domain.repositories.product_repository import ProductRepository, ProductCacheRepository
from ...domain.value_objects.catalog_source import CatalogSource
from ..dtos.product_dto import CatalogLoadDTO

logger = logging.getLogger(__name__)


@dataclass
class LoadCatalogUseCase(UseCase[None, CatalogLoadDTO]):
    """
    Populate the catalog with a three-tier fallback.

    1. live API (refreshes the product and category caches)
    2. local cache, if younger than its TTL
    3. built-in sample products, when a ``sample_source`` is configured
    """

    catalog: Catalog
    remote: ProductRepository
    cache: ProductCacheRepository
    notifier: Notifier
    sample_source: Optional[Callable[[], List[Product]]] = None

    def execute(self, input_dto: Optional[None] = None) -> UseCaseResult[CatalogLoadDTO]:
        try:
            products = self.remote.find_all()
        except CatalogUnavailableError as e:
            logger.warning(f"Live catalog unavailable: {e.message}")
            return self._fallback(e)

        self.catalog.replace(products, CatalogSource.API)
        self.cache.save(products)
        self.cache.save_categories(self.catalog.categories())
        logger.info(f"Catalog loaded from API: {len(self.catalog)} products")
        return UseCaseResult.ok(self._result())

    def _fallback(self, error: CatalogUnavailableError) -> UseCaseResult[CatalogLoadDTO]:
        cached = self.cache.load()
        if cached:
            self.catalog.replace(cached, CatalogSource.CACHE)
            logger.warning(f"Catalog loaded from cache: {len(self.catalog)} products")
            self.notifier.warning(
                "Showing cached products. Please check your internet connection.",
                code="CATALOG_FROM_CACHE",
            )
            return UseCaseResult.ok(self._result())

        if self.sample_source is not None:
            self.catalog.replace(self.sample_source(), CatalogSource.SAMPLE)
            logger.warning(f"Catalog loaded from sample data: {len(self.catalog)} products")
            self.notifier.warning(
                "Showing sample products while the shop is unreachable.",
                code="CATALOG_FROM_SAMPLE",
            )
            return UseCaseResult.ok(self._result())

        logger.error("Catalog could not be loaded from any source")
        return handle_domain_exception(error, self.notifier)

    def _result(self) -> CatalogLoadDTO:
        return CatalogLoadDTO(
            source=self.catalog.source,
            product_count=len(self.catalog),
            categories=self.catalog.categories(),
        )
