"""
Product repository backed by the storefront script endpoint.
"""
import logging
from typing import List

from shared.infrastructure.http import ApiError, StorefrontApiClient
from ...domain.entities.product import Product
from ...domain.exceptions import CatalogUnavailableError
from ...domain.repositories.product_repository import ProductRepository
from ..normalizers import normalize_row

logger = logging.getLogger(__name__)


class RemoteProductRepository(ProductRepository):
    """Fetches ``?action=products`` and normalizes the sheet rows."""

    ACTION = 'products'

    def __init__(self, api_client: StorefrontApiClient):
        self.api_client = api_client

    def find_all(self) -> List[Product]:
        try:
            response = self.api_client.get(self.ACTION)
        except ApiError as e:
            raise CatalogUnavailableError(e.message) from e

        if not isinstance(response, dict) or response.get('success') is not True:
            error = response.get('error') if isinstance(response, dict) else None
            raise CatalogUnavailableError(error or "unexpected response shape")

        rows = response.get('data')
        if not isinstance(rows, list):
            raise CatalogUnavailableError("response data is not a list")

        products = []
        for row in rows:
            if not isinstance(row, dict):
                continue
            product = normalize_row(row)
            if product is not None:
                products.append(product)

        logger.info(f"Fetched {len(products)} products from API ({len(rows)} rows)")
        return products
