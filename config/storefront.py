"""
Storefront composition root.

Builds every component from Django settings and wires them together.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from django.conf import settings

from shared.infrastructure.http import StorefrontApiClient
from shared.infrastructure.storage import LocalStore
from shared.interfaces import Notifier
from apps.catalog.application.services import WishlistService
from apps.catalog.application.use_cases import LoadCatalogUseCase, SearchProductsUseCase
from apps.catalog.domain.entities import Catalog
from apps.catalog.infrastructure.repositories import RemoteProductRepository, StoredProductCache
from apps.catalog.infrastructure.sample_products import sample_products
from apps.orders.application.services import CartManager
from apps.orders.application.use_cases import PlaceOrderUseCase
from apps.orders.domain.value_objects import PricingPolicy
from apps.orders.infrastructure.gateways import RemoteOrderGateway
from apps.orders.infrastructure.repositories import StoredCartRepository, StoredOrderRepository

logger = logging.getLogger(__name__)


@dataclass
class Storefront:
    """All storefront components for one shopper session."""
    notifier: Notifier
    store: LocalStore
    catalog: Catalog
    load_catalog: LoadCatalogUseCase
    search: SearchProductsUseCase
    wishlist: WishlistService
    cart: CartManager
    checkout: PlaceOrderUseCase


def pricing_policy() -> PricingPolicy:
    return PricingPolicy.from_mappings(
        delivery_fees=settings.STOREFRONT_DELIVERY_FEES,
        coupon_rates=settings.STOREFRONT_COUPONS,
        free_delivery_threshold=settings.STOREFRONT_FREE_DELIVERY_THRESHOLD,
    )


def build_storefront(
    api_client: Optional[StorefrontApiClient] = None,
    store: Optional[LocalStore] = None,
    notifier: Optional[Notifier] = None,
) -> Storefront:
    """Wire a storefront from settings. Collaborators may be passed in to replace the defaults."""
    notifier = notifier or Notifier()
    store = store or LocalStore(
        alias=settings.STOREFRONT_STORE_ALIAS,
        on_degraded=lambda error: notifier.warning(
            "Your cart cannot be saved on this device. It will be lost when you leave.",
            code=error.code,
        ),
    )
    api_client = api_client or StorefrontApiClient(
        settings.STOREFRONT_API_URL,
        timeout=settings.STOREFRONT_REQUEST_TIMEOUT,
    )

    catalog = Catalog()
    load_catalog = LoadCatalogUseCase(
        catalog=catalog,
        remote=RemoteProductRepository(api_client),
        cache=StoredProductCache(
            store,
            ttl=settings.STOREFRONT_CATALOG_CACHE_TTL,
            products_key=settings.STOREFRONT_PRODUCTS_CACHE_KEY,
            categories_key=settings.STOREFRONT_CATEGORIES_CACHE_KEY,
        ),
        notifier=notifier,
        sample_source=sample_products if settings.STOREFRONT_USE_SAMPLE_PRODUCTS else None,
    )

    cart = CartManager(
        catalog=catalog,
        repository=StoredCartRepository(
            store,
            key=settings.STOREFRONT_CART_KEY,
            max_quantity=settings.STOREFRONT_MAX_QUANTITY,
        ),
        notifier=notifier,
        policy=pricing_policy(),
    )
    checkout = PlaceOrderUseCase(
        cart_manager=cart,
        gateway=RemoteOrderGateway(
            api_client,
            timeout=settings.STOREFRONT_REQUEST_TIMEOUT,
            allow_unconfirmed=settings.STOREFRONT_ALLOW_UNCONFIRMED_ORDERS,
        ),
        orders=StoredOrderRepository(store, key=settings.STOREFRONT_ORDERS_KEY),
        notifier=notifier,
        require_variants=settings.STOREFRONT_REQUIRE_VARIANTS,
    )

    logger.debug(f"Storefront wired against {settings.STOREFRONT_API_URL}")
    return Storefront(
        notifier=notifier,
        store=store,
        catalog=catalog,
        load_catalog=load_catalog,
        search=SearchProductsUseCase(catalog),
        wishlist=WishlistService(store, notifier, catalog, key=settings.STOREFRONT_WISHLIST_KEY),
        cart=cart,
        checkout=checkout,
    )
