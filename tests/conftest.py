"""
Pytest configuration and fixtures.
"""
from unittest.mock import MagicMock

import pytest
from django.core.cache import caches

from shared.infrastructure.http import StorefrontApiClient
from shared.infrastructure.storage import LocalStore
from shared.interfaces import Notifier
from apps.catalog.domain.entities import Catalog, Product
from apps.catalog.domain.value_objects import CatalogSource
from apps.catalog.domain.value_objects.money import Money
from apps.orders.application.services import CartManager
from apps.orders.infrastructure.repositories import StoredCartRepository, StoredOrderRepository


@pytest.fixture(autouse=True)
def clear_store():
    """Every test starts with an empty persistent store."""
    caches['storefront'].clear()
    yield
    caches['storefront'].clear()


@pytest.fixture
def notifier():
    return Notifier()


@pytest.fixture
def store():
    return LocalStore(alias='storefront')


@pytest.fixture
def products():
    return [
        Product(
            id='P1',
            name='Cotton Romper',
            price=Money(amount=500),
            category='Clothing',
            description='Soft cotton romper',
            image_url='img/p1.jpg',
            sizes=['0-3M', '3-6M'],
            colors=['Blue', 'Pink'],
        ),
        Product(
            id='P2',
            name='Baby Sneakers',
            price=Money(amount=1500),
            category='Shoes',
            image_url='img/p2.jpg',
            sizes=['S', 'M'],
        ),
        Product(
            id='P3',
            name='Stacking Rings',
            price=Money(amount=200),
            category='Toys',
            image_url='img/p3.jpg',
            in_stock=False,
        ),
    ]


@pytest.fixture
def catalog(products):
    return Catalog(products, CatalogSource.API)


@pytest.fixture
def cart_repository(store):
    return StoredCartRepository(store)


@pytest.fixture
def order_repository(store):
    return StoredOrderRepository(store)


@pytest.fixture
def cart_manager(catalog, cart_repository, notifier):
    return CartManager(catalog=catalog, repository=cart_repository, notifier=notifier)


@pytest.fixture
def api_client():
    """An API client whose HTTP calls are mocked out."""
    return MagicMock(spec=StorefrontApiClient)
