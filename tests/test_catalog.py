"""
Catalog loading and search tests.
"""
import pytest

from shared.infrastructure.http import ApiConnectionError
from shared.interfaces import NotificationLevel
from apps.catalog.application.dtos import ProductQueryDTO
from apps.catalog.application.use_cases import (
    LoadCatalogUseCase,
    SearchProductsUseCase,
    featured_products,
    related_products,
)
from apps.catalog.domain.entities import Catalog, PLACEHOLDER_IMAGE
from apps.catalog.domain.exceptions import CatalogUnavailableError, ProductNotFoundError
from apps.catalog.domain.value_objects import CatalogSource, Money
from apps.catalog.infrastructure.normalizers import normalize_price, normalize_row, split_list
from apps.catalog.infrastructure.repositories import RemoteProductRepository, StoredProductCache
from apps.catalog.infrastructure.sample_products import sample_products

ROWS = [
    {
        'Product ID': 'TS100',
        'Name': 'Muslin Swaddle',
        'Description': 'Breathable muslin',
        'Category': 'Bedding',
        'Price (BDT)': '1,200',
        'Main Image': 'img/swaddle.jpg',
        'Image1': 'img/swaddle-2.jpg',
        'Size': 'S, M ,L',
        'Color': 'White,Grey',
        'Age Range': '0-12 months',
        'Stock': 4,
    },
    {
        'Product ID': 'TS101',
        'Name': 'Rattle Set',
        'Category': 'Toys',
        'Price (BDT)': 350,
    },
    {
        'Name': 'Row without an id',
        'Price (BDT)': 100,
    },
]


class TestNormalization:
    @pytest.mark.parametrize('value, expected', [
        ('1,200', 1200),
        ('৳ ১২০০', 1200),
        ('Tk. 450', 450),
        (499.6, 500),
        (350, 350),
        ('free', 0),
        (None, 0),
        (True, 0),
    ])
    def test_price(self, value, expected):
        assert normalize_price(value) == expected

    def test_split_list(self):
        assert split_list('S, M ,L,,') == ['S', 'M', 'L']
        assert split_list(None) == []

    def test_full_row(self):
        product = normalize_row(ROWS[0])

        assert product.id == 'TS100'
        assert product.price == Money(amount=1200)
        assert product.image_url == 'img/swaddle.jpg'
        assert product.images == ['img/swaddle.jpg', 'img/swaddle-2.jpg']
        assert product.sizes == ['S', 'M', 'L']
        assert product.colors == ['White', 'Grey']
        assert product.in_stock

    def test_missing_image_uses_placeholder(self):
        assert normalize_row(ROWS[1]).image_url == PLACEHOLDER_IMAGE

    def test_row_without_id_is_skipped(self):
        assert normalize_row(ROWS[2]) is None

    def test_zero_stock(self):
        assert not normalize_row({**ROWS[1], 'Stock': 0}).in_stock


class TestRemoteProductRepository:
    def test_fetches_products_action(self, api_client):
        api_client.get.return_value = {'success': True, 'data': ROWS}

        products = RemoteProductRepository(api_client).find_all()

        api_client.get.assert_called_once_with('products')
        assert [p.id for p in products] == ['TS100', 'TS101']

    @pytest.mark.parametrize('body', [
        {'success': False, 'error': 'quota exceeded'},
        {'success': True, 'data': 'not a list'},
        ['not', 'an', 'object'],
    ])
    def test_non_conforming_response(self, api_client, body):
        api_client.get.return_value = body

        with pytest.raises(CatalogUnavailableError):
            RemoteProductRepository(api_client).find_all()

    def test_transport_failure(self, api_client):
        api_client.get.side_effect = ApiConnectionError("offline")

        with pytest.raises(CatalogUnavailableError):
            RemoteProductRepository(api_client).find_all()


class TestProductCache:
    def test_round_trip(self, store, products):
        cache = StoredProductCache(store)
        cache.save(products)

        loaded = cache.load()
        assert [p.id for p in loaded] == ['P1', 'P2', 'P3']
        assert loaded[0].price.amount == 500
        assert loaded[0].sizes == ['0-3M', '3-6M']
        assert loaded[2].in_stock is False

    def test_stale_entry_is_ignored(self, store, products):
        cache = StoredProductCache(store)
        cache.save(products)
        entry = store.get('products_cache')
        entry['timestamp'] -= 301 * 1000
        store.set('products_cache', entry)

        assert cache.load() is None

    def test_categories(self, store):
        cache = StoredProductCache(store)
        cache.save_categories(['Toys', 'Shoes'])

        assert cache.load_categories() == ['Toys', 'Shoes']


@pytest.fixture
def load_catalog(api_client, store, notifier):
    def build(sample_source=None):
        catalog = Catalog()
        use_case = LoadCatalogUseCase(
            catalog=catalog,
            remote=RemoteProductRepository(api_client),
            cache=StoredProductCache(store),
            notifier=notifier,
            sample_source=sample_source,
        )
        return catalog, use_case
    return build


class TestLoadCatalog:
    def test_live_api(self, load_catalog, api_client, store):
        api_client.get.return_value = {'success': True, 'data': ROWS}
        catalog, use_case = load_catalog()

        result = use_case.execute()

        assert result.success
        assert result.data.source == CatalogSource.API
        assert result.data.product_count == 2
        assert catalog.get('TS100').name == 'Muslin Swaddle'
        assert [p.id for p in StoredProductCache(store).load()] == ['TS100', 'TS101']
        assert StoredProductCache(store).load_categories() == ['Bedding', 'Toys']

    def test_falls_back_to_cache(self, load_catalog, api_client, store, products, notifier):
        StoredProductCache(store).save(products)
        api_client.get.side_effect = ApiConnectionError("offline")
        catalog, use_case = load_catalog(sample_source=sample_products)

        result = use_case.execute()

        assert result.success
        assert result.data.source == CatalogSource.CACHE
        assert len(catalog) == 3
        assert notifier.last.code == 'CATALOG_FROM_CACHE'

    def test_falls_back_to_samples(self, load_catalog, api_client, notifier):
        api_client.get.side_effect = ApiConnectionError("offline")
        catalog, use_case = load_catalog(sample_source=sample_products)

        result = use_case.execute()

        assert result.success
        assert result.data.source == CatalogSource.SAMPLE
        assert len(catalog) == 6
        assert notifier.last.code == 'CATALOG_FROM_SAMPLE'

    def test_every_tier_failed(self, load_catalog, api_client, notifier):
        api_client.get.return_value = {'success': False}
        catalog, use_case = load_catalog()

        result = use_case.execute()

        assert not result.success
        assert result.error_code == 'CATALOG_UNAVAILABLE'
        assert catalog.is_empty
        assert notifier.last.level == NotificationLevel.ERROR


class TestCatalog:
    def test_lookup(self, catalog):
        assert catalog.get('P2').name == 'Baby Sneakers'
        assert 'P1' in catalog
        assert catalog.find('P9') is None

    def test_unknown_id(self, catalog):
        with pytest.raises(ProductNotFoundError):
            catalog.get('P9')

    def test_categories_in_catalog_order(self, catalog):
        assert catalog.categories() == ['Clothing', 'Shoes', 'Toys']


class TestSearch:
    def search(self, catalog, **query):
        result = SearchProductsUseCase(catalog).execute(ProductQueryDTO(**query))
        assert result.success
        return result.data

    def test_free_text(self, catalog):
        page = self.search(catalog, search='cotton')
        assert [p.id for p in page.items] == ['P1']

    def test_category_and_stock(self, catalog):
        assert self.search(catalog, category='Toys').total == 1
        assert self.search(catalog, category='Toys', in_stock_only=True).total == 0

    def test_size_and_price_range(self, catalog):
        assert [p.id for p in self.search(catalog, size='M').items] == ['P2']
        assert [p.id for p in self.search(catalog, min_price=300, max_price=1000).items] == ['P1']

    @pytest.mark.parametrize('sort, expected', [
        ('name', ['P2', 'P1', 'P3']),
        ('price-low', ['P3', 'P1', 'P2']),
        ('price-high', ['P2', 'P1', 'P3']),
        ('newest', ['P3', 'P2', 'P1']),
    ])
    def test_sort(self, catalog, sort, expected):
        assert [p.id for p in self.search(catalog, sort=sort).items] == expected

    def test_pagination(self):
        catalog = Catalog(sample_products(), CatalogSource.SAMPLE)

        first = self.search(catalog, page_size=4)
        second = self.search(catalog, page=2, page_size=4)

        assert first.num_pages == 2
        assert first.has_next
        assert len(second.items) == 2
        assert second.has_previous

    def test_out_of_range_page_returns_last(self, catalog):
        page = self.search(catalog, page=9)
        assert page.page == 1
        assert page.total == 3

    def test_featured_and_related(self, catalog, products):
        assert featured_products(catalog, limit=2) == products[:2]
        assert related_products(catalog, products[0]) == []
