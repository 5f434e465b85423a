"""
Base settings shared by every environment.
"""
import json
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent


def env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def env_json(name: str, default):
    value = os.environ.get(name)
    return json.loads(value) if value else default


SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'tinysteps-storefront-insecure-key')
DEBUG = env_bool('DJANGO_DEBUG', False)

INSTALLED_APPS = [
    'rest_framework',
]

DATABASES = {}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'Asia/Dhaka'
USE_I18N = True
USE_TZ = True

# Persistent store
STOREFRONT_STORE_ALIAS = 'storefront'
STOREFRONT_STORE_DIR = os.environ.get('STOREFRONT_STORE_DIR', str(BASE_DIR / 'var' / 'store'))

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    },
    STOREFRONT_STORE_ALIAS: {
        'BACKEND': 'django.core.cache.backends.filebased.FileBasedCache',
        'LOCATION': STOREFRONT_STORE_DIR,
        'TIMEOUT': None,
        'OPTIONS': {
            'MAX_ENTRIES': 1000,
        },
    },
}

STOREFRONT_CART_KEY = 'tinystepsbd_cart'
STOREFRONT_WISHLIST_KEY = 'tinystepsbd_wishlist'
STOREFRONT_ORDERS_KEY = 'tinystepsbd_orders'
STOREFRONT_PRODUCTS_CACHE_KEY = 'products_cache'
STOREFRONT_CATEGORIES_CACHE_KEY = 'categories_cache'

# Storefront API
STOREFRONT_API_URL = os.environ.get(
    'STOREFRONT_API_URL',
    'https://script.google.com/macros/s/AKfycbyW3ZHdsQI2ohP6Fk3CAHhsYp4n_YY3BC9cJDedRqSqMMeL4a4BswE-DHbDuYChJlwM/exec',
)
STOREFRONT_REQUEST_TIMEOUT = float(os.environ.get('STOREFRONT_REQUEST_TIMEOUT', 15))
STOREFRONT_CATALOG_CACHE_TTL = int(os.environ.get('STOREFRONT_CATALOG_CACHE_TTL', 300))

# Cart and pricing
STOREFRONT_MAX_QUANTITY = int(os.environ.get('STOREFRONT_MAX_QUANTITY', 10))
STOREFRONT_FREE_DELIVERY_THRESHOLD = int(os.environ.get('STOREFRONT_FREE_DELIVERY_THRESHOLD', 2000))
STOREFRONT_DELIVERY_FEES = env_json('STOREFRONT_DELIVERY_FEES', {
    'inside_dhaka': 80,
    'outside_dhaka': 150,
    'outside_divisional': 200,
})
STOREFRONT_COUPONS = env_json('STOREFRONT_COUPONS', {
    'TINY10': '0.10',
    'TINYSTEP5': '0.05',
    'WELCOME15': '0.15',
})

# Feature flags
STOREFRONT_USE_SAMPLE_PRODUCTS = env_bool('STOREFRONT_USE_SAMPLE_PRODUCTS', True)
STOREFRONT_ALLOW_UNCONFIRMED_ORDERS = env_bool('STOREFRONT_ALLOW_UNCONFIRMED_ORDERS', False)
STOREFRONT_REQUIRE_VARIANTS = env_bool('STOREFRONT_REQUIRE_VARIANTS', False)

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': os.environ.get('STOREFRONT_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
        'shared': {
            'handlers': ['console'],
            'level': os.environ.get('STOREFRONT_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}
