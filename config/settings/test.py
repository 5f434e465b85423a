"""
Test settings.
"""
from .base import *  # noqa: F401,F403

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    },
    'storefront': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'storefront-tests',
        'TIMEOUT': None,
    },
}

STOREFRONT_API_URL = 'https://storefront.test/exec'
STOREFRONT_REQUEST_TIMEOUT = 2
STOREFRONT_USE_SAMPLE_PRODUCTS = True
STOREFRONT_ALLOW_UNCONFIRMED_ORDERS = False
STOREFRONT_REQUIRE_VARIANTS = False

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
}
