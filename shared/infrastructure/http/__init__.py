# HTTP module
from .api_client import (
    StorefrontApiClient,
    ApiError,
    ApiTimeoutError,
    ApiConnectionError,
    ApiResponseError,
    OpaqueResponseError,
)

__all__ = [
    'StorefrontApiClient',
    'ApiError',
    'ApiTimeoutError',
    'ApiConnectionError',
    'ApiResponseError',
    'OpaqueResponseError',
]
