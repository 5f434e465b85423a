"""
Catalog source value object.
"""
from enum import Enum


class CatalogSource(str, Enum):
    """Where the currently loaded products came from."""
    EMPTY = "empty"
    API = "api"
    CACHE = "cache"
    SAMPLE = "sample"
