"""
Catalog domain exceptions.
"""
from shared.domain.exceptions import DomainException, ValidationError


class InvalidProductError(ValidationError):
    """Raised when product data is invalid."""

    def __init__(self, message: str):
        super().__init__(message=message, field="product")


class ProductNotFoundError(DomainException):
    """Raised when a product id is not in the loaded catalog."""

    def __init__(self, identifier: str):
        super().__init__(
            message=f"Product '{identifier}' not found",
            code="PRODUCT_NOT_FOUND"
        )
        self.identifier = identifier


class CatalogUnavailableError(DomainException):
    """Raised when no product source could be loaded."""

    def __init__(self, reason: str = ""):
        message = "Products could not be loaded"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message=message, code="CATALOG_UNAVAILABLE")
        self.reason = reason


__all__ = [
    'InvalidProductError',
    'ProductNotFoundError',
    'CatalogUnavailableError',
]
