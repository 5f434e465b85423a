"""
Order domain exceptions.
"""
from typing import Dict, List

from shared.domain.exceptions import (
    DomainException,
    ValidationError,
    BusinessRuleViolationError,
    InvalidOperationError,
)


class EmptyCartError(DomainException):
    """Raised when trying to checkout an empty cart."""

    def __init__(self):
        super().__init__(
            message="Your cart is empty. Add products before checking out.",
            code="EMPTY_CART"
        )


class InvalidQuantityError(ValidationError):
    """Raised when a quantity below one is requested."""

    def __init__(self, quantity: int):
        super().__init__(message=f"Quantity must be at least 1, got {quantity}", field="quantity")
        self.quantity = quantity


class QuantityLimitError(BusinessRuleViolationError):
    """Raised when a step increase would pass the per-item maximum."""

    def __init__(self, product_id: str, max_quantity: int):
        super().__init__(
            message=f"You can order at most {max_quantity} of this product.",
            rule="max_quantity",
        )
        self.product_id = product_id
        self.max_quantity = max_quantity


class InvalidPhoneNumberError(ValidationError):
    """Raised when a phone number is not a Bangladeshi mobile number."""

    def __init__(self, phone: str):
        super().__init__(message=f"Invalid phone number: '{phone}'", field="phone")
        self.phone = phone


class InvalidCouponError(DomainException):
    """Raised when an unknown coupon code is applied."""

    def __init__(self, code: str):
        super().__init__(
            message=f"Coupon code '{code}' is not valid.",
            code="INVALID_COUPON"
        )
        self.coupon_code = code


class CheckoutValidationError(ValidationError):
    """Raised with every failing checkout form field at once."""

    def __init__(self, errors: Dict[str, List[str]]):
        fields = ", ".join(errors)
        super().__init__(
            message=f"Please correct the following fields: {fields}",
            field=next(iter(errors), None),
            errors=errors,
        )


class CheckoutInProgressError(InvalidOperationError):
    """Raised when an order is submitted while another is in flight."""

    def __init__(self, current_state: str):
        super().__init__(
            message="An order is already being submitted. Please wait.",
            operation="submit",
            state=current_state,
        )


class OrderSubmissionError(DomainException):
    """Base error for order submissions that did not create an order."""


class OrderRejectedError(OrderSubmissionError):
    """The order endpoint answered with an explicit error."""

    def __init__(self, reason: str = ""):
        super().__init__(
            message=reason or "The shop could not accept the order. Please try again.",
            code="ORDER_REJECTED"
        )
        self.reason = reason


class OrderNetworkError(OrderSubmissionError):
    """The order could not be delivered to the endpoint."""

    def __init__(self, reason: str = ""):
        super().__init__(
            message="Network problem. Please check your connection and try again.",
            code="NETWORK_ERROR"
        )
        self.reason = reason


class OrderTimeoutError(OrderSubmissionError):
    """The order endpoint did not answer in time."""

    def __init__(self, timeout: float):
        super().__init__(
            message=f"The shop did not respond within {timeout:g} seconds. Please try again.",
            code="TIMEOUT"
        )
        self.timeout = timeout
