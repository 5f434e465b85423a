"""
Pricing calculator.

Pure functions over a cart snapshot. They never mutate their inputs and
return the same result for the same arguments, so callers may recompute as
often as they render.
"""
from typing import Any, Iterable, Optional

from .value_objects.coupon import CouponStatus, normalize_code
from .value_objects.delivery_area import DeliveryArea
from .value_objects.price_summary import Discount, PriceSummary
from .value_objects.pricing_policy import PricingPolicy, DEFAULT_POLICY


def subtotal(items: Iterable[Any]) -> int:
    """Sum of ``unit_price * quantity`` over all line items."""
    return sum(item.unit_price * item.quantity for item in items)


def delivery_fee(area: Any, subtotal_amount: int, policy: PricingPolicy = DEFAULT_POLICY) -> int:
    """Area fee, or 0 once the subtotal reaches the free-delivery threshold."""
    if subtotal_amount >= policy.free_delivery_threshold:
        return 0
    return policy.fee_for(area)


def discount(subtotal_amount: int, coupon_code: Optional[str], policy: PricingPolicy = DEFAULT_POLICY) -> Discount:
    """
    Look up ``coupon_code`` and compute its discount.

    An empty code yields ``NOT_APPLIED``; an unknown one yields ``INVALID``
    with a zero amount.
    """
    code = normalize_code(coupon_code)
    if not code:
        return Discount()
    coupon = policy.coupon(code)
    if coupon is None:
        return Discount(amount=0, status=CouponStatus.INVALID, code=code)
    return Discount(amount=coupon.discount_for(subtotal_amount), status=CouponStatus.APPLIED, code=code)


def total(subtotal_amount: int, delivery_fee_amount: int, discount_amount: int) -> int:
    """Grand total, never negative."""
    return max(subtotal_amount + delivery_fee_amount - discount_amount, 0)


def summarize(
    items: Iterable[Any],
    area: Any = None,
    coupon_code: Optional[str] = None,
    policy: PricingPolicy = DEFAULT_POLICY,
) -> PriceSummary:
    """Compute every order-summary figure from one snapshot of line items."""
    items = list(items)
    sub = subtotal(items)
    fee = delivery_fee(area, sub, policy)
    applied = discount(sub, coupon_code, policy)
    return PriceSummary(
        subtotal=sub,
        delivery_fee=fee,
        discount=applied.amount,
        total=total(sub, fee, applied.amount),
        item_count=sum(item.quantity for item in items),
        delivery_area=DeliveryArea.parse(area),
        coupon_code=applied.code,
        coupon_status=applied.status,
        free_delivery_threshold=policy.free_delivery_threshold,
    )
