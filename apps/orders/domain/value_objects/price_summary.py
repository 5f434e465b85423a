"""
Price summary value objects.
"""
from dataclasses import dataclass
from typing import Optional

from .coupon import CouponStatus
from .delivery_area import DeliveryArea


@dataclass(frozen=True)
class Discount:
    """Result of looking up a coupon against a subtotal."""
    amount: int = 0
    status: CouponStatus = CouponStatus.NOT_APPLIED
    code: str = ""

    @property
    def is_invalid(self) -> bool:
        return self.status == CouponStatus.INVALID


@dataclass(frozen=True)
class PriceSummary:
    """Every figure shown in the order summary, computed from one cart snapshot."""
    subtotal: int
    delivery_fee: int
    discount: int
    total: int
    item_count: int = 0
    delivery_area: Optional[DeliveryArea] = None
    coupon_code: str = ""
    coupon_status: CouponStatus = CouponStatus.NOT_APPLIED
    free_delivery_threshold: int = 0

    @property
    def has_free_delivery(self) -> bool:
        return self.delivery_fee == 0 and self.subtotal >= self.free_delivery_threshold

    @property
    def amount_to_free_delivery(self) -> int:
        return max(self.free_delivery_threshold - self.subtotal, 0)
