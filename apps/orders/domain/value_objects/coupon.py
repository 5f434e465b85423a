"""
Coupon value object.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum

from shared.domain import ValueObject


class CouponStatus(str, Enum):
    NOT_APPLIED = "not_applied"
    APPLIED = "applied"
    INVALID = "invalid"


def normalize_code(code: str) -> str:
    return (code or "").strip().upper()


@dataclass(frozen=True)
class Coupon(ValueObject):
    """A code that takes a fixed fraction off the subtotal."""
    code: str
    rate: Decimal

    def __post_init__(self):
        rate = self.rate if isinstance(self.rate, Decimal) else Decimal(str(self.rate))
        if not Decimal('0') <= rate <= Decimal('1'):
            raise ValueError(f"Coupon rate must be between 0 and 1, got {rate}")
        object.__setattr__(self, 'rate', rate)
        object.__setattr__(self, 'code', normalize_code(self.code))

    def discount_for(self, subtotal: int) -> int:
        """Discount in whole taka, rounded half up."""
        amount = (Decimal(subtotal) * self.rate).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
        return int(amount)

    @property
    def percent(self) -> int:
        return int((self.rate * 100).to_integral_value(rounding=ROUND_HALF_UP))
