"""
Pricing policy value object.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .coupon import Coupon, normalize_code
from .delivery_area import DeliveryArea

DEFAULT_DELIVERY_FEES = {
    DeliveryArea.INSIDE_DHAKA: 80,
    DeliveryArea.OUTSIDE_DHAKA: 150,
    DeliveryArea.OUTSIDE_DIVISIONAL: 200,
}
DEFAULT_COUPON_RATES = {
    'TINY10': '0.10',
    'TINYSTEP5': '0.05',
    'WELCOME15': '0.15',
}
FREE_DELIVERY_THRESHOLD = 2000
FALLBACK_AREA = DeliveryArea.OUTSIDE_DHAKA


@dataclass(frozen=True)
class PricingPolicy:
    """Delivery fees, free-delivery threshold and the coupon table."""
    delivery_fees: Dict[DeliveryArea, int] = field(default_factory=lambda: dict(DEFAULT_DELIVERY_FEES))
    free_delivery_threshold: int = FREE_DELIVERY_THRESHOLD
    coupons: Dict[str, Coupon] = field(default_factory=dict)

    @classmethod
    def from_mappings(
        cls,
        delivery_fees: Optional[Mapping[str, int]] = None,
        coupon_rates: Optional[Mapping[str, Any]] = None,
        free_delivery_threshold: int = FREE_DELIVERY_THRESHOLD,
    ) -> 'PricingPolicy':
        """Build a policy from plain settings dicts keyed by strings."""
        fees = dict(DEFAULT_DELIVERY_FEES)
        for key, fee in (delivery_fees or {}).items():
            area = DeliveryArea.parse(key)
            if area is None:
                raise ValueError(f"Unknown delivery area in settings: {key!r}")
            fees[area] = int(fee)

        rates = DEFAULT_COUPON_RATES if coupon_rates is None else coupon_rates
        coupons = {normalize_code(code): Coupon(code=code, rate=rate) for code, rate in rates.items()}
        return cls(
            delivery_fees=fees,
            free_delivery_threshold=int(free_delivery_threshold),
            coupons=coupons,
        )

    def fee_for(self, area: Any) -> int:
        """Fee for ``area``. Unrecognized areas pay the outside-Dhaka fee."""
        parsed = DeliveryArea.parse(area)
        if parsed is None or parsed not in self.delivery_fees:
            parsed = FALLBACK_AREA
        return self.delivery_fees.get(parsed, DEFAULT_DELIVERY_FEES[FALLBACK_AREA])

    def coupon(self, code: str) -> Optional[Coupon]:
        return self.coupons.get(normalize_code(code))


DEFAULT_POLICY = PricingPolicy.from_mappings()
