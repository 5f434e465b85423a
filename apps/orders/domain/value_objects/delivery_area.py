"""
Delivery area value object.
"""
from enum import Enum
from typing import Any, Optional

DHAKA_KEYWORDS = (
    'ঢাকা', 'মিরপুর', 'উত্তরা', 'গুলশান', 'বনানী', 'ধানমন্ডি', 'মোহাম্মদপুর',
    'dhaka', 'mirpur', 'uttara', 'gulshan', 'banani', 'dhanmondi', 'mohammadpur',
)


class DeliveryArea(str, Enum):
    """Delivery tier. Each tier has a fixed fee in the pricing policy."""
    INSIDE_DHAKA = "inside_dhaka"
    OUTSIDE_DHAKA = "outside_dhaka"
    OUTSIDE_DIVISIONAL = "outside_divisional"

    @classmethod
    def parse(cls, value: Any) -> Optional['DeliveryArea']:
        """Return the matching area, or None for anything unrecognized."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None

    @classmethod
    def guess_from_address(cls, address: str) -> Optional['DeliveryArea']:
        """Inside Dhaka when the address names a Dhaka neighbourhood."""
        text = (address or "").lower()
        if any(keyword in text for keyword in DHAKA_KEYWORDS):
            return cls.INSIDE_DHAKA
        return None
