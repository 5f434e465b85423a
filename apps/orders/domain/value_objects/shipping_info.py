"""
Shipping info value object.
"""
from dataclasses import dataclass

from shared.domain import ValueObject
from .delivery_area import DeliveryArea
from .phone_number import PhoneNumber


@dataclass(frozen=True)
class ShippingInfo(ValueObject):
    """Validated contact and delivery details from the checkout form."""
    customer_name: str
    phone: PhoneNumber
    address: str
    delivery_area: DeliveryArea
    email: str = ""
    payment_method: str = "cash"
    special_notes: str = ""
