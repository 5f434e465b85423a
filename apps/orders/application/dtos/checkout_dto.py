"""
Checkout DTOs.
"""
from dataclasses import dataclass


@dataclass
class CheckoutFormDTO:
    """Raw checkout form input, as typed by the shopper."""
    customer_name: str = ""
    phone: str = ""
    address: str = ""
    delivery_area: str = ""
    email: str = ""
    payment_method: str = "cash"
    special_notes: str = ""


@dataclass
class OrderConfirmationDTO:
    """Shown to the shopper after an order was placed."""
    order_number: str
    total_amount: int
    item_count: int
    customer_name: str
    confirmed: bool = True
