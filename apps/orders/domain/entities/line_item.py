"""
Line item entity.
"""
from dataclasses import dataclass


@dataclass
class LineItem:
    """
    One product's presence in the cart.

    A line item is identified by its product id. Name, price and image are
    copied from the catalog when the item is added and are not refreshed
    when the catalog changes later.
    """
    product_id: str
    name: str
    unit_price: int
    quantity: int = 1
    image_url: str = ""
    color: str = ""
    size: str = ""

    @property
    def subtotal(self) -> int:
        """Calculate the item subtotal."""
        return self.unit_price * self.quantity

    @property
    def has_variant(self) -> bool:
        """True when both colour and size were chosen."""
        return bool(self.color and self.size)
