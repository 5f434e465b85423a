"""
Cart DTOs.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from ...domain.entities.cart import Cart
from ...domain.entities.line_item import LineItem
from ...domain.value_objects.delivery_area import DeliveryArea
from ...domain.value_objects.price_summary import PriceSummary


@dataclass
class CartItemDTO:
    """DTO for a cart line."""
    product_id: str
    name: str
    unit_price: int
    quantity: int
    subtotal: int
    image_url: str = ""
    color: str = ""
    size: str = ""

    @classmethod
    def from_entity(cls, item: LineItem) -> 'CartItemDTO':
        return cls(
            product_id=item.product_id,
            name=item.name,
            unit_price=item.unit_price,
            quantity=item.quantity,
            subtotal=item.subtotal,
            image_url=item.image_url,
            color=item.color,
            size=item.size,
        )


@dataclass
class CartDTO:
    """State published to cart subscribers after every change."""
    summary: PriceSummary
    items: List[CartItemDTO] = field(default_factory=list)
    max_quantity: int = 10
    coupon_code: str = ""
    delivery_area: Optional[DeliveryArea] = None

    @classmethod
    def from_entity(
        cls,
        cart: Cart,
        summary: PriceSummary,
        coupon_code: str = "",
        delivery_area: Optional[DeliveryArea] = None,
    ) -> 'CartDTO':
        return cls(
            summary=summary,
            items=[CartItemDTO.from_entity(item) for item in cart.items],
            max_quantity=cart.max_quantity,
            coupon_code=coupon_code,
            delivery_area=delivery_area,
        )

    @property
    def item_count(self) -> int:
        return self.summary.item_count

    @property
    def is_empty(self) -> bool:
        return not self.items
