"""
Order request value objects.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Iterable, Tuple

from django.utils import timezone

from shared.domain import ValueObject
from .price_summary import PriceSummary
from .shipping_info import ShippingInfo

if TYPE_CHECKING:
    from ..entities.line_item import LineItem


@dataclass(frozen=True)
class OrderLine(ValueObject):
    """One product line as sent to the order endpoint."""
    product_id: str
    product_name: str
    price: int
    quantity: int
    color: str = ""
    size: str = ""
    image: str = ""

    @property
    def subtotal(self) -> int:
        return self.price * self.quantity


@dataclass(frozen=True)
class OrderRequest(ValueObject):
    """
    Immutable snapshot of an order at submit time.

    Editing the form or the cart afterwards never changes an existing
    request; a new one is built for the next submission.
    """
    shipping: ShippingInfo
    lines: Tuple[OrderLine, ...]
    subtotal: int
    delivery_fee: int
    discount: int
    total_amount: int
    coupon_code: str = ""
    created_at: datetime = field(default_factory=timezone.now)

    @classmethod
    def create(
        cls,
        shipping: ShippingInfo,
        items: Iterable['LineItem'],
        summary: PriceSummary,
    ) -> 'OrderRequest':
        """Factory method to snapshot cart items and their price summary."""
        lines = tuple(
            OrderLine(
                product_id=item.product_id,
                product_name=item.name,
                price=item.unit_price,
                quantity=item.quantity,
                color=item.color,
                size=item.size,
                image=item.image_url,
            )
            for item in items
        )
        return cls(
            shipping=shipping,
            lines=lines,
            subtotal=summary.subtotal,
            delivery_fee=summary.delivery_fee,
            discount=summary.discount,
            total_amount=summary.total,
            coupon_code=summary.coupon_code,
        )

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)
