"""
Order entity (Aggregate Root).
"""
from dataclasses import dataclass

from shared.domain import AggregateRoot
from ..value_objects.order_number import OrderNumber
from ..value_objects.order_request import OrderRequest
from ..events.order_placed import OrderPlaced


@dataclass(eq=False)
class Order(AggregateRoot):
    """
    Local record of a placed order.

    ``confirmed`` is False when the endpoint accepted the request but its
    answer could not be read, in which case ``order_number`` is a local one.
    """
    order_number: OrderNumber
    total_amount: int
    item_count: int
    customer_name: str = ""
    phone: str = ""
    delivery_area: str = ""
    confirmed: bool = True

    @classmethod
    def place(
        cls,
        request: OrderRequest,
        order_number: OrderNumber,
        total_amount: int = None,
        confirmed: bool = True,
    ) -> 'Order':
        """Factory method to record an order the endpoint accepted."""
        order = cls(
            order_number=order_number,
            total_amount=request.total_amount if total_amount is None else total_amount,
            item_count=request.item_count,
            customer_name=request.shipping.customer_name,
            phone=request.shipping.phone.value,
            delivery_area=request.shipping.delivery_area.value,
            confirmed=confirmed,
        )
        order.add_domain_event(
            OrderPlaced(
                order_id=order.id,
                order_number=order.order_number.value,
                total_amount=order.total_amount,
                confirmed=confirmed,
            )
        )
        return order
