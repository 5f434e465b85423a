"""
Order gateway interface.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..value_objects.order_number import OrderNumber
from ..value_objects.order_request import OrderRequest


@dataclass(frozen=True)
class SubmissionReceipt:
    """What the order endpoint told us about an accepted order."""
    order_number: OrderNumber
    total_amount: int
    confirmed: bool = True


class OrderGateway(ABC):
    """Abstract channel that delivers an order request to the shop."""

    @abstractmethod
    def submit(self, request: OrderRequest) -> SubmissionReceipt:
        """
        Submit an order request.

        Raises an ``OrderSubmissionError`` subclass when no order was created.
        """
        pass
