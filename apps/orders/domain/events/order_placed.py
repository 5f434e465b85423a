"""
Order placed domain event.
"""
from dataclasses import dataclass

from shared.domain import DomainEvent


@dataclass(frozen=True)
class OrderPlaced(DomainEvent):
    """Event raised when a new order is placed."""
    order_id: str
    order_number: str
    total_amount: int
    confirmed: bool
