"""
Cart updated domain event.
"""
from dataclasses import dataclass
from typing import Optional

from shared.domain import DomainEvent


@dataclass(frozen=True)
class CartUpdated(DomainEvent):
    """Event raised after every cart mutation."""
    cart_id: str
    action: str
    product_id: Optional[str]
    quantity: int
