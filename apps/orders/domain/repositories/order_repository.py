"""
Order repository interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.order import Order


class OrderRepository(ABC):
    """Abstract repository for placed-order records."""

    @abstractmethod
    def add(self, order: Order) -> bool:
        """Append an order record."""
        pass

    @abstractmethod
    def find_all(self) -> List[Order]:
        """All recorded orders, newest last."""
        pass

    @abstractmethod
    def find_by_number(self, order_number: str) -> Optional[Order]:
        """Find an order record by its order number."""
        pass
