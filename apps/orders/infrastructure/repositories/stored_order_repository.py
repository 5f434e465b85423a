"""
Order history backed by the persistent store.
"""
import logging
from typing import List, Optional

from shared.infrastructure.storage import LocalStore
from ...domain.entities.order import Order
from ...domain.repositories.order_repository import OrderRepository
from ...interfaces.serializers import OrderRecordSerializer

logger = logging.getLogger(__name__)


class StoredOrderRepository(OrderRepository):
    """Placed orders as a JSON list, oldest first, capped at ``limit`` entries."""

    def __init__(self, store: LocalStore, key: str = 'tinystepsbd_orders', limit: int = 50):
        self.store = store
        self.key = key
        self.limit = limit

    def _records(self) -> list:
        records = self.store.get(self.key, [])
        return records if isinstance(records, list) else []

    def add(self, order: Order) -> bool:
        records = self._records()
        records.append(OrderRecordSerializer(order).data)
        return self.store.set(self.key, records[-self.limit:])

    def find_all(self) -> List[Order]:
        orders = []
        for record in self._records():
            serializer = OrderRecordSerializer(data=record)
            if serializer.is_valid():
                orders.append(serializer.save())
            else:
                logger.warning(f"Dropping stored order record: {serializer.errors}")
        return orders

    def find_by_number(self, order_number: str) -> Optional[Order]:
        for order in self.find_all():
            if order.order_number.value == order_number:
                return order
        return None
