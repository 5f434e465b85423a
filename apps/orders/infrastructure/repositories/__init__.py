from .stored_cart_repository import StoredCartRepository
from .stored_order_repository import StoredOrderRepository

__all__ = ['StoredCartRepository', 'StoredOrderRepository']
