# Domain events
from .cart_updated import CartUpdated
from .order_placed import OrderPlaced

__all__ = ['CartUpdated', 'OrderPlaced']
