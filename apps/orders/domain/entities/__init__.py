# Entities
from .cart import Cart, DEFAULT_MAX_QUANTITY
from .line_item import LineItem
from .order import Order

__all__ = ['Cart', 'DEFAULT_MAX_QUANTITY', 'LineItem', 'Order']
