# Services
from .cart_manager import CartManager

__all__ = ['CartManager']
