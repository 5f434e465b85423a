# DTOs
from .cart_dto import CartDTO, CartItemDTO
from .checkout_dto import CheckoutFormDTO, OrderConfirmationDTO

__all__ = ['CartDTO', 'CartItemDTO', 'CheckoutFormDTO', 'OrderConfirmationDTO']
