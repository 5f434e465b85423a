# Repositories
from .cart_repository import CartRepository
from .order_gateway import OrderGateway, SubmissionReceipt
from .order_repository import OrderRepository

__all__ = ['CartRepository', 'OrderGateway', 'SubmissionReceipt', 'OrderRepository']
