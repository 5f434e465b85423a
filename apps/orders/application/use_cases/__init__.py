# Use cases
from .place_order import PlaceOrderUseCase

__all__ = ['PlaceOrderUseCase']
