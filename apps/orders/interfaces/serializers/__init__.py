# Serializers
from .cart_serializer import LineItemSerializer
from .checkout_serializer import CheckoutFormSerializer
from .order_serializer import OrderLineSerializer, OrderRequestSerializer, OrderRecordSerializer

__all__ = [
    'LineItemSerializer',
    'CheckoutFormSerializer',
    'OrderLineSerializer',
    'OrderRequestSerializer',
    'OrderRecordSerializer',
]
