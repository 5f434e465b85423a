# Serializers
from .product_serializer import ProductSerializer

__all__ = ['ProductSerializer']
