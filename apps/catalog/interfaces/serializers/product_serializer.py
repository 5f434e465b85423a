"""
Product serializers.
"""
from rest_framework import serializers

from ...domain.entities.product import Product, PLACEHOLDER_IMAGE
from ...domain.value_objects.money import Money


class ProductSerializer(serializers.Serializer):
    """Round-trips products through the local product cache."""
    id = serializers.CharField()
    name = serializers.CharField()
    description = serializers.CharField(required=False, allow_blank=True, default="")
    category = serializers.CharField(required=False, allow_blank=True, default="")
    price = serializers.IntegerField(min_value=0, source='price.amount')
    image_url = serializers.CharField(required=False, allow_blank=True, default=PLACEHOLDER_IMAGE)
    images = serializers.ListField(child=serializers.CharField(), required=False, default=list)
    sizes = serializers.ListField(child=serializers.CharField(), required=False, default=list)
    colors = serializers.ListField(child=serializers.CharField(), required=False, default=list)
    age_range = serializers.CharField(required=False, allow_blank=True, default="")
    in_stock = serializers.BooleanField(required=False, default=True)

    def create(self, validated_data) -> Product:
        price = validated_data.pop('price')
        return Product(price=Money(amount=price['amount']), **validated_data)
