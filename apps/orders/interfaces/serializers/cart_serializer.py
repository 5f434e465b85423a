"""
Cart serializers.
"""
from rest_framework import serializers

from ...domain.entities.cart import DEFAULT_MAX_QUANTITY
from ...domain.entities.line_item import LineItem


class LineItemSerializer(serializers.Serializer):
    """
    Stored cart record.

    Keeps the browser-era layout ``{id, name, price, image, quantity, color,
    size, maxQuantity}`` so carts saved by older clients still load.
    """
    id = serializers.CharField(source='product_id')
    name = serializers.CharField(allow_blank=True)
    price = serializers.IntegerField(source='unit_price', min_value=0)
    quantity = serializers.IntegerField()
    image = serializers.CharField(source='image_url', required=False, allow_blank=True, default="")
    color = serializers.CharField(required=False, allow_blank=True, default="")
    size = serializers.CharField(required=False, allow_blank=True, default="")

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data['maxQuantity'] = self.context.get('max_quantity', DEFAULT_MAX_QUANTITY)
        return data

    def create(self, validated_data) -> LineItem:
        return LineItem(**validated_data)

