"""
Order serializers.
"""
from rest_framework import serializers

from ...domain.entities.order import Order
from ...domain.value_objects.order_number import OrderNumber


class OrderLineSerializer(serializers.Serializer):
    """Serializer for one product line of the order payload."""
    product_id = serializers.CharField(read_only=True)
    product_name = serializers.CharField(read_only=True)
    price = serializers.IntegerField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    color = serializers.CharField(read_only=True)
    size = serializers.CharField(read_only=True)
    image = serializers.CharField(read_only=True)


class OrderRequestSerializer(serializers.Serializer):
    """Serializer for the body POSTed to the order endpoint."""
    customer_name = serializers.CharField(source='shipping.customer_name', read_only=True)
    phone = serializers.CharField(source='shipping.phone.value', read_only=True)
    email = serializers.CharField(source='shipping.email', read_only=True)
    address = serializers.CharField(source='shipping.address', read_only=True)
    delivery_area = serializers.CharField(source='shipping.delivery_area.value', read_only=True)
    payment_method = serializers.CharField(source='shipping.payment_method', read_only=True)
    special_notes = serializers.CharField(source='shipping.special_notes', read_only=True)
    products = OrderLineSerializer(source='lines', many=True, read_only=True)
    subtotal = serializers.IntegerField(read_only=True)
    delivery_fee = serializers.IntegerField(read_only=True)
    discount = serializers.IntegerField(read_only=True)
    coupon_code = serializers.CharField(read_only=True)
    total_amount = serializers.IntegerField(read_only=True)
    order_date = serializers.DateTimeField(source='created_at', read_only=True)


class OrderRecordSerializer(serializers.Serializer):
    """Round-trips placed-order records through the order history key."""
    id = serializers.CharField()
    order_number = serializers.CharField(source='order_number.value')
    total_amount = serializers.IntegerField(min_value=0)
    item_count = serializers.IntegerField(min_value=0)
    customer_name = serializers.CharField(required=False, allow_blank=True, default="")
    phone = serializers.CharField(required=False, allow_blank=True, default="")
    delivery_area = serializers.CharField(required=False, allow_blank=True, default="")
    confirmed = serializers.BooleanField()
    created_at = serializers.DateTimeField()

    def create(self, validated_data) -> Order:
        number = validated_data.pop('order_number')
        return Order(order_number=OrderNumber(value=number['value']), **validated_data)
