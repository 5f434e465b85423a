"""
Checkout form serializers.
"""
from rest_framework import serializers

from ...domain.value_objects.delivery_area import DeliveryArea
from ...domain.value_objects.phone_number import PhoneNumber


class CheckoutFormSerializer(serializers.Serializer):
    """
    Validates the shipping and contact form.

    Field validators run for every field, so ``errors`` lists all failing
    fields together.
    """
    customer_name = serializers.CharField(
        min_length=2,
        max_length=100,
        error_messages={'min_length': 'Name must be at least 2 characters.'},
    )
    phone = serializers.CharField(max_length=20)
    email = serializers.EmailField(required=False, allow_blank=True, default="")
    address = serializers.CharField(
        min_length=10,
        max_length=500,
        error_messages={'min_length': 'Please enter a detailed address (at least 10 characters).'},
    )
    delivery_area = serializers.ChoiceField(
        choices=[(area.value, area.value) for area in DeliveryArea],
        error_messages={'invalid_choice': 'Please select a delivery area.'},
    )
    payment_method = serializers.CharField(required=False, allow_blank=True, default="cash", max_length=30)
    special_notes = serializers.CharField(required=False, allow_blank=True, default="", max_length=500)

    def validate_phone(self, value: str) -> str:
        if not PhoneNumber.is_valid(value):
            raise serializers.ValidationError("Enter a valid mobile number (01XXXXXXXXX).")
        return value

    def validate_payment_method(self, value: str) -> str:
        return value or "cash"
