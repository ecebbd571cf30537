import math

from rest_framework import serializers

from .models import Product


class ProductSerializer(serializers.ModelSerializer):
    """
    Serializer for product create, update and read operations.

    Wire shape: {id, name, weight, price, createdAt, updatedAt}.
    All three writable fields are required on every write.
    """
    name = serializers.CharField(
        max_length=200,
        error_messages={
            'required': 'Name is required',
            'null': 'Name is required',
            'blank': 'Name is required',
        }
    )
    weight = serializers.FloatField(
        error_messages={
            'required': 'Weight is required',
            'null': 'Weight is required',
        }
    )
    price = serializers.FloatField(
        error_messages={
            'required': 'Price is required',
            'null': 'Price is required',
        }
    )
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Product
        fields = ['id', 'name', 'weight', 'price', 'createdAt', 'updatedAt']
        read_only_fields = ['id']

    def validate_name(self, value):
        """Validate product name is not empty once trimmed"""
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Name is required")
        return value

    def validate_weight(self, value):
        """Validate weight is not negative"""
        if not math.isfinite(value):
            raise serializers.ValidationError("A valid number is required.")
        if value < 0:
            raise serializers.ValidationError("Weight cannot be negative")
        return value

    def validate_price(self, value):
        """Validate price is not negative"""
        if not math.isfinite(value):
            raise serializers.ValidationError("A valid number is required.")
        if value < 0:
            raise serializers.ValidationError("Price cannot be negative")
        return value
