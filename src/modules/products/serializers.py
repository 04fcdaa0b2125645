"""Product DRF serializers for API input/output."""

from __future__ import annotations

from rest_framework import serializers

from modules.core.constants import ValidationMessage
from modules.products.models import Product

# Upper bound of the positive integer columns holding quantities and stock.
MAX_QUANTITY = 2_147_483_647

QUANTITY_ERRORS = {
    "required": ValidationMessage.QUANTITY_REQUIRED.value,
    "null": ValidationMessage.QUANTITY_REQUIRED.value,
    "invalid": ValidationMessage.QUANTITY_INVALID.value,
    "max_string_length": ValidationMessage.QUANTITY_INVALID.value,
    "min_value": ValidationMessage.QUANTITY_MIN.value,
    "max_value": ValidationMessage.QUANTITY_MAX.value,
}


class ProductSerializer(serializers.ModelSerializer):
    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "stock",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class StockUpdateSerializer(serializers.Serializer):
    """``quantity`` is the number of units to add, never a new absolute value."""

    quantity = serializers.IntegerField(
        min_value=1, max_value=MAX_QUANTITY, error_messages=QUANTITY_ERRORS
    )
