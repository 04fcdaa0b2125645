"""Order DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views).
Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.accounts.serializers import UserSummarySerializer
from modules.core.constants import ValidationMessage
from modules.orders.models import Order
from modules.products.models import Product
from modules.products.repository import ProductRepository
from modules.products.serializers import MAX_QUANTITY, QUANTITY_ERRORS

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class OrderRequestSerializer(serializers.Serializer):
    """Validates both the create and the update payload."""

    product_id = serializers.IntegerField(
        error_messages={
            "required": ValidationMessage.PRODUCT_ID_REQUIRED.value,
            "null": ValidationMessage.PRODUCT_ID_REQUIRED.value,
            "invalid": ValidationMessage.PRODUCT_ID_INVALID.value,
            "max_string_length": ValidationMessage.PRODUCT_ID_INVALID.value,
        },
    )
    quantity = serializers.IntegerField(
        min_value=1, max_value=MAX_QUANTITY, error_messages=QUANTITY_ERRORS
    )

    def validate_product_id(self, value: int) -> int:
        if not ProductRepository().exists(value):
            raise serializers.ValidationError(
                ValidationMessage.PRODUCT_ID_NOT_FOUND.value
            )
        return value


class OrderListQuerySerializer(serializers.Serializer):
    """Query-string options of the admin order endpoints."""

    with_trashed = serializers.BooleanField(required=False, default=False)


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class OrderProductSerializer(serializers.ModelSerializer):
    class Meta:
        model = Product
        fields = ["id", "name", "price"]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Read serializer for orders with owner and product summaries."""

    user = UserSummarySerializer(read_only=True)
    product = OrderProductSerializer(read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "user",
            "product",
            "quantity",
            "total_price",
            "status",
            "created_at",
            "updated_at",
            "deleted_at",
        ]
        read_only_fields = fields


class OrderUpdateResultSerializer(serializers.Serializer):
    """Body of a successful quantity change."""

    order_id = serializers.IntegerField(source="pk")
    quantity = serializers.IntegerField()
    total_price = serializers.DecimalField(max_digits=10, decimal_places=2)
