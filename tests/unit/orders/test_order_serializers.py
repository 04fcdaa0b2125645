from __future__ import annotations

import pytest

from modules.core.constants import ValidationMessage
from modules.orders.serializers import OrderRequestSerializer

pytestmark = pytest.mark.unit


def _errors(payload):
    serializer = OrderRequestSerializer(data=payload)
    assert not serializer.is_valid()
    return {field: [str(e) for e in errs] for field, errs in serializer.errors.items()}


class TestOrderRequestSerializer:
    def test_valid_payload(self, product):
        serializer = OrderRequestSerializer(data={"product_id": product.pk, "quantity": 2})
        assert serializer.is_valid(), serializer.errors
        assert serializer.validated_data == {"product_id": product.pk, "quantity": 2}

    def test_missing_fields(self):
        errors = _errors({})
        assert errors["product_id"] == [ValidationMessage.PRODUCT_ID_REQUIRED.value]
        assert errors["quantity"] == [ValidationMessage.QUANTITY_REQUIRED.value]

    def test_non_integer_values(self):
        errors = _errors({"product_id": "abc", "quantity": "many"})
        assert errors["product_id"] == [ValidationMessage.PRODUCT_ID_INVALID.value]
        assert errors["quantity"] == [ValidationMessage.QUANTITY_INVALID.value]

    def test_unknown_product(self):
        errors = _errors({"product_id": 999, "quantity": 1})
        assert errors["product_id"] == [ValidationMessage.PRODUCT_ID_NOT_FOUND.value]

    def test_quantity_below_one(self, product):
        errors = _errors({"product_id": product.pk, "quantity": 0})
        assert errors["quantity"] == [ValidationMessage.QUANTITY_MIN.value]

    def test_quantity_above_column_range(self, product):
        errors = _errors({"product_id": product.pk, "quantity": 2_147_483_648})
        assert errors["quantity"] == [ValidationMessage.QUANTITY_MAX.value]
