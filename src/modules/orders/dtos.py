"""Order DTOs for the Service Layer.

Immutable Pydantic v2 contracts between the API layer (DRF serializers) and
the services.

- ``PlaceOrderDTO``: input for order creation.
- ``UpdateOrderDTO``: input for a quantity change.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


def _at_least_one(v: int) -> int:
    if v < 1:
        raise ValueError("Quantity must be at least 1.")
    return v


class PlaceOrderDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: int
    quantity: int

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        return _at_least_one(v)


class UpdateOrderDTO(BaseModel):
    """The order keeps its product; only the quantity changes."""

    model_config = ConfigDict(frozen=True)

    quantity: int

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        return _at_least_one(v)
