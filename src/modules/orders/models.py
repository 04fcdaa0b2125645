"""Order model.

Business rules implemented:
- Quantity is at least 1 (DB check constraint).
- ``total_price`` is a snapshot of ``price * quantity`` taken at create and
  update time; later price changes do not touch existing orders.
- Soft delete via ``deleted_at`` (inherited from SoftDeleteModel); a deleted
  order is terminal and never restored.
- Deleting the owning user or the product cascades to the order rows.
"""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import SoftDeleteModel


class Order(SoftDeleteModel):
    user: models.ForeignKey = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="orders",
    )
    product: models.ForeignKey = models.ForeignKey(
        "products.Product",
        on_delete=models.CASCADE,
        related_name="orders",
    )
    quantity: models.PositiveIntegerField = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
    )
    total_price: models.DecimalField = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
    )
    status: models.BooleanField = models.BooleanField(default=True)

    class Meta:
        db_table = "orders"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["-created_at"], name="orders_created_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name="orders_quantity_positive",
            ),
        ]

    def __str__(self) -> str:
        return f"Order #{self.pk} ({self.quantity} x product {self.product_id})"
