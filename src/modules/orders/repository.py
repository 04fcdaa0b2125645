"""Django ORM storage for orders.

Lookups return ``None`` for missing rows.  ``get_for_update`` only sees live
orders, so a soft-deleted order can be neither updated nor deleted again.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

import structlog
from django.db.models import QuerySet

from modules.orders.models import Order
from modules.products.models import Product

logger = structlog.get_logger(__name__)


class OrderRepository:
    """Order persistence backed by Django ORM."""

    def _with_relations(self) -> QuerySet[Order]:
        return Order.objects.select_related("user", "product")

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_by_id(self, order_id: int, include_deleted: bool = False) -> Optional[Order]:
        return (
            self._with_relations()
            .with_trashed(include_deleted)
            .filter(pk=order_id)
            .first()
        )

    def get_for_update(self, order_id: int) -> Optional[Order]:
        """Fetch and row-lock a live order; must run inside ``transaction.atomic``."""
        return Order.objects.select_for_update().alive().filter(pk=order_id).first()

    def list_for_user(self, user_id: int) -> QuerySet[Order]:
        return self._with_relations().alive().filter(user_id=user_id)

    def list_all(self, include_deleted: bool = False) -> QuerySet[Order]:
        return self._with_relations().with_trashed(include_deleted)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(
        self,
        *,
        user_id: int,
        product: Product,
        quantity: int,
        total_price: Decimal,
    ) -> Order:
        return Order.objects.create(
            user_id=user_id,
            product=product,
            quantity=quantity,
            total_price=total_price,
        )

    def save(self, order: Order, update_fields: Optional[list[str]] = None) -> Order:
        order.save(update_fields=update_fields)
        logger.debug("order.saved", order_id=order.pk, fields=update_fields)
        return order

    def soft_delete(self, order: Order) -> None:
        order.delete()
