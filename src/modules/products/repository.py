"""Django ORM storage for products.

Lookups return ``None`` for missing rows; the Service Layer decides how a
missing product is reported.
"""

from __future__ import annotations

from typing import Optional

import structlog

from modules.products.models import Product

logger = structlog.get_logger(__name__)


class ProductRepository:
    """Product persistence backed by Django ORM."""

    def get_by_id(self, product_id: int) -> Optional[Product]:
        return Product.objects.filter(pk=product_id).first()

    def get_for_update(self, product_id: int) -> Optional[Product]:
        """Fetch and row-lock a product; must run inside ``transaction.atomic``."""
        return Product.objects.select_for_update().filter(pk=product_id).first()

    def exists(self, product_id: int) -> bool:
        return Product.objects.filter(pk=product_id).exists()

    def save(self, product: Product, update_fields: Optional[list[str]] = None) -> Product:
        product.save(update_fields=update_fields)
        logger.debug("product.saved", product_id=product.pk, fields=update_fields)
        return product
