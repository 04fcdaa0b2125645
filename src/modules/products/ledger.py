"""Stock ledger: the only code path allowed to change ``Product.stock``.

Every change is a signed delta applied to a product row that the caller has
already locked inside its own ``transaction.atomic`` block.  The ledger never
commits; if the surrounding transaction rolls back, so does the stock.

- A decrease larger than the current stock raises ``InsufficientStock``.
- Increases always succeed; there is no upper bound.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

import structlog

from modules.products.exceptions import InsufficientStock

if TYPE_CHECKING:
    from modules.products.models import Product
    from modules.products.repository import ProductRepository

logger = structlog.get_logger(__name__)

CENT = Decimal("0.01")


def calculate_total_price(price: Decimal, quantity: int) -> Decimal:
    """``price * quantity`` rounded half-up to cents."""
    return (Decimal(price) * quantity).quantize(CENT, rounding=ROUND_HALF_UP)


class StockLedger:
    def __init__(self, repository: ProductRepository) -> None:
        self._repo = repository

    def apply_delta(self, product: Product, delta: int) -> Product:
        """Add *delta* (negative to take units out) to the product stock.

        Raises:
            InsufficientStock: the result would drop below zero.
        """
        new_stock = product.stock + delta
        if new_stock < 0:
            logger.warning(
                "stock.insufficient",
                product_id=product.pk,
                requested=-delta,
                available=product.stock,
            )
            raise InsufficientStock(requested=-delta, available=product.stock)

        product.stock = new_stock
        self._repo.save(product, update_fields=["stock"])
        logger.info(
            "stock.adjusted",
            product_id=product.pk,
            delta=delta,
            remaining=product.stock,
        )
        return product

    def reserve(self, product: Product, quantity: int) -> Product:
        return self.apply_delta(product, -quantity)

    def release(self, product: Product, quantity: int) -> Product:
        return self.apply_delta(product, quantity)

    def adjust(self, product: Product, old_quantity: int, new_quantity: int) -> Product:
        """Move stock for an order whose quantity changes from old to new."""
        return self.apply_delta(product, old_quantity - new_quantity)
