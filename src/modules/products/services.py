"""Product service layer (Use Cases).

Catalog lookup for admins and the additive stock top-up.  Lookups are not
cached; every call reads the current row.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.db import transaction

from modules.products.exceptions import ProductNotFound
from modules.products.ledger import StockLedger

if TYPE_CHECKING:
    from modules.products.models import Product
    from modules.products.repository import ProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repo = repository
        self._ledger = StockLedger(repository)

    def get_product(self, product_id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFound.for_id(product_id)
        return product

    @transaction.atomic
    def increase_stock(self, product_id: int, quantity: int) -> Product:
        """Add *quantity* units to the product stock.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_for_update(product_id)
        if product is None:
            raise ProductNotFound.for_id(product_id)

        product = self._ledger.release(product, quantity)
        logger.info(
            "stock.increased",
            product_id=product.pk,
            quantity=quantity,
            stock=product.stock,
        )
        return product
