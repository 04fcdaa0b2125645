"""Order service layer (Use Cases).

Orchestrates order creation, quantity changes and deletion together with
the stock movements they imply.  Every command is one
``transaction.atomic`` block: any failure rolls back both the order row
and the stock change.

Locking order: the order row first, then the product row
(``SELECT ... FOR UPDATE``), so concurrent requests on the same product
serialise instead of overselling.

Business rules enforced:
- Stock never drops below zero (``InsufficientStock``).
- ``total_price`` is recomputed from the current product price on every
  quantity change.
- Only the owner may update an order; the owner or an admin may delete it.
- A soft-deleted order is terminal.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

import structlog
from django.db import transaction

from modules.core.permissions import authorize_owner
from modules.orders.exceptions import NotOrderOwner, OrderNotFound, OrderTotalTooLarge
from modules.orders.models import Order
from modules.products.exceptions import ProductNotFound
from modules.products.ledger import StockLedger, calculate_total_price

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.core.context import RequestContext
    from modules.orders.dtos import PlaceOrderDTO, UpdateOrderDTO
    from modules.orders.repository import OrderRepository
    from modules.products.repository import ProductRepository

logger = structlog.get_logger(__name__)


def _order_total(price: Decimal, quantity: int) -> Decimal:
    total = calculate_total_price(price, quantity)
    field = Order._meta.get_field("total_price")
    if total.adjusted() >= field.max_digits - field.decimal_places:
        raise OrderTotalTooLarge()
    return total


class OrderService:
    """Application service for Order use-cases.

    Receives its repositories via constructor injection.
    """

    def __init__(
        self,
        order_repository: OrderRepository,
        product_repository: ProductRepository,
    ) -> None:
        self._order_repo = order_repository
        self._product_repo = product_repository
        self._ledger = StockLedger(product_repository)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_order(self, ctx: RequestContext, dto: PlaceOrderDTO) -> Order:
        """Place an order for the calling user and take the units out of stock.

        Raises:
            ProductNotFound: the product does not exist.
            InsufficientStock: fewer units available than requested.
            OrderTotalTooLarge: the total does not fit ``Order.total_price``.
        """
        log = logger.bind(user_id=ctx.actor_id, product_id=dto.product_id)

        product = self._product_repo.get_for_update(dto.product_id)
        if product is None:
            raise ProductNotFound.for_id(dto.product_id)

        total_price = _order_total(product.price, dto.quantity)
        self._ledger.reserve(product, dto.quantity)
        order = self._order_repo.create(
            user_id=ctx.actor_id,
            product=product,
            quantity=dto.quantity,
            total_price=total_price,
        )
        log.info(
            "order.created",
            order_id=order.pk,
            quantity=order.quantity,
            total_price=str(order.total_price),
        )
        return order

    @transaction.atomic
    def update_order(
        self, ctx: RequestContext, order_id: int, dto: UpdateOrderDTO
    ) -> Order:
        """Change the quantity of a live order the caller owns.

        Stock moves by ``new - old``: growing the order takes units out,
        shrinking it puts them back.

        Raises:
            OrderNotFound: the order does not exist or is soft-deleted.
            NotOrderOwner: the caller does not own the order.
            ProductNotFound: the order's product no longer exists.
            InsufficientStock: the extra units are not available.
            OrderTotalTooLarge: the new total does not fit ``Order.total_price``.
        """
        log = logger.bind(user_id=ctx.actor_id, order_id=order_id)

        order = self._order_repo.get_for_update(order_id)
        if order is None:
            raise OrderNotFound()
        authorize_owner(ctx.actor_id, order.user_id, error=NotOrderOwner)

        product = self._product_repo.get_for_update(order.product_id)
        if product is None:
            raise ProductNotFound.for_id(order.product_id)

        total_price = _order_total(product.price, dto.quantity)
        old_quantity = order.quantity
        self._ledger.adjust(product, old_quantity, dto.quantity)

        order.product = product
        order.quantity = dto.quantity
        order.total_price = total_price
        self._order_repo.save(order, update_fields=["quantity", "total_price"])

        log.info(
            "order.updated",
            old_quantity=old_quantity,
            quantity=order.quantity,
            total_price=str(order.total_price),
        )
        return order

    @transaction.atomic
    def delete_order(self, ctx: RequestContext, order_id: int) -> None:
        """Soft-delete an order and return its units to stock.

        Raises:
            OrderNotFound: the order does not exist or is already deleted.
            NotOrderOwner: the caller is neither the owner nor an admin.
        """
        log = logger.bind(user_id=ctx.actor_id, order_id=order_id)

        order = self._order_repo.get_for_update(order_id)
        if order is None:
            raise OrderNotFound()
        if not ctx.is_admin:
            authorize_owner(ctx.actor_id, order.user_id, error=NotOrderOwner)

        product = self._product_repo.get_for_update(order.product_id)
        if product is not None:
            self._ledger.release(product, order.quantity)

        self._order_repo.soft_delete(order)
        log.info("order.deleted", released=order.quantity if product else 0)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_user_orders(self, ctx: RequestContext) -> QuerySet[Order]:
        """Live orders of the calling user, newest first."""
        return self._order_repo.list_for_user(ctx.actor_id)

    def list_all_orders(self, include_deleted: bool = False) -> QuerySet[Order]:
        return self._order_repo.list_all(include_deleted)

    def get_order(self, order_id: int, include_deleted: bool = False) -> Order:
        order = self._order_repo.get_by_id(order_id, include_deleted=include_deleted)
        if order is None:
            raise OrderNotFound()
        return order
