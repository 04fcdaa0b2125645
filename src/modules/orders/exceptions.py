"""Order domain exceptions.

Raised by the Service Layer; translated into HTTP responses by
``modules.core.exceptions.api_exception_handler``.  Stock failures are
``modules.products.exceptions.InsufficientStock``.
"""

from __future__ import annotations

from modules.core.constants import ResponseMessage
from modules.core.exceptions import BusinessRuleViolation, ResourceNotFound, Unauthorized


class OrderNotFound(ResourceNotFound):
    """The order does not exist or has been soft-deleted."""

    default_message = ResponseMessage.ORDER_NOT_FOUND.value


class OrdersNotFound(ResourceNotFound):
    """An admin listing matched no orders at all."""

    default_message = ResponseMessage.ORDERS_NOT_FOUND.value


class NotOrderOwner(Unauthorized):
    """The principal does not own the order it tries to modify."""

    default_message = ResponseMessage.NOT_ORDER_OWNER.value


class OrderTotalTooLarge(BusinessRuleViolation):
    """``price x quantity`` does not fit the stored total column."""

    default_message = ResponseMessage.ORDER_TOTAL_TOO_LARGE.value
