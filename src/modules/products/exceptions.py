"""Product domain exceptions.

Raised by the Service Layer and the stock ledger; translated into HTTP
responses by ``modules.core.exceptions.api_exception_handler``.
"""

from __future__ import annotations

from modules.core.constants import ResponseMessage
from modules.core.exceptions import BusinessRuleViolation, ResourceNotFound


class ProductNotFound(ResourceNotFound):
    """The requested product does not exist."""

    default_message = ResponseMessage.PRODUCT_NOT_FOUND.value

    @classmethod
    def for_id(cls, product_id: int) -> ProductNotFound:
        return cls(f"Product with ID {product_id} not found.")


class InsufficientStock(BusinessRuleViolation):
    """A stock decrease is larger than the units available."""

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"{ResponseMessage.INSUFFICIENT_STOCK.value} "
            f"Requested {requested}, available {available}."
        )
