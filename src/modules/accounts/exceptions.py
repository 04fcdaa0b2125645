"""Account domain exceptions.

Raised by the Service Layer; translated into HTTP responses by
``modules.core.exceptions.api_exception_handler``.
"""

from __future__ import annotations

from modules.core.constants import ResponseMessage, ValidationMessage
from modules.core.exceptions import InvalidInput, ResourceNotFound, Unauthorized


class UserNotFound(ResourceNotFound):
    """The requested user does not exist."""

    default_message = ResponseMessage.USER_NOT_FOUND.value


class InactiveAccount(Unauthorized):
    """The account is deactivated and cannot log in."""

    default_message = ResponseMessage.ACCOUNT_INACTIVE.value


class EmailAlreadyRegistered(InvalidInput):
    """Another account already uses this email."""

    field = "email"
    default_message = ValidationMessage.EMAIL_TAKEN.value
