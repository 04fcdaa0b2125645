"""Unit tests for the error taxonomy and the request-boundary status table."""

from __future__ import annotations

import pytest
from rest_framework import exceptions as drf_exceptions

from modules.accounts.exceptions import EmailAlreadyRegistered, InactiveAccount, UserNotFound
from modules.core.constants import ResponseMessage, ValidationMessage
from modules.core.exceptions import (
    DomainError,
    InvalidCredentials,
    api_exception_handler,
    status_for,
)
from modules.orders.exceptions import NotOrderOwner, OrderNotFound, OrdersNotFound
from modules.products.exceptions import InsufficientStock, ProductNotFound

pytestmark = pytest.mark.unit


class TestStatusTable:
    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (OrderNotFound(), 404),
            (OrdersNotFound(), 404),
            (ProductNotFound.for_id(1), 404),
            (UserNotFound(), 404),
            (InvalidCredentials(), 401),
            (NotOrderOwner(), 403),
            (InactiveAccount(), 403),
            (InsufficientStock(requested=5, available=1), 409),
            (EmailAlreadyRegistered(), 422),
            (DomainError(), 500),
        ],
    )
    def test_maps_error_kind_to_status(self, error, expected):
        assert status_for(error) == expected

    def test_default_messages_come_from_catalog(self):
        assert OrderNotFound().message == ResponseMessage.ORDER_NOT_FOUND.value
        assert NotOrderOwner().message == ResponseMessage.NOT_ORDER_OWNER.value
        assert InvalidCredentials().message == ResponseMessage.INVALID_CREDENTIALS.value

    def test_custom_message_wins(self):
        assert OrderNotFound("gone").message == "gone"


class TestApiExceptionHandler:
    def test_domain_error_renders_message(self):
        response = api_exception_handler(NotOrderOwner(), {"view": None})

        assert response.status_code == 403
        assert response.data == {"message": ResponseMessage.NOT_ORDER_OWNER.value}

    def test_invalid_input_renders_like_validation_error(self):
        response = api_exception_handler(EmailAlreadyRegistered(), {"view": None})

        assert response.status_code == 422
        assert response.data == {
            "message": ResponseMessage.VALIDATION_FAILED.value,
            "errors": {"email": [ValidationMessage.EMAIL_TAKEN.value]},
        }

    def test_validation_error_is_422_with_field_errors(self):
        exc = drf_exceptions.ValidationError({"quantity": ["bad"]})

        response = api_exception_handler(exc, {"view": None})

        assert response.status_code == 422
        assert response.data["message"] == ResponseMessage.VALIDATION_FAILED.value
        assert response.data["errors"] == {"quantity": ["bad"]}

    def test_drf_errors_are_flattened(self):
        response = api_exception_handler(drf_exceptions.NotAuthenticated(), {"view": None})

        assert response.status_code == 401
        assert set(response.data) == {"message"}

    def test_unexpected_error_hides_details(self):
        response = api_exception_handler(RuntimeError("secret stack"), {"view": None})

        assert response.status_code == 500
        assert response.data == {"message": ResponseMessage.UNEXPECTED_ERROR.value}
