"""Integration tests for the admin endpoints.

Covers:
- PATCH /api/v1/admin/users/{id}/status
- GET /api/v1/admin/orders (with_trashed, pagination, 404 when empty)
- GET /api/v1/admin/orders/{id}
- GET /api/v1/admin/products/{id}
- PATCH /api/v1/admin/products/{id}/stock
"""

from __future__ import annotations

import pytest

from modules.core.constants import ResponseMessage, ValidationMessage
from modules.orders.dtos import PlaceOrderDTO
from modules.products.models import Product

pytestmark = pytest.mark.integration


@pytest.fixture()
def place_order(order_service, ctx, product):
    def _place(quantity=1):
        return order_service.create_order(
            ctx, PlaceOrderDTO(product_id=product.pk, quantity=quantity)
        )

    return _place


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class TestUserStatusToggle:
    def test_deactivates_then_activates(self, admin_client, user):
        url = f"/api/v1/admin/users/{user.pk}/status"

        response = admin_client.patch(url)
        assert response.status_code == 200
        assert response.json()["message"] == ResponseMessage.USER_DEACTIVATED.value
        assert response.json()["data"]["is_active"] is False

        response = admin_client.patch(url)
        assert response.json()["message"] == ResponseMessage.USER_ACTIVATED.value
        user.refresh_from_db()
        assert user.is_active is True

    def test_unknown_user(self, admin_client):
        response = admin_client.patch("/api/v1/admin/users/999/status")

        assert response.status_code == 404
        assert response.json() == {"message": ResponseMessage.USER_NOT_FOUND.value}

    def test_regular_user_forbidden(self, auth_client, other_user):
        response = auth_client.patch(f"/api/v1/admin/users/{other_user.pk}/status")

        assert response.status_code == 403
        other_user.refresh_from_db()
        assert other_user.is_active is True

    def test_anonymous_unauthorized(self, api_client, user):
        response = api_client.patch(f"/api/v1/admin/users/{user.pk}/status")

        assert response.status_code == 401


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------


class TestAdminOrderList:
    def test_empty_is_not_found(self, admin_client):
        response = admin_client.get("/api/v1/admin/orders")

        assert response.status_code == 404
        assert response.json() == {"message": ResponseMessage.ORDERS_NOT_FOUND.value}

    def test_lists_every_users_orders(
        self, admin_client, place_order, order_service, other_ctx, product
    ):
        place_order(2)
        order_service.create_order(
            other_ctx, PlaceOrderDTO(product_id=product.pk, quantity=1)
        )

        response = admin_client.get("/api/v1/admin/orders")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == ResponseMessage.ORDERS_FETCHED.value
        assert len(body["data"]) == 2
        assert body["pagination"]["total"] == 2
        assert body["pagination"]["from"] == 1
        assert body["pagination"]["to"] == 2

    def test_with_trashed(self, admin_client, place_order, order_service, ctx):
        live = place_order()
        gone = place_order()
        order_service.delete_order(ctx, gone.pk)

        default = admin_client.get("/api/v1/admin/orders").json()["data"]
        trashed = admin_client.get("/api/v1/admin/orders?with_trashed=true").json()["data"]

        assert [o["id"] for o in default] == [live.pk]
        assert {o["id"] for o in trashed} == {live.pk, gone.pk}
        deleted = next(o for o in trashed if o["id"] == gone.pk)
        assert deleted["deleted_at"] is not None

    def test_only_deleted_orders_is_not_found(self, admin_client, place_order, order_service, ctx):
        order_service.delete_order(ctx, place_order().pk)

        assert admin_client.get("/api/v1/admin/orders").status_code == 404
        assert admin_client.get("/api/v1/admin/orders?with_trashed=1").status_code == 200

    def test_per_page_is_capped(self, admin_client, place_order):
        place_order()

        response = admin_client.get("/api/v1/admin/orders?per_page=500")

        assert response.json()["pagination"]["per_page"] == 100

    def test_default_page_size(self, admin_client, place_order, product):
        Product.objects.filter(pk=product.pk).update(stock=100)
        for _ in range(11):
            place_order()

        pagination = admin_client.get("/api/v1/admin/orders").json()["pagination"]

        assert pagination["per_page"] == 10
        assert pagination["last_page"] == 2
        assert pagination["next_page_url"] is not None

    def test_regular_user_forbidden(self, auth_client, place_order):
        place_order()

        assert auth_client.get("/api/v1/admin/orders").status_code == 403


class TestAdminOrderDetail:
    def test_returns_order_with_owner(self, admin_client, place_order, user):
        order = place_order(2)

        response = admin_client.get(f"/api/v1/admin/orders/{order.pk}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == order.pk
        assert data["user"]["email"] == user.email
        assert data["total_price"] == "200.00"

    def test_unknown_order(self, admin_client):
        response = admin_client.get("/api/v1/admin/orders/999")

        assert response.status_code == 404

    def test_deleted_order_needs_with_trashed(
        self, admin_client, place_order, order_service, ctx
    ):
        order = place_order()
        order_service.delete_order(ctx, order.pk)

        assert admin_client.get(f"/api/v1/admin/orders/{order.pk}").status_code == 404
        response = admin_client.get(f"/api/v1/admin/orders/{order.pk}?with_trashed=true")
        assert response.status_code == 200


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------


class TestAdminProduct:
    def test_detail(self, admin_client, product):
        response = admin_client.get(f"/api/v1/admin/products/{product.pk}")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == ResponseMessage.PRODUCT_FETCHED.value
        assert body["data"]["stock"] == 10
        assert body["data"]["price"] == "100.00"

    def test_detail_unknown(self, admin_client):
        response = admin_client.get("/api/v1/admin/products/999")

        assert response.status_code == 404
        assert response.json() == {"message": "Product with ID 999 not found."}

    def test_stock_is_additive(self, admin_client, product):
        response = admin_client.patch(
            f"/api/v1/admin/products/{product.pk}/stock", {"quantity": 5}, format="json"
        )

        assert response.status_code == 200
        assert response.json()["message"] == ResponseMessage.STOCK_UPDATED.value
        assert response.json()["data"]["stock"] == 15
        product.refresh_from_db()
        assert product.stock == 15

    def test_stock_quantity_validated(self, admin_client, product):
        response = admin_client.patch(
            f"/api/v1/admin/products/{product.pk}/stock", {"quantity": 0}, format="json"
        )

        assert response.status_code == 422
        assert response.json()["errors"]["quantity"] == [
            ValidationMessage.QUANTITY_MIN.value
        ]
        product.refresh_from_db()
        assert product.stock == 10

    def test_stock_quantity_beyond_column_range(self, admin_client, product):
        response = admin_client.patch(
            f"/api/v1/admin/products/{product.pk}/stock",
            {"quantity": 2**63},
            format="json",
        )

        assert response.status_code == 422
        assert response.json()["errors"]["quantity"] == [
            ValidationMessage.QUANTITY_MAX.value
        ]
        product.refresh_from_db()
        assert product.stock == 10

    def test_stock_unknown_product(self, admin_client):
        response = admin_client.patch(
            "/api/v1/admin/products/999/stock", {"quantity": 5}, format="json"
        )

        assert response.status_code == 404

    def test_regular_user_forbidden(self, auth_client, product):
        response = auth_client.patch(
            f"/api/v1/admin/products/{product.pk}/stock", {"quantity": 5}, format="json"
        )

        assert response.status_code == 403
