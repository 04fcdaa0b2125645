import logging
import uuid

import pytest

pytestmark = pytest.mark.integration


class TestRequestIdHeader:
    def test_echoes_client_request_id_on_login(self, api_client, user, password):
        response = api_client.post(
            "/api/v1/login",
            {"email": user.email, "password": password},
            format="json",
            HTTP_X_REQUEST_ID="login-req-7",
        )

        assert response.status_code == 200
        assert response["X-Request-ID"] == "login-req-7"

    def test_fresh_uuid4_per_request(self, api_client):
        first = api_client.get("/health")["X-Request-ID"]
        second = api_client.get("/health")["X-Request-ID"]

        assert first != second
        assert uuid.UUID(first).version == 4

    def test_kept_on_rejected_requests(self, api_client_with_correlation):
        api_client, cid = api_client_with_correlation

        response = api_client.get("/api/v1/orders")

        assert response.status_code == 401
        assert response["X-Request-ID"] == cid


class TestRequestIdInLogs:
    def test_order_events_carry_request_id(self, auth_client, product, caplog):
        with caplog.at_level(logging.INFO):
            response = auth_client.post(
                "/api/v1/orders",
                {"product_id": product.pk, "quantity": 1},
                format="json",
                HTTP_X_REQUEST_ID="order-trace-42",
            )

        assert response.status_code == 201
        messages = [r.getMessage() for r in caplog.records]
        assert any("order.created" in m and "order-trace-42" in m for m in messages)
