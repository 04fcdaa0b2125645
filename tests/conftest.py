from decimal import Decimal

import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from modules.accounts.models import User
from modules.core.context import RequestContext
from modules.orders.repository import OrderRepository
from modules.orders.services import OrderService
from modules.products.models import Product
from modules.products.repository import ProductRepository

PASSWORD = "correct-horse-battery"


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def _clear_cache():
    """Throttling counters live in the cache; start every test from zero."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


@pytest.fixture()
def password():
    return PASSWORD


@pytest.fixture()
def user():
    return User.objects.create_user(
        email="alice@example.com", password=PASSWORD, name="Alice"
    )


@pytest.fixture()
def other_user():
    return User.objects.create_user(
        email="bob@example.com", password=PASSWORD, name="Bob"
    )


@pytest.fixture()
def admin_user():
    return User.objects.create_superuser(
        email="admin@example.com", password=PASSWORD, name="Admin User"
    )


def _client_for(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture()
def auth_client(user):
    """APIClient force-authenticated as ``user``."""
    return _client_for(user)


@pytest.fixture()
def other_client(other_user):
    return _client_for(other_user)


@pytest.fixture()
def admin_client(admin_user):
    return _client_for(admin_user)


# ---------------------------------------------------------------------------
# Service layer
# ---------------------------------------------------------------------------


@pytest.fixture()
def ctx(user):
    return RequestContext(actor_id=user.pk, role=user.role)


@pytest.fixture()
def other_ctx(other_user):
    return RequestContext(actor_id=other_user.pk, role=other_user.role)


@pytest.fixture()
def admin_ctx(admin_user):
    return RequestContext(actor_id=admin_user.pk, role=admin_user.role)


@pytest.fixture()
def order_service():
    return OrderService(
        order_repository=OrderRepository(),
        product_repository=ProductRepository(),
    )


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


@pytest.fixture()
def product():
    """Price 100.00, 10 units in stock."""
    return Product.objects.create(
        name="Widget",
        description="A very useful widget",
        price=Decimal("100.00"),
        stock=10,
    )
