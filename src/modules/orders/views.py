"""Order API views.

Exposes ``OrderService`` over HTTP using DRF ViewSets.  Views build the
``RequestContext`` and DTOs, call the service and render the response
envelope; domain exceptions propagate to ``api_exception_handler``.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.throttling import BaseThrottle
from rest_framework.viewsets import GenericViewSet

from modules.core.constants import ResponseMessage
from modules.core.context import RequestContext
from modules.core.pagination import StandardResultsSetPagination
from modules.core.permissions import IsAdmin
from modules.core.responses import api_response
from modules.orders.dtos import PlaceOrderDTO, UpdateOrderDTO
from modules.orders.exceptions import OrdersNotFound
from modules.orders.filters import OrderFilter
from modules.orders.models import Order
from modules.orders.repository import OrderRepository
from modules.orders.serializers import (
    OrderListQuerySerializer,
    OrderRequestSerializer,
    OrderSerializer,
    OrderUpdateResultSerializer,
)
from modules.orders.services import OrderService
from modules.products.repository import ProductRepository


def _order_service() -> OrderService:
    return OrderService(
        order_repository=OrderRepository(),
        product_repository=ProductRepository(),
    )


class OrderViewSet(GenericViewSet):
    """The authenticated user's own orders.

    Does **not** extend ``ModelViewSet``; all ORM access goes through the
    service/repository layer.
    """

    queryset = Order.objects.all()
    serializer_class = OrderSerializer
    filterset_class = OrderFilter
    filter_backends = [DjangoFilterBackend]
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = _order_service()

    def get_throttles(self) -> list[BaseThrottle]:
        """Throttling scope per action."""
        throttle_scope: str | None
        if self.action == "create":
            throttle_scope = "order_creation"
        elif self.action == "list":
            throttle_scope = "order_listing"
        else:
            throttle_scope = None
        self.throttle_scope = throttle_scope
        return super().get_throttles()

    def get_queryset(self):
        if getattr(self, "swagger_fake_view", False):
            return Order.objects.none()
        return self._service.list_user_orders(RequestContext.from_request(self.request))

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders"""
        serializer = OrderRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = self._service.create_order(
            RequestContext.from_request(request),
            PlaceOrderDTO(**serializer.validated_data),
        )
        return api_response(
            ResponseMessage.ORDER_CREATED,
            OrderSerializer(order).data,
            status=status.HTTP_201_CREATED,
        )

    # ------------------------------------------------------------------
    # List
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/orders

        Live orders of the caller, newest first, filtered by ``OrderFilter``
        and paginated with ``page`` / ``per_page``.
        """
        queryset = self.filter_queryset(self.get_queryset())

        paginator = StandardResultsSetPagination()
        page = paginator.paginate_queryset(queryset, request, view=self)
        serializer = OrderSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)

    # ------------------------------------------------------------------
    # Update / Delete
    # ------------------------------------------------------------------

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/orders/{pk}

        Accepts the same payload as creation; the order keeps its product and
        only ``quantity`` changes.
        """
        serializer = OrderRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = self._service.update_order(
            RequestContext.from_request(request),
            int(pk),
            UpdateOrderDTO(quantity=serializer.validated_data["quantity"]),
        )
        return api_response(
            ResponseMessage.ORDER_UPDATED, OrderUpdateResultSerializer(order).data
        )

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/orders/{pk}"""
        self._service.delete_order(RequestContext.from_request(request), int(pk))
        return api_response(ResponseMessage.ORDER_DELETED)


class AdminOrderViewSet(GenericViewSet):
    """Every user's orders, optionally including soft-deleted ones."""

    permission_classes = [IsAdmin]
    queryset = Order.objects.all()
    serializer_class = OrderSerializer
    filterset_class = OrderFilter
    filter_backends = [DjangoFilterBackend]
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = _order_service()

    def _include_deleted(self, request: Request) -> bool:
        options = OrderListQuerySerializer(data=request.query_params)
        options.is_valid(raise_exception=True)
        return options.validated_data["with_trashed"]

    def get_queryset(self):
        if getattr(self, "swagger_fake_view", False):
            return Order.objects.none()
        return self._service.list_all_orders(self._include_deleted(self.request))

    def list(self, request: Request) -> Response:
        """GET /api/v1/admin/orders?with_trashed=&page=&per_page="""
        queryset = self.filter_queryset(self.get_queryset())
        if not queryset.exists():
            raise OrdersNotFound()

        paginator = StandardResultsSetPagination()
        page = paginator.paginate_queryset(queryset, request, view=self)
        serializer = OrderSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/admin/orders/{pk}"""
        order = self._service.get_order(
            int(pk), include_deleted=self._include_deleted(request)
        )
        return api_response(ResponseMessage.ORDER_FETCHED, OrderSerializer(order).data)
