"""Admin product API: catalog lookup and stock top-up."""

from __future__ import annotations

from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.constants import ResponseMessage
from modules.core.permissions import IsAdmin
from modules.core.responses import api_response
from modules.products.models import Product
from modules.products.repository import ProductRepository
from modules.products.serializers import ProductSerializer, StockUpdateSerializer
from modules.products.services import ProductService


class AdminProductViewSet(GenericViewSet):
    permission_classes = [IsAdmin]
    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductRepository())

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/admin/products/{pk}"""
        product = self._service.get_product(int(pk))
        return api_response(
            ResponseMessage.PRODUCT_FETCHED, ProductSerializer(product).data
        )

    @action(detail=True, methods=["patch"], url_path="stock")
    def update_stock(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/admin/products/{pk}/stock

        Adds ``quantity`` units to the current stock.
        """
        serializer = StockUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = self._service.increase_stock(
            int(pk), serializer.validated_data["quantity"]
        )
        return api_response(ResponseMessage.STOCK_UPDATED, ProductSerializer(product).data)
