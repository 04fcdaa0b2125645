"""Product URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.products.views import AdminProductViewSet

router = SimpleRouter(trailing_slash=False)
router.register("admin/products", AdminProductViewSet, basename="admin-product")

urlpatterns = router.urls
