from django.urls import path
from rest_framework.routers import SimpleRouter

from modules.accounts.views import (
    AdminUserViewSet,
    LoginView,
    LogoutView,
    MeView,
    RefreshTokenView,
    RegisterView,
)

router = SimpleRouter(trailing_slash=False)
router.register("admin/users", AdminUserViewSet, basename="admin-user")

urlpatterns = [
    path("login", LoginView.as_view(), name="login"),
    path("register", RegisterView.as_view(), name="register"),
    path("logout", LogoutView.as_view(), name="logout"),
    path("refresh-token", RefreshTokenView.as_view(), name="refresh-token"),
    path("me", MeView.as_view(), name="me"),
    *router.urls,
]
