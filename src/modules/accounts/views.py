"""Account API views.

Authentication endpoints (``login``, ``logout``, ``refresh-token``,
``register``, ``me``) and the admin user-status toggle.  Domain exceptions
propagate to ``api_exception_handler``.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.viewsets import GenericViewSet

from modules.accounts.dtos import LoginDTO, RegisterUserDTO
from modules.accounts.models import User
from modules.accounts.repository import UserRepository
from modules.accounts.serializers import (
    LoginSerializer,
    RegisterSerializer,
    UserSerializer,
    UserStatusSerializer,
)
from modules.accounts.services import AuthService, UserService
from modules.core.constants import ResponseMessage
from modules.core.context import RequestContext
from modules.core.permissions import IsAdmin
from modules.core.responses import api_response


class LoginView(APIView):
    """POST /api/v1/login"""

    authentication_classes: list = []
    permission_classes = [AllowAny]
    throttle_scope = "login"

    def post(self, request: Request) -> Response:
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user, token = AuthService(UserRepository()).login(
            LoginDTO(**serializer.validated_data)
        )
        return api_response(
            ResponseMessage.LOGIN_SUCCESSFUL,
            {"token": token, "user": UserSerializer(user).data},
        )


class RegisterView(APIView):
    """POST /api/v1/register"""

    authentication_classes: list = []
    permission_classes = [AllowAny]
    throttle_scope = "login"

    def post(self, request: Request) -> Response:
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = AuthService(UserRepository()).register(
            RegisterUserDTO(**serializer.validated_data)
        )
        return api_response(
            ResponseMessage.USER_CREATED,
            UserSerializer(user).data,
            status=status.HTTP_201_CREATED,
        )


class LogoutView(APIView):
    """POST /api/v1/logout -- revokes the presented bearer token."""

    def post(self, request: Request) -> Response:
        ctx = RequestContext.from_request(request)
        AuthService(UserRepository()).logout(ctx, request.auth)
        return api_response(ResponseMessage.LOGOUT_SUCCESSFUL)


class RefreshTokenView(APIView):
    """POST /api/v1/refresh-token -- revokes the current token, issues a new one."""

    def post(self, request: Request) -> Response:
        token = AuthService(UserRepository()).refresh(request.user, request.auth)
        return api_response(ResponseMessage.TOKEN_REFRESHED, {"token": token})


class MeView(APIView):
    """GET /api/v1/me"""

    def get(self, request: Request) -> Response:
        return api_response(
            ResponseMessage.USER_FETCHED, UserSerializer(request.user).data
        )


class AdminUserViewSet(GenericViewSet):
    """Administrative user management (admin role only)."""

    permission_classes = [IsAdmin]
    queryset = User.objects.all()
    serializer_class = UserStatusSerializer
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = UserService(repository=UserRepository())

    @action(detail=True, methods=["patch"], url_path="status")
    def toggle_status(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/admin/users/{pk}/status"""
        user = self._service.toggle_active(int(pk))
        message = (
            ResponseMessage.USER_ACTIVATED
            if user.is_active
            else ResponseMessage.USER_DEACTIVATED
        )
        return api_response(message, UserStatusSerializer(user).data)
