"""Account service layer (Use Cases).

- ``AuthService``: registration, login, logout and token refresh.
- ``UserService``: the administrative active-flag toggle.

Login rules:
- Unknown email or wrong password -> ``InvalidCredentials`` (401).
- Deactivated account -> ``InactiveAccount`` (403), checked only after the
  password matched so the response does not leak account state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.contrib.auth.models import update_last_login
from django.db import IntegrityError, transaction

from modules.accounts.exceptions import EmailAlreadyRegistered, InactiveAccount, UserNotFound
from modules.accounts.tokens import RevocableAccessToken
from modules.core.exceptions import InvalidCredentials

if TYPE_CHECKING:
    from modules.accounts.dtos import LoginDTO, RegisterUserDTO
    from modules.accounts.models import User
    from modules.accounts.repository import UserRepository
    from modules.core.context import RequestContext

logger = structlog.get_logger(__name__)


class AuthService:
    def __init__(self, repository: UserRepository) -> None:
        self._repo = repository

    @transaction.atomic
    def register(self, dto: RegisterUserDTO) -> User:
        if self._repo.email_exists(dto.email):
            raise EmailAlreadyRegistered()
        try:
            user = self._repo.create(name=dto.name, email=dto.email, password=dto.password)
        except IntegrityError as exc:
            raise EmailAlreadyRegistered() from exc
        logger.info("auth.registered", user_id=user.pk)
        return user

    @transaction.atomic
    def login(self, dto: LoginDTO) -> tuple[User, str]:
        """Verify credentials and issue a revocable access token."""
        user = self._repo.get_by_email(dto.email)
        if user is None or not user.check_password(dto.password):
            logger.warning("auth.login_failed", reason="invalid_credentials")
            raise InvalidCredentials()

        log = logger.bind(user_id=user.pk)
        if not user.is_active:
            log.warning("auth.login_failed", reason="inactive_account")
            raise InactiveAccount()

        token = RevocableAccessToken.for_user(user)
        update_last_login(None, user)
        log.info("auth.login_succeeded")
        return user, str(token)

    @transaction.atomic
    def logout(self, ctx: RequestContext, token: RevocableAccessToken) -> None:
        token.blacklist()
        logger.info("auth.logged_out", user_id=ctx.actor_id)

    @transaction.atomic
    def refresh(self, user: User, token: RevocableAccessToken) -> str:
        """Revoke *token* and return a fresh one for the same user."""
        token.blacklist()
        new_token = RevocableAccessToken.for_user(user)
        logger.info("auth.token_refreshed", user_id=user.pk)
        return str(new_token)


class UserService:
    def __init__(self, repository: UserRepository) -> None:
        self._repo = repository

    @transaction.atomic
    def toggle_active(self, user_id: int) -> User:
        """Flip ``is_active``; applying it twice restores the original value."""
        user = self._repo.get_for_update(user_id)
        if user is None:
            raise UserNotFound()

        user.is_active = not user.is_active
        self._repo.save(user, update_fields=["is_active"])
        logger.info("user.status_toggled", user_id=user.pk, is_active=user.is_active)
        return user
