"""Django ORM storage for users.

Follows the Null Object pattern: lookups return ``None`` for missing rows
and the Service Layer decides which domain error to raise.
"""

from __future__ import annotations

from typing import Optional

import structlog

from modules.accounts.models import User

logger = structlog.get_logger(__name__)


class UserRepository:
    """User persistence backed by Django ORM."""

    def get_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive lookup on the login identifier."""
        return User.objects.filter(email__iexact=email).first()

    def get_for_update(self, user_id: int) -> Optional[User]:
        """Fetch and row-lock a user; must run inside ``transaction.atomic``."""
        return User.objects.select_for_update().filter(pk=user_id).first()

    def email_exists(self, email: str) -> bool:
        return User.objects.filter(email__iexact=email).exists()

    def create(self, *, name: str, email: str, password: str) -> User:
        return User.objects.create_user(email=email, password=password, name=name)

    def save(self, user: User, update_fields: Optional[list[str]] = None) -> User:
        user.save(update_fields=update_fields)
        logger.debug("user.saved", user_id=user.pk, fields=update_fields)
        return user
