"""Access control gate.

``authorize_owner`` is the pure ownership comparison used by services;
``IsAdmin`` is the role gate applied to admin routes.
"""

from __future__ import annotations

from rest_framework.permissions import BasePermission

from modules.core.context import ROLE_ADMIN
from modules.core.exceptions import Unauthorized


def authorize_owner(
    actor_id: int,
    owner_id: int,
    error: type[Unauthorized] = Unauthorized,
) -> None:
    """Raise *error* unless *actor_id* owns the resource."""
    if actor_id != owner_id:
        raise error()


class IsAdmin(BasePermission):
    """Allow only authenticated principals with the ``admin`` role."""

    message = "This action is unauthorized."

    def has_permission(self, request, view) -> bool:
        user = request.user
        return bool(
            user
            and user.is_authenticated
            and getattr(user, "role", None) == ROLE_ADMIN
        )
