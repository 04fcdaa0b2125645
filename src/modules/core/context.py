"""Request-scoped context handed to every service call.

Services never reach for ``request.user`` or other ambient state: the view
builds a ``RequestContext`` from the authenticated request and passes it down.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from modules.core.middleware import correlation_id_var

ROLE_ADMIN = "admin"
ROLE_USER = "user"


@dataclass(frozen=True)
class RequestContext:
    """The authenticated principal plus request metadata."""

    actor_id: int
    role: str = ROLE_USER
    correlation_id: str = ""

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    @classmethod
    def from_request(cls, request: Any) -> RequestContext:
        user = request.user
        return cls(
            actor_id=user.pk,
            role=getattr(user, "role", ROLE_USER),
            correlation_id=correlation_id_var.get(),
        )

