from __future__ import annotations

from types import SimpleNamespace

import pytest

from modules.core.context import ROLE_ADMIN, ROLE_USER, RequestContext
from modules.core.exceptions import Unauthorized
from modules.core.permissions import IsAdmin, authorize_owner
from modules.orders.exceptions import NotOrderOwner

pytestmark = pytest.mark.unit


class TestAuthorizeOwner:
    def test_owner_passes(self):
        assert authorize_owner(7, 7) is None

    def test_mismatch_raises_unauthorized(self):
        with pytest.raises(Unauthorized):
            authorize_owner(7, 8)

    def test_mismatch_raises_requested_error(self):
        with pytest.raises(NotOrderOwner):
            authorize_owner(7, 8, error=NotOrderOwner)


class TestIsAdmin:
    @pytest.mark.parametrize(
        ("user", "allowed"),
        [
            (SimpleNamespace(is_authenticated=True, role=ROLE_ADMIN), True),
            (SimpleNamespace(is_authenticated=True, role=ROLE_USER), False),
            (SimpleNamespace(is_authenticated=False, role=ROLE_ADMIN), False),
            (None, False),
        ],
    )
    def test_has_permission(self, user, allowed):
        request = SimpleNamespace(user=user)
        assert IsAdmin().has_permission(request, view=None) is allowed


class TestRequestContext:
    def test_is_admin(self):
        assert RequestContext(actor_id=1, role=ROLE_ADMIN).is_admin
        assert not RequestContext(actor_id=1).is_admin

    def test_from_request_uses_authenticated_user(self, user):
        ctx = RequestContext.from_request(SimpleNamespace(user=user))

        assert ctx.actor_id == user.pk
        assert ctx.role == ROLE_USER
