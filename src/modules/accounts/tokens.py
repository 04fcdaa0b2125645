"""Access tokens that can be revoked before they expire.

Mixing ``BlacklistMixin`` into ``AccessToken`` makes every issued token an
``OutstandingToken`` row and lets ``logout`` / ``refresh-token`` blacklist
the presented token; ``JWTAuthentication`` rejects blacklisted tokens through
``SIMPLE_JWT["AUTH_TOKEN_CLASSES"]``.
"""

from __future__ import annotations

from rest_framework_simplejwt.tokens import AccessToken, BlacklistMixin


class RevocableAccessToken(BlacklistMixin, AccessToken):
    """Bearer token returned by login and refresh-token."""
