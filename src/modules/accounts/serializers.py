"""Account serializers.

Input serializers validate request payloads against the fixed
``ValidationMessage`` catalog; output serializers shape ``data`` in the
response envelope.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.accounts.models import User
from modules.accounts.repository import UserRepository
from modules.core.constants import ValidationMessage

_EMAIL_ERRORS = {
    "required": ValidationMessage.EMAIL_REQUIRED.value,
    "blank": ValidationMessage.EMAIL_REQUIRED.value,
    "null": ValidationMessage.EMAIL_REQUIRED.value,
    "invalid": ValidationMessage.EMAIL_INVALID.value,
}

_PASSWORD_ERRORS = {
    "required": ValidationMessage.PASSWORD_REQUIRED.value,
    "blank": ValidationMessage.PASSWORD_REQUIRED.value,
    "null": ValidationMessage.PASSWORD_REQUIRED.value,
    "min_length": ValidationMessage.PASSWORD_TOO_SHORT.value,
}


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField(error_messages=_EMAIL_ERRORS)
    password = serializers.CharField(
        trim_whitespace=False, write_only=True, error_messages=_PASSWORD_ERRORS
    )

    def validate_email(self, value: str) -> str:
        if not UserRepository().email_exists(value):
            raise serializers.ValidationError(ValidationMessage.EMAIL_NOT_FOUND.value)
        return value


class RegisterSerializer(serializers.Serializer):
    name = serializers.CharField(
        max_length=255,
        error_messages={
            "required": ValidationMessage.NAME_REQUIRED.value,
            "blank": ValidationMessage.NAME_REQUIRED.value,
            "null": ValidationMessage.NAME_REQUIRED.value,
        },
    )
    email = serializers.EmailField(error_messages=_EMAIL_ERRORS)
    password = serializers.CharField(
        min_length=8,
        trim_whitespace=False,
        write_only=True,
        error_messages=_PASSWORD_ERRORS,
    )

    def validate_email(self, value: str) -> str:
        if UserRepository().email_exists(value):
            raise serializers.ValidationError(ValidationMessage.EMAIL_TAKEN.value)
        return value


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "name", "email", "role", "is_active", "created_at"]
        read_only_fields = fields


class UserSummarySerializer(serializers.ModelSerializer):
    """Compact owner representation nested inside orders."""

    class Meta:
        model = User
        fields = ["id", "name", "email"]
        read_only_fields = fields


class UserStatusSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "name", "email", "is_active"]
        read_only_fields = fields
