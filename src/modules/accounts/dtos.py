"""Account DTOs for the Service Layer.

Immutable Pydantic v2 contracts between the DRF serializers and the
services.  Validation of the raw payload stays in the serializers; DTOs only
normalise what the services rely on.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class LoginDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalise_email(cls, v: str) -> str:
        return v.strip()


class RegisterUserDTO(BaseModel):
    """Input for self-service registration (always the ``user`` role)."""

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    password: str

    @field_validator("name", "email")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        return v.strip()
