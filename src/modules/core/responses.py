"""Helpers building the ``{"message": ..., "data": ...}`` response envelope."""

from __future__ import annotations

from typing import Any

from rest_framework import status as http_status
from rest_framework.response import Response

from modules.core.constants import ResponseMessage


def api_response(
    message: ResponseMessage | str,
    data: Any = None,
    status: int = http_status.HTTP_200_OK,
) -> Response:
    """Return the standard envelope; ``data`` is omitted when ``None``."""
    text = message.value if isinstance(message, ResponseMessage) else message
    body: dict[str, Any] = {"message": text}
    if data is not None:
        body["data"] = data
    return Response(body, status=status)
