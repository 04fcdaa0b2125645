"""Page-number pagination rendered in the API's response envelope."""

from __future__ import annotations

from typing import Any

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response

from modules.core.constants import ResponseMessage


class StandardResultsSetPagination(PageNumberPagination):
    """``?page=N&per_page=M`` pagination (``per_page`` capped at 100).

    The body is ``{"message", "data", "pagination"}`` where ``pagination``
    carries the total count, current/last page, page size, first/last item
    index and the next/previous page URLs.
    """

    page_size_query_param = "per_page"
    max_page_size = 100
    message: str = ResponseMessage.ORDERS_FETCHED.value

    def get_paginated_response(self, data: Any) -> Response:
        return Response(
            {
                "message": self.message,
                "data": data,
                "pagination": self.get_pagination_data(),
            }
        )

    def get_pagination_data(self) -> dict[str, Any]:
        page = self.page
        paginator = page.paginator
        has_items = paginator.count > 0
        return {
            "total": paginator.count,
            "current_page": page.number,
            "last_page": paginator.num_pages,
            "per_page": paginator.per_page,
            "from": page.start_index() if has_items else None,
            "to": page.end_index() if has_items else None,
            "next_page_url": self.get_next_link(),
            "prev_page_url": self.get_previous_link(),
            "path": self.request.build_absolute_uri(self.request.path),
        }
