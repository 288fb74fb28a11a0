"""Pagination for hotel search results."""

from __future__ import annotations

import math

from django.conf import settings  # type: ignore
from rest_framework.pagination import BasePagination  # type: ignore
from rest_framework.response import Response  # type: ignore


class HotelSearchPagination(BasePagination):
    """Fixed-size pages with a ``{data, pagination}`` envelope.

    Pages past the end yield an empty ``data`` list instead of a 404, and a
    missing or malformed ``page`` parameter means the first page.
    """

    page_query_param = "page"

    def __init__(self) -> None:
        self.page_size: int = settings.HOTEL_SEARCH_PAGE_SIZE
        self.page = 1
        self.total = 0

    def get_page_number(self, request) -> int:  # type: ignore
        raw = request.query_params.get(self.page_query_param, "1")
        try:
            page = int(raw)
        except (TypeError, ValueError):
            return 1
        return page if page > 0 else 1

    def paginate_queryset(self, queryset, request, view=None):  # type: ignore
        self.page = self.get_page_number(request)
        self.total = queryset.count()
        offset = (self.page - 1) * self.page_size
        # huge page numbers overflow the database OFFSET
        if offset >= self.total:
            return []
        return list(queryset[offset:offset + self.page_size])

    def get_paginated_response(self, data):  # type: ignore
        return Response(
            {
                "data": data,
                "pagination": {
                    "total": self.total,
                    "page": self.page,
                    "pages": math.ceil(self.total / self.page_size),
                },
            }
        )

    def get_paginated_response_schema(self, schema):  # type: ignore
        return {
            "type": "object",
            "properties": {
                "data": schema,
                "pagination": {
                    "type": "object",
                    "properties": {
                        "total": {"type": "integer", "example": 12},
                        "page": {"type": "integer", "example": 1},
                        "pages": {"type": "integer", "example": 3},
                    },
                },
            },
        }
