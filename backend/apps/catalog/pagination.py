from typing import Any, Dict, Optional, Type

from rest_framework import serializers
from rest_framework.utils.urls import replace_query_param

from apps.common.repository import Page

PAGE_QUERY_PARAM = "page"
SIZE_QUERY_PARAM = "size"


def _page_link(request, page: Page, number: int) -> Optional[str]:
    if request is None:
        return None
    url = replace_query_param(
        request.build_absolute_uri(), SIZE_QUERY_PARAM, page.size
    )
    return replace_query_param(url, PAGE_QUERY_PARAM, number)


def paginated_payload(
    page: Page, serializer_class: Type[serializers.Serializer], request=None
) -> Dict[str, Any]:
    """Render a zero-based ``Page`` of DTOs with navigation links."""
    return {
        "count": page.total,
        "page": page.page,
        "size": page.size,
        "totalPages": page.total_pages,
        "next": _page_link(request, page, page.page + 1) if page.has_next else None,
        "previous": (
            _page_link(request, page, page.page - 1) if page.has_previous else None
        ),
        "results": serializer_class(page.items, many=True).data,
    }
