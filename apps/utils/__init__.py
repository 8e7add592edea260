from .api_response import (
    api_error,
    api_success,
    api_unauthorized,
    get_pagination_params,
    paginate_queryset,
)
from .objectids import parse_object_id

__all__ = [
    "api_error",
    "api_success",
    "api_unauthorized",
    "get_pagination_params",
    "paginate_queryset",
    "parse_object_id",
]
