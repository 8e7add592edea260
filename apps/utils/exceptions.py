from __future__ import annotations

from rest_framework import exceptions, status
from rest_framework.views import exception_handler

from .api_response import api_error, api_unauthorized

def api_exception_handler(exc, context):
    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        return api_unauthorized()

    if isinstance(exc, exceptions.PermissionDenied):
        response = exception_handler(exc, context)
        response.data = {"error": "Forbidden"}
        return response

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.ValidationError):
        return api_error(exc.detail, status_code=status.HTTP_400_BAD_REQUEST)

    detail = getattr(exc, "detail", None)
    return api_error(str(detail) if detail is not None else str(exc), status_code=response.status_code)
