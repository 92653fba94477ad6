"""API error types

Use case errors are raised as ApiError subclasses from the routes and turned
into JSON responses by the handlers registered in create_app.
"""

from typing import Optional
from fastapi import status
from libs.result import Error


class ApiError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, error: Error, status_code: Optional[int] = None):
        super().__init__(error.message)
        self.error = error
        if status_code is not None:
            self.status_code = status_code


class ClientError(ApiError):
    """The request cannot be served as sent (4xx)"""

    status_code = status.HTTP_400_BAD_REQUEST


class ServerError(ApiError):
    """The request was valid but the service failed (5xx)"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(error: Error, include_reason: bool) -> dict:
    """
    Build the JSON envelope for a failed request

    Diagnostic detail (reason) is only exposed outside production.
    """
    payload = {"code": error.code, "message": error.message}
    if error.details:
        payload["details"] = error.details
    if include_reason and error.reason:
        payload["reason"] = error.reason
    return {"success": False, "message": error.message, "error": payload}
