"""
Service-level error taxonomy mapped onto HTTP status codes
"""

from typing import Any, Optional


class ServiceError(Exception):
    """Base class for errors raised by the service layer"""

    status_code = 500
    error_code = "internal"

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidInput(ServiceError):
    status_code = 400
    error_code = "invalid_input"


class Unauthenticated(ServiceError):
    status_code = 401
    error_code = "unauthenticated"


class Forbidden(ServiceError):
    status_code = 403
    error_code = "forbidden"


class NotFound(ServiceError):
    status_code = 404
    error_code = "not_found"

    @classmethod
    def for_resource(cls, resource: str, resource_id: str) -> "NotFound":
        return cls(f"{resource} {resource_id} not found")


class Conflict(ServiceError):
    status_code = 409
    error_code = "conflict"


class Internal(ServiceError):
    status_code = 500
    error_code = "internal"
