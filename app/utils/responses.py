"""
Standardized response utilities
"""

from typing import Any, Optional
from fastapi.responses import JSONResponse

from app.schemas.common import StandardResponse, ErrorResponse
from app.services.errors import ServiceError

def success_response(
    message: str,
    data: Any = None,
    status_code: int = 200
) -> JSONResponse:
    """Create standardized success response"""
    response = StandardResponse(
        success=True,
        message=message,
        data=data
    )
    return JSONResponse(
        content=response.model_dump(),
        status_code=status_code
    )

def error_response(
    message: str,
    error_code: Optional[str] = None,
    details: Any = None,
    status_code: int = 400
) -> JSONResponse:
    """Create standardized error response"""
    response = ErrorResponse(
        error=message,
        error_code=error_code,
        details=details
    )
    return JSONResponse(
        content=response.model_dump(exclude_none=True),
        status_code=status_code
    )

def service_error_response(exc: ServiceError) -> JSONResponse:
    """Render a service-layer error with its mapped status code"""
    return error_response(
        message=exc.message,
        error_code=exc.error_code,
        details=exc.details,
        status_code=exc.status_code
    )
