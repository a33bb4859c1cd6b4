"""
Custom exceptions for the application
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.core.config import settings
from app.core.logging import log


class BaseAPIException(HTTPException):
    """Base exception for API errors"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "Internal server error"
    headers: Optional[Dict[str, str]] = None

    def __init__(
        self,
        detail: Optional[str] = None,
        details: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        **kwargs
    ):
        super().__init__(status_code=self.status_code, detail=detail or self.detail, headers=headers or self.headers)
        # Human readable explanation shown next to the error
        self.details = details
        # Store any additional context
        self.context = kwargs


class BadRequestError(BaseAPIException):
    """Bad request"""

    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Bad request"


class NotFoundError(BaseAPIException):
    """Resource not found"""

    status_code = status.HTTP_404_NOT_FOUND
    detail = "Resource not found"


class ConflictError(BaseAPIException):
    """Conflict with existing resource"""

    status_code = status.HTTP_409_CONFLICT
    detail = "Resource conflict"


class DatabaseError(BaseAPIException):
    """Database operation error"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Database error"


class StorageError(BaseAPIException):
    """Object storage error"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Storage error"


# Error response model for OpenAPI documentation
class ErrorResponse(BaseModel):
    """Standard error response"""

    error: str
    details: Optional[str] = None


def error_content(error: str, details: Optional[str] = None) -> Dict[str, Any]:
    content: Dict[str, Any] = {"error": error}
    if details:
        content["details"] = details
    return content


# Exception handlers
async def handle_api_exception(request: Request, exc: BaseAPIException) -> JSONResponse:
    """Handle API exceptions with structured response"""
    if exc.status_code >= 500:
        log.error(
            "Request failed",
            path=request.url.path,
            method=request.method,
            error=exc.detail,
            details=exc.details,
            **exc.context
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_content(exc.detail, exc.details),
        headers=getattr(exc, "headers", None),
    )


async def handle_validation_exception(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are reported as bad requests"""
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_content("Invalid request", "; ".join(messages)),
    )


async def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions"""
    # Log the full exception
    log.opt(exception=exc).error("Unexpected error", path=request.url.path, method=request.method)

    # Don't expose internal errors in production
    if settings.DEBUG:
        detail = str(exc)
    else:
        detail = "An unexpected error occurred"

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_content("Internal server error", detail),
    )
