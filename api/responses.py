"""
Standardized API response models.
Documents the error envelope produced by api.middleware and the health payload.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field
from datetime import datetime


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[Any] = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    timestamp: datetime = Field(..., description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")


# OpenAPI documentation for the errors every session-guarded route can return
SESSION_ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "User, session or resource not found"},
    422: {"model": ErrorResponse, "description": "Request validation failed"},
}
