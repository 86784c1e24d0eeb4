from typing import Any, Optional


class DailyDietError(Exception):
    """Base class for errors raised by services and request dependencies.

    Attributes:
        message: human-readable message
        details: optional extra context (field errors, validation info)
        code: machine-readable error code used in the response envelope
        http_status: HTTP status code the exception handlers respond with
    """

    http_status = 500
    default_message = "Internal error"
    default_code = "INTERNAL_SERVER_ERROR"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Any] = None,
        code: Optional[str] = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(DailyDietError):
    """Raised when input is malformed or a precondition for a service call is not met."""

    http_status = 422
    default_message = "Invalid input"
    default_code = "SERVICE_VALIDATION_ERROR"


class NotFoundError(DailyDietError):
    """Raised when a requested resource does not exist or is not visible to the caller."""

    http_status = 404
    default_message = "Not found"
    default_code = "NOT_FOUND"
