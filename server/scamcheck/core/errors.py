"""
Error taxonomy for the classification pipeline.

Each error carries a public message that is safe to return to callers and
private details that only go to the operator log.
"""
from enum import Enum
from typing import Any, Dict, Optional


class ErrorType(str, Enum):
    VALIDATION = "validation"
    UPSTREAM = "upstream"
    FORMAT = "format"


class GatewayError(Exception):
    error_type: ErrorType = ErrorType.UPSTREAM
    status_code: int = 500
    default_message: str = "Internal server error."

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(GatewayError):
    error_type = ErrorType.VALIDATION
    status_code = 400
    default_message = "Text for analysis is required."


class UpstreamError(GatewayError):
    error_type = ErrorType.UPSTREAM
    status_code = 500
    default_message = "AI service is unavailable. Please try again later."


class FormatError(GatewayError):
    error_type = ErrorType.FORMAT
    status_code = 500
    default_message = "AI response format error. Please try again later."


__all__ = ["ErrorType", "GatewayError", "ValidationError", "UpstreamError", "FormatError"]
