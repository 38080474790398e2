from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class APIError(HTTPException):
    def __init__(self, status_code: int, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(status_code=status_code, detail=message)
        self.code = code
        self.details = details


class NotFoundError(APIError):
    def __init__(self, message: str = "Not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(status.HTTP_404_NOT_FOUND, "NOT_FOUND", message, details)


class ValidationError(APIError):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", message, details)


class RequestValidationFailed(ValidationError):
    """Raised before any backend call when a flow request is missing a required field."""

    def __init__(self, field: str, reason: str):
        super().__init__(f"Invalid value for '{field}'.", {"field": field, "reason": reason})
        self.field = field


class ConsentRequiredError(APIError):
    def __init__(self, message: str = "Telemetry consent is required for trip uploads."):
        super().__init__(status.HTTP_403_FORBIDDEN, "CONSENT_REQUIRED", message)


class ConflictError(APIError):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(status.HTTP_409_CONFLICT, "CONFLICT", message, details)


class FlowFailedError(APIError):
    """Generic failure of a generation flow; the cause is logged, never shown."""

    def __init__(self, flow_name: str, message: str):
        super().__init__(status.HTTP_502_BAD_GATEWAY, "FLOW_FAILED", message, {"flow": flow_name})
        self.flow_name = flow_name


def error_content(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return {"error": {"code": code, "message": message, "details": details}}
