# 📄 File: plantscan/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types the plant scanner uses to communicate
# what went wrong (missing keys, no photo, a service that didn't answer) in a clear way.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy with HTTP status codes, machine-readable error codes
# and detail payloads, serialized by the application exception handler.
# 🔗 Dependencies:
# FastAPI HTTP status constants, typing
# 🔄 Connected Modules / Calls From:
# Shared API client, external service clients, scan controller, plantscan.main exception handler

from typing import Any, Dict, Optional
from fastapi import status


def _with_fields(details: Optional[Dict[str, Any]], **fields) -> Dict[str, Any]:
    """Copy ``details`` and add every field that has a value."""
    merged = dict(details or {})
    merged.update({key: value for key, value in fields.items() if value not in (None, "", [])})
    return merged


class PlantScanException(Exception):
    """
    Base exception class for the plant scanner.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }


# =============================================================================
# INPUT EXCEPTIONS
# =============================================================================

class ValidationError(PlantScanException):
    """Input that does not meet a constraint (e.g. an unsupported locale code)."""

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=_with_fields(
                details,
                field=field,
                value=None if value is None else str(value),
                constraint=constraint,
            ),
            error_code="VALIDATION_ERROR"
        )


class NotFoundError(PlantScanException):
    """Revoked previews, unknown suggestion indexes."""

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=_with_fields(details, resource_type=resource_type, resource_id=resource_id),
            error_code="NOT_FOUND"
        )


class InvalidFileTypeError(PlantScanException):
    """The uploaded file is empty or not a supported image."""

    def __init__(
        self,
        message: str = "Invalid or unsupported file type",
        filename: Optional[str] = None,
        expected_types: Optional[list] = None,
        actual_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=_with_fields(
                details, filename=filename, expected_types=expected_types, actual_type=actual_type
            ),
            error_code="INVALID_FILE_TYPE"
        )


class FileTooLargeError(PlantScanException):
    def __init__(
        self,
        message: str = "Uploaded file is too large",
        max_size_mb: Optional[float] = None,
        actual_size_mb: Optional[float] = None,
        filename: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            details=_with_fields(
                details, max_size_mb=max_size_mb, actual_size_mb=actual_size_mb, filename=filename
            ),
            error_code="FILE_TOO_LARGE"
        )


# =============================================================================
# EXTERNAL SERVICE EXCEPTIONS
# =============================================================================

class ExternalAPIError(PlantScanException):
    """
    A third-party service (Plant.id, Perenual, Wikipedia) failed.

    ``api_status_code`` is the remote HTTP status, or ``None`` when the
    request never got an answer (connection error, timeout).
    """

    def __init__(
        self,
        message: str = "External API error",
        api_name: Optional[str] = None,
        api_status_code: Optional[int] = None,
        api_response: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.api_name = api_name
        self.api_status_code = api_status_code
        super().__init__(
            message=message,
            status_code=status.HTTP_502_BAD_GATEWAY,
            details=_with_fields(
                details, api_name=api_name, api_status_code=api_status_code, api_response=api_response
            ),
            error_code="EXTERNAL_API_ERROR"
        )


class APITimeoutError(ExternalAPIError):
    def __init__(self, api_name: str, timeout_seconds: float = 30):
        super().__init__(
            message=f"{api_name} API request timed out after {timeout_seconds} seconds",
            api_name=api_name,
            details={"timeout_seconds": timeout_seconds}
        )


class APIAuthenticationError(ExternalAPIError):
    """The service rejected our key (401/403)."""

    def __init__(self, api_name: str, api_status_code: Optional[int] = None):
        super().__init__(
            message=f"Authentication failed for {api_name} API",
            api_name=api_name,
            api_status_code=api_status_code
        )


class PlantIdentificationError(ExternalAPIError):
    """The identification response has a shape we cannot use."""

    def __init__(
        self,
        message: str = "Plant identification failed",
        provider: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message=message, api_name=provider or "plant_id", details=details)


# =============================================================================
# SCAN PRECONDITION EXCEPTIONS
# =============================================================================

class MissingCredentialsError(PlantScanException):
    """
    Raised when an identification starts without both service keys.
    The message is the localized text shown on the error panel.
    """

    def __init__(self, message: str, missing: Optional[list] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details={"missing": missing or []},
            error_code="MISSING_CREDENTIALS"
        )


class NoImageSelectedError(PlantScanException):
    """Raised when an identification starts before an image was captured."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code="NO_IMAGE_SELECTED"
        )


def exception_to_dict(exception: Exception) -> Dict[str, Any]:
    """Serialize any exception in the ``{"error": {...}}`` response shape."""
    if isinstance(exception, PlantScanException):
        return exception.to_dict()

    return {
        "error": {
            "code": exception.__class__.__name__.upper(),
            "message": str(exception),
            "details": {},
            "status_code": 500
        }
    }
