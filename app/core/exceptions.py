"""
Custom exception classes for standardized error handling.
"""

from typing import Optional, Dict, Any


class AppException(Exception):
    """Base exception class for application errors."""

    status_code = 500

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code or "APP_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {"error": self.message}


class ValidationError(AppException):
    """Exception raised for validation errors."""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, error_code="VALIDATION_ERROR", details={"field": field, **(details or {})})


class MethodNotAllowedError(AppException):
    """Exception raised when an endpoint is called with an unsupported HTTP method."""

    status_code = 405

    def __init__(self, method: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message="Method not allowed",
            error_code="METHOD_NOT_ALLOWED",
            details={"method": method, **(details or {})},
        )


class AuthorizationError(AppException):
    """Exception raised for authorization failures."""

    status_code = 403

    def __init__(self, message: str = "Access denied", details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, error_code="AUTHORIZATION_ERROR", details=details)


class TurnstileVerificationError(AuthorizationError):
    """Exception raised when Turnstile rejects a challenge token."""

    def __init__(self, error_codes: Optional[list] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message="Turnstile verification failed",
            details={"error_codes": error_codes or [], **(details or {})},
        )


class ExternalServiceError(AppException):
    """Exception raised when external service calls fail."""

    def __init__(self, service: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code="EXTERNAL_SERVICE_ERROR",
            details={"service": service, **(details or {})},
        )


class NotificationError(ExternalServiceError):
    """Exception raised when the chat webhook does not accept a submission."""

    def __init__(self, message: str = "Failed to send message", details: Optional[Dict[str, Any]] = None):
        super().__init__(service="Webhook", message=message, details=details)


class ConfigurationError(AppException):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, config_key: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message, error_code="CONFIGURATION_ERROR", details={"config_key": config_key, **(details or {})}
        )
