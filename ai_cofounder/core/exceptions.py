"""
Custom exceptions for the application.

Caller mistakes (ValidationError, ResourceNotFoundError, ...) are reported to
the client. Provider-side failures (LLMProviderError and subclasses) never
leave the AI gateway: they trigger the next provider or the mock fallback.
"""

from typing import Optional, Dict, Any


class AppException(Exception):
    """
    Base exception for all application errors.

    Subclasses set `code` and `status_code`; the API exception handler
    renders `to_dict()` with that status.
    """

    code: str = "UNKNOWN_ERROR"
    status_code: int = 500

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details
            }
        }


class ConfigurationError(AppException):
    """A required setting (usually an API key) is missing or invalid."""

    code = "CONFIGURATION_ERROR"


class LLMProviderError(AppException):
    """A call to an LLM provider failed."""

    code = "LLM_PROVIDER_ERROR"
    status_code = 502

    def __init__(
        self,
        message: str,
        provider: str,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(
            message,
            details={"provider": provider, **(details or {})},
            original_error=original_error
        )
        self.provider = provider


class ProviderResponseError(LLMProviderError):
    """A provider reply is not valid JSON or breaks the key contract."""

    code = "PROVIDER_RESPONSE_ERROR"

    def __init__(
        self,
        message: str,
        provider: str,
        raw_excerpt: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(
            message,
            provider=provider,
            details={"raw_excerpt": raw_excerpt},
            original_error=original_error
        )


class ValidationError(AppException):
    """Input rejected by a service (bad skill list, unknown type, ...)."""

    code = "VALIDATION_ERROR"
    status_code = 400

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details={"field": field, **(details or {})})
        self.field = field


class AuthenticationError(AppException):
    code = "AUTHENTICATION_ERROR"
    status_code = 401

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details=details)


class ConflictError(AppException):
    """The resource already exists (e.g. a registered email)."""

    code = "CONFLICT"
    status_code = 409


class ResourceNotFoundError(AppException):
    """No resource with that id, or it belongs to another user."""

    code = "RESOURCE_NOT_FOUND"
    status_code = 404

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            f"{resource_type} with id '{resource_id}' not found",
            details={
                "resource_type": resource_type,
                "resource_id": resource_id,
                **(details or {})
            }
        )


class ShareLinkExpiredError(AppException):
    """A pitch deck share link is past its expiry."""

    code = "SHARE_LINK_EXPIRED"
    status_code = 410
