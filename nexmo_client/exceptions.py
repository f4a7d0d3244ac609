"""
Nexmo Client Exceptions
=======================
Errors raised by the SMS and Numbers resources.

Transport failures (``httpx.HTTPError``) and response decode failures
(``pydantic.ValidationError``) are not wrapped and reach the caller as-is.
"""

from typing import Optional, Any


class NexmoError(Exception):
    """Base exception for all errors raised by this library."""
    def __init__(self, message: str, status_code: Optional[int] = None, details: Any = None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class ValidationError(NexmoError, ValueError):
    """Raised before any network call when a request is missing required fields."""
    pass


class ProviderError(NexmoError):
    """Raised when the provider rejects a request with an unexpected HTTP status."""
    pass


class AuthenticationError(ProviderError):
    """Raised when the provider rejects the API key/secret (401)."""
    pass


class BadParametersError(ProviderError):
    """Raised when the provider rejects the request parameters (420)."""
    pass
