"""
API Client Exceptions

Closed error taxonomy for ShopSavvy Data API calls. Every runtime failure of a
request surfaces as one of the ShopSavvyError subclasses below; invalid client
configuration raises ConfigurationError instead, which is not part of that
hierarchy.
"""

from typing import Optional, Dict, Any


class ShopSavvyError(Exception):
    """Base exception for all ShopSavvy API errors"""

    label = "ShopSavvy error"
    failure_reason = "The ShopSavvy API request failed"
    recovery_suggestion = "Check the API documentation or contact support"

    def __init__(self, message: str, status_code: Optional[int] = None,
                 response_data: Optional[Dict[str, Any]] = None,
                 server_message: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.server_message = server_message

    def __str__(self) -> str:
        return f"{self.label}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for display or structured logging."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
            "server_message": self.server_message,
            "failure_reason": self.failure_reason,
            "recovery_suggestion": self.recovery_suggestion,
        }


class NetworkError(ShopSavvyError):
    """Raised when no HTTP response could be obtained"""

    label = "Network error"
    failure_reason = "A network connectivity issue occurred"
    recovery_suggestion = "Check your internet connection and try again"

    def __init__(self, message: str = "Network error", **kwargs):
        super().__init__(message, **kwargs)


class RequestTimeoutError(NetworkError):
    """Raised when a request exceeds the configured timeout"""

    def __init__(self, message: str = "Request timeout",
                 timeout_duration: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.timeout_duration = timeout_duration


class AuthenticationError(ShopSavvyError):
    """Raised on HTTP 401"""

    label = "Authentication error"
    failure_reason = "Invalid API key or authentication failed"
    recovery_suggestion = "Verify your API key is correct and active"

    def __init__(self, message: str = "Authentication failed. Check your API key.", **kwargs):
        kwargs.setdefault("status_code", 401)
        super().__init__(message, **kwargs)


class NotFoundError(ShopSavvyError):
    """Raised on HTTP 404"""

    label = "Not found"
    failure_reason = "The requested resource was not found"
    recovery_suggestion = "Check that the requested resource exists"

    def __init__(self, message: str = "Resource not found", **kwargs):
        kwargs.setdefault("status_code", 404)
        super().__init__(message, **kwargs)


class ValidationError(ShopSavvyError):
    """Raised on HTTP 422"""

    label = "Validation error"
    failure_reason = "The request parameters failed validation"
    recovery_suggestion = "Review your request parameters and try again"

    def __init__(self, message: str = "Request validation failed. Check your parameters.", **kwargs):
        kwargs.setdefault("status_code", 422)
        super().__init__(message, **kwargs)


class RateLimitError(ShopSavvyError):
    """Raised on HTTP 429"""

    label = "Rate limit error"
    failure_reason = "Too many requests sent in a given time period"
    recovery_suggestion = "Wait a moment before making another request"

    def __init__(self, message: str = "Rate limit exceeded. Please slow down your requests.",
                 retry_after: Optional[int] = None, **kwargs):
        kwargs.setdefault("status_code", 429)
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class APIError(ShopSavvyError):
    """Raised for any other non-2xx status"""

    label = "API error"
    failure_reason = "The API returned an error response"
    recovery_suggestion = "Check the API documentation or contact support"


class DecodingError(ShopSavvyError):
    """Raised when a 2xx body cannot be decoded into the expected type"""

    label = "Decoding error"
    failure_reason = "Failed to decode the API response"
    recovery_suggestion = "This may be a temporary issue, try again later"

    def __init__(self, message: str = "Failed to decode response",
                 expected_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.expected_type = expected_type


class ConfigurationError(ValueError):
    """
    Raised when a client is constructed with invalid configuration.

    This is a programming error (e.g. a malformed API key) that can never
    succeed at request time, so it is kept outside the ShopSavvyError
    hierarchy and should not be caught alongside request failures.
    """

    def __init__(self, message: str = "Configuration error"):
        super().__init__(message)
        self.message = message
