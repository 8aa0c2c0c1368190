"""
Tests for the ShopSavvy error taxonomy
"""

import pytest

from ShopSavvy.clients.exceptions import (
    ShopSavvyError,
    NetworkError,
    RequestTimeoutError,
    AuthenticationError,
    NotFoundError,
    ValidationError,
    RateLimitError,
    APIError,
    DecodingError,
    ConfigurationError,
)


class TestErrorDescriptions:
    """Each error kind renders its own label, cause and recovery hint"""

    @pytest.mark.parametrize("error, label", [
        (NetworkError("Connection failed"), "Network error"),
        (AuthenticationError("Invalid key"), "Authentication error"),
        (NotFoundError("Product not found"), "Not found"),
        (ValidationError("Invalid parameters"), "Validation error"),
        (RateLimitError("Too many requests"), "Rate limit error"),
        (APIError("HTTP 500: boom"), "API error"),
        (DecodingError("bad json"), "Decoding error"),
    ])
    def test_str_includes_label(self, error, label):
        assert str(error) == f"{label}: {error.message}"

    def test_failure_reasons_and_recovery(self):
        """Test cause and recovery suggestions match the error kind"""
        assert NetworkError().failure_reason == "A network connectivity issue occurred"
        assert NetworkError().recovery_suggestion == "Check your internet connection and try again"
        assert AuthenticationError().recovery_suggestion == "Verify your API key is correct and active"
        assert NotFoundError().recovery_suggestion == "Check that the requested resource exists"
        assert ValidationError().recovery_suggestion == "Review your request parameters and try again"
        assert RateLimitError().recovery_suggestion == "Wait a moment before making another request"
        assert APIError("x").recovery_suggestion == "Check the API documentation or contact support"
        assert DecodingError().recovery_suggestion == "This may be a temporary issue, try again later"

    def test_default_messages_and_status_codes(self):
        assert AuthenticationError().message == "Authentication failed. Check your API key."
        assert AuthenticationError().status_code == 401
        assert NotFoundError().message == "Resource not found"
        assert NotFoundError().status_code == 404
        assert ValidationError().message == "Request validation failed. Check your parameters."
        assert ValidationError().status_code == 422
        assert RateLimitError().message == "Rate limit exceeded. Please slow down your requests."
        assert RateLimitError().status_code == 429

    def test_to_dict(self):
        error = APIError("HTTP 503: Unavailable", status_code=503, server_message="Unavailable")
        as_dict = error.to_dict()

        assert as_dict["error"] == "APIError"
        assert as_dict["status_code"] == 503
        assert as_dict["server_message"] == "Unavailable"
        assert as_dict["failure_reason"] == "The API returned an error response"


class TestErrorHierarchy:
    """Request failures share a base class; configuration errors do not"""

    @pytest.mark.parametrize("error_class", [
        NetworkError, AuthenticationError, NotFoundError, ValidationError,
        RateLimitError, APIError, DecodingError,
    ])
    def test_request_errors_are_shopsavvy_errors(self, error_class):
        assert issubclass(error_class, ShopSavvyError)

    def test_timeout_is_a_network_error(self):
        error = RequestTimeoutError("Request timeout after 5 seconds", timeout_duration=5)
        assert isinstance(error, NetworkError)
        assert error.timeout_duration == 5
        assert str(error).startswith("Network error:")

    def test_configuration_error_is_separate(self):
        assert not issubclass(ConfigurationError, ShopSavvyError)
        assert issubclass(ConfigurationError, ValueError)

    def test_rate_limit_retry_after(self):
        assert RateLimitError(retry_after=30).retry_after == 30
        assert RateLimitError().retry_after is None
