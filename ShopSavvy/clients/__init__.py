"""
API Client Layer for ShopSavvy

Transport, error taxonomy and the typed ShopSavvy Data API clients.
"""

from .exceptions import (
    ShopSavvyError,
    NetworkError,
    RequestTimeoutError,
    AuthenticationError,
    NotFoundError,
    ValidationError,
    RateLimitError,
    APIError,
    DecodingError,
    ConfigurationError
)
from .base_client import BaseAPIClient, RawResponse, HTTPMethod
from .rest_client import RESTClient
from .shopsavvy_client import ShopSavvyClient
from .legacy_client import LegacyShopSavvyClient

__all__ = [
    "BaseAPIClient",
    "RawResponse",
    "HTTPMethod",
    "RESTClient",
    "ShopSavvyClient",
    "LegacyShopSavvyClient",
    "ShopSavvyError",
    "NetworkError",
    "RequestTimeoutError",
    "AuthenticationError",
    "NotFoundError",
    "ValidationError",
    "RateLimitError",
    "APIError",
    "DecodingError",
    "ConfigurationError"
]
