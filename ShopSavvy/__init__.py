"""
ShopSavvy - Python client for the ShopSavvy Data API
"""

__version__ = "1.0.0"

from .clients import (  # noqa: E402
    ShopSavvyClient,
    LegacyShopSavvyClient,
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

__all__ = [
    "__version__",
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
    "ConfigurationError",
]
