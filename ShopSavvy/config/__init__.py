"""
Configuration Module

Defaults, API key validation and endpoint tables for the ShopSavvy Data API.
"""

from .shopsavvy import (
    API_KEY_PREFIXES,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ENDPOINTS,
    SHOPSAVVY_CONFIG,
    USER_AGENT,
    ClientSettings,
    load_settings_from_env,
    validate_api_key,
)

__all__ = [
    "API_KEY_PREFIXES",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "ENDPOINTS",
    "SHOPSAVVY_CONFIG",
    "USER_AGENT",
    "ClientSettings",
    "load_settings_from_env",
    "validate_api_key",
]
