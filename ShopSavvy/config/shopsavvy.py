"""
ShopSavvy Data API Configuration

Connection defaults, API key rules and endpoint tables for the ShopSavvy Data API.
Both API revisions are described here so the clients never hard-code paths.
"""

import os
import logging
from dataclasses import dataclass
from typing import Dict, Any, Optional, Tuple

from dotenv import load_dotenv

from ShopSavvy import __version__
from ShopSavvy.clients.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.shopsavvy.com/v1"
DEFAULT_TIMEOUT = 30.0
API_KEY_PREFIXES: Tuple[str, ...] = ("ss_live_", "ss_test_")
USER_AGENT = f"ShopSavvy-Python-SDK/{__version__}"

# ShopSavvy Data API configuration
SHOPSAVVY_CONFIG: Dict[str, Any] = {
    "base_url": DEFAULT_BASE_URL,
    "timeout_seconds": DEFAULT_TIMEOUT,
    "signup_url": "https://shopsavvy.com/data",

    # Sent on every request, next to the Authorization header
    "default_headers": {
        "Content-Type": "application/json",
        "User-Agent": USER_AGENT,
    },
}

# Endpoint paths and identifier parameter names per API revision
ENDPOINTS: Dict[str, Dict[str, str]] = {
    "current": {
        "search": "/products/search",
        "product_details": "/products",
        "offers": "/products/offers",
        "price_history": "/products/history",
        "schedule": "/products/schedule",
        "scheduled": "/products/scheduled",
        "usage": "/usage",
        "identifier_param": "ids",
        "batch_identifier_param": "ids",
    },
    "legacy": {
        "search": "/products/search",
        "product_details": "/products/details",
        "offers": "/products/offers",
        "price_history": "/products/history",
        "schedule": "/products/schedule",
        "scheduled": "/products/scheduled",
        "usage": "/usage",
        "identifier_param": "identifier",
        "batch_identifier_param": "identifiers",
    },
}

# Environment variables read by load_settings_from_env()
ENV_API_KEY = "SHOPSAVVY_API_KEY"
ENV_BASE_URL = "SHOPSAVVY_BASE_URL"
ENV_TIMEOUT = "SHOPSAVVY_TIMEOUT"


@dataclass(frozen=True)
class ClientSettings:
    """Resolved client configuration"""
    api_key: str
    base_url: str = SHOPSAVVY_CONFIG["base_url"]
    timeout: float = SHOPSAVVY_CONFIG["timeout_seconds"]


def validate_api_key(api_key: Optional[str]) -> str:
    """
    Validate the shape of a ShopSavvy API key

    Args:
        api_key: Key as supplied by the caller

    Returns:
        The key, unchanged

    Raises:
        ConfigurationError: If the key is empty or lacks a live/test prefix
    """
    if not api_key or not api_key.strip():
        raise ConfigurationError(
            f"API key is required. Get one at {SHOPSAVVY_CONFIG['signup_url']}"
        )

    if not api_key.startswith(API_KEY_PREFIXES):
        raise ConfigurationError(
            "Invalid API key format. API keys should start with "
            + " or ".join(API_KEY_PREFIXES)
        )

    return api_key


def load_settings_from_env() -> ClientSettings:
    """
    Build client settings from the environment (and a .env file if present)

    Raises:
        ConfigurationError: If the key is missing/malformed or the timeout is not a number
    """
    load_dotenv()

    api_key = validate_api_key(os.getenv(ENV_API_KEY))
    base_url = os.getenv(ENV_BASE_URL) or SHOPSAVVY_CONFIG["base_url"]

    raw_timeout = os.getenv(ENV_TIMEOUT)
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigurationError(f"{ENV_TIMEOUT} must be a number of seconds, got {raw_timeout!r}")
    else:
        timeout = SHOPSAVVY_CONFIG["timeout_seconds"]

    logger.debug(f"Loaded ShopSavvy settings from environment (base_url={base_url}, timeout={timeout})")
    return ClientSettings(api_key=api_key, base_url=base_url, timeout=timeout)
