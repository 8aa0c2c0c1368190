"""
REST API Client Implementation

Concrete implementation of BaseAPIClient over httpx. Each call is a single
round trip: no retries, no backoff, no caching.
"""

import json
from typing import Dict, Any, Optional
import httpx
import logging

from .base_client import BaseAPIClient, RawResponse, HTTPMethod
from .exceptions import (
    ShopSavvyError,
    NetworkError,
    RequestTimeoutError,
    AuthenticationError,
    NotFoundError,
    ValidationError,
    RateLimitError,
    APIError,
    ConfigurationError,
)

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"


class RESTClient(BaseAPIClient):
    """
    REST API client mapping HTTP failures onto the ShopSavvy error taxonomy
    """

    def __init__(self,
                 base_url: str,
                 api_key: Optional[str] = None,
                 auth_header_name: str = "Authorization",
                 auth_prefix: str = "Bearer",
                 timeout: float = 30,
                 custom_headers: Optional[Dict[str, str]] = None,
                 verify_ssl: bool = True,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize REST API client

        Args:
            base_url: Base URL for the API
            api_key: API key for authentication
            auth_header_name: Name of authentication header (default: Authorization)
            auth_prefix: Prefix for auth header value (default: Bearer)
            timeout: Request timeout in seconds
            custom_headers: Additional headers to include in requests
            verify_ssl: Whether to verify SSL certificates
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)

        Raises:
            ConfigurationError: If base URL or timeout are invalid
        """
        super().__init__(
            base_url=base_url,
            api_key=api_key,
            timeout=timeout,
            custom_headers=custom_headers
        )

        self.auth_header_name = auth_header_name
        self.auth_prefix = auth_prefix
        self.verify_ssl = verify_ssl

        self.validate_configuration()

        # HTTP client configuration
        self.client_config: Dict[str, Any] = {
            "timeout": httpx.Timeout(timeout),
            "verify": verify_ssl,
            "follow_redirects": True
        }
        if transport is not None:
            self.client_config["transport"] = transport

    async def request(self,
                      method: HTTPMethod,
                      endpoint: str,
                      params: Optional[Dict[str, Any]] = None,
                      data: Optional[Dict[str, Any]] = None,
                      headers: Optional[Dict[str, str]] = None) -> RawResponse:
        """
        Make a single HTTP request and map any failure to a ShopSavvyError
        """
        url = self._build_url(endpoint)
        merged_headers = self._merge_headers(headers)

        if params:
            params = {key: value for key, value in params.items() if value is not None}

        json_data = None
        if data is not None:
            json_data = data
            merged_headers.setdefault("Content-Type", "application/json")

        self.logger.debug(f"Making {method.value} request to {url}")

        try:
            async with httpx.AsyncClient(**self.client_config) as client:
                response = await client.request(
                    method=method.value,
                    url=url,
                    params=params or None,
                    json=json_data,
                    headers=merged_headers
                )
        except httpx.TimeoutException as e:
            self.logger.warning(f"Request to {url} timed out after {self.timeout} seconds")
            raise RequestTimeoutError(
                f"Request timeout after {self.timeout} seconds",
                timeout_duration=self.timeout
            ) from e
        except httpx.HTTPError as e:
            self.logger.warning(f"Network error calling {url}: {e}")
            raise NetworkError(str(e) or e.__class__.__name__) from e

        return self._process_response(response)

    def _process_response(self, response: httpx.Response) -> RawResponse:
        """
        Return the raw body for 2xx responses, raise the mapped error otherwise
        """
        status = response.status_code
        self.logger.debug(f"Received response: {status}")

        if 200 <= status <= 299:
            return RawResponse(
                status_code=status,
                raw_content=response.text,
                headers=dict(response.headers)
            )

        response_data = self._parse_error_body(response.text)
        server_message = response_data.get("error")
        if not isinstance(server_message, str):
            server_message = UNKNOWN_ERROR

        error = self._map_status_error(status, server_message, response_data, response.headers)
        self.logger.warning(f"ShopSavvy API returned {status}: {server_message}")
        raise error

    @staticmethod
    def _parse_error_body(text: str) -> Dict[str, Any]:
        try:
            parsed = json.loads(text) if text else {}
        except json.JSONDecodeError:
            return {}
        return parsed if isinstance(parsed, dict) else {}

    @staticmethod
    def _map_status_error(status: int, server_message: str,
                          response_data: Dict[str, Any],
                          response_headers: httpx.Headers) -> ShopSavvyError:
        """Map a non-2xx status code onto the error taxonomy"""
        context = {"response_data": response_data, "server_message": server_message}

        if status == 401:
            return AuthenticationError(**context)

        elif status == 404:
            return NotFoundError(**context)

        elif status == 422:
            return ValidationError(**context)

        elif status == 429:
            retry_after = response_headers.get("Retry-After")
            retry_after_int = int(retry_after) if retry_after and retry_after.isdigit() else None
            return RateLimitError(retry_after=retry_after_int, **context)

        else:
            return APIError(f"HTTP {status}: {server_message}", status_code=status, **context)

    def get_authentication_headers(self) -> Dict[str, str]:
        """
        Get authentication headers for requests
        """
        headers = {}

        if self.api_key:
            if self.auth_prefix:
                headers[self.auth_header_name] = f"{self.auth_prefix} {self.api_key}"
            else:
                headers[self.auth_header_name] = self.api_key

        return headers

    def validate_configuration(self) -> None:
        """
        Validate client configuration

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not self.base_url:
            raise ConfigurationError("Base URL is required")

        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigurationError("Base URL must start with http:// or https://")

        if self.timeout <= 0:
            raise ConfigurationError("Timeout must be positive")
