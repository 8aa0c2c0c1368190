"""
Base API Client Interface

Abstract base class defining the contract for HTTP clients in the ShopSavvy SDK.
Provides URL building, header merging and verb helpers on top of a single
abstract request routine.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional
from dataclasses import dataclass
from enum import Enum
import logging

logger = logging.getLogger(__name__)


class HTTPMethod(Enum):
    """HTTP methods used by the ShopSavvy Data API"""
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


@dataclass
class RawResponse:
    """Successful HTTP response, not yet decoded"""
    status_code: int
    raw_content: str
    headers: Optional[Dict[str, str]] = None


class BaseAPIClient(ABC):
    """
    Abstract base class for API clients.

    Subclasses provide the transport (``request``) and the authentication
    headers; everything else is shared.
    """

    def __init__(self,
                 base_url: str,
                 api_key: Optional[str] = None,
                 timeout: float = 30,
                 custom_headers: Optional[Dict[str, str]] = None):
        """
        Initialize base API client

        Args:
            base_url: Base URL for the API
            api_key: API key for authentication (if required)
            timeout: Request timeout in seconds
            custom_headers: Additional headers to include in requests
        """
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.timeout = timeout
        self.custom_headers = custom_headers or {}

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    async def request(self,
                      method: HTTPMethod,
                      endpoint: str,
                      params: Optional[Dict[str, Any]] = None,
                      data: Optional[Dict[str, Any]] = None,
                      headers: Optional[Dict[str, str]] = None) -> RawResponse:
        """
        Make an HTTP request to the API

        Args:
            method: HTTP method to use
            endpoint: API endpoint (relative to base_url)
            params: Query parameters
            data: JSON request body
            headers: Additional headers

        Returns:
            RawResponse for a 2xx status

        Raises:
            ShopSavvyError: For any transport or HTTP failure
        """
        pass

    @abstractmethod
    def get_authentication_headers(self) -> Dict[str, str]:
        """
        Get headers required for API authentication

        Returns:
            Dictionary of authentication headers
        """
        pass

    async def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None,
                  headers: Optional[Dict[str, str]] = None) -> RawResponse:
        """Convenience method for GET requests"""
        return await self.request(HTTPMethod.GET, endpoint, params=params, headers=headers)

    async def post(self, endpoint: str, data: Optional[Dict[str, Any]] = None,
                   params: Optional[Dict[str, Any]] = None,
                   headers: Optional[Dict[str, str]] = None) -> RawResponse:
        """Convenience method for POST requests"""
        return await self.request(HTTPMethod.POST, endpoint, params=params,
                                  data=data, headers=headers)

    async def delete(self, endpoint: str, data: Optional[Dict[str, Any]] = None,
                     params: Optional[Dict[str, Any]] = None,
                     headers: Optional[Dict[str, str]] = None) -> RawResponse:
        """Convenience method for DELETE requests (the schedule endpoint takes a body)"""
        return await self.request(HTTPMethod.DELETE, endpoint, params=params,
                                  data=data, headers=headers)

    def _build_url(self, endpoint: str) -> str:
        """Build full URL from endpoint"""
        endpoint = endpoint.lstrip('/')
        return f"{self.base_url}/{endpoint}"

    def _merge_headers(self, additional_headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Merge authentication, custom, and additional headers"""
        headers = {}

        headers.update(self.get_authentication_headers())
        headers.update(self.custom_headers)

        if additional_headers:
            headers.update(additional_headers)

        return headers

    async def __aenter__(self):
        """Async context manager entry"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit - no pooled resources to release"""
        pass
