"""
ShopSavvy Data API Client

Product lookup, search, current offers, price history, monitoring schedules and
usage reporting. Every coroutine is one stateless request/response round trip.

Example:
    async with ShopSavvyClient(api_key="ss_live_your_api_key_here") as client:
        response = await client.get_product_details("012345678901")
        print(response.data.title)
"""

from datetime import date
from functools import lru_cache
from typing import Dict, Any, Optional, List, Union, Sequence, Type
import logging

import httpx
from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from ShopSavvy.config.shopsavvy import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ENDPOINTS,
    SHOPSAVVY_CONFIG,
    load_settings_from_env,
    validate_api_key,
)
from ShopSavvy.schemas.response import ApiResponse
from ShopSavvy.schemas.product_schemas import (
    ProductDetails,
    ProductWithOffers,
    OfferWithHistory,
)
from ShopSavvy.schemas.monitoring_schemas import (
    MonitoringFrequency,
    ScheduleRequest,
    ScheduleResponse,
    ScheduledProduct,
    RemoveRequest,
    RemoveResponse,
)
from ShopSavvy.schemas.usage_schemas import UsageInfo
from .base_client import HTTPMethod
from .exceptions import DecodingError
from .rest_client import RESTClient

logger = logging.getLogger(__name__)

CSV_FORMAT = "csv"

DateLike = Union[str, date]


def join_identifiers(identifiers: Sequence[str]) -> str:
    """Join identifiers into the single comma-separated value batch endpoints expect"""
    return ",".join(identifiers)


def format_date(value: DateLike) -> str:
    """Render a date as YYYY-MM-DD; strings are passed through untouched"""
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return value


@lru_cache(maxsize=None)
def response_adapter(response_type: Any) -> TypeAdapter:
    """Build the TypeAdapter for a response type once and reuse it"""
    return TypeAdapter(response_type)


class ShopSavvyClient(RESTClient):
    """
    Client for the current revision of the ShopSavvy Data API

    Supports:
    - Product search and details (single and batch)
    - Current offers (single and batch)
    - Price history
    - Monitoring schedule management
    - Usage reporting
    """

    api_revision = "current"

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        custom_headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize ShopSavvy Data API client

        Args:
            api_key: ShopSavvy API key (ss_live_... or ss_test_...)
            base_url: API base URL
            timeout: Request timeout in seconds
            custom_headers: Additional headers sent with every request
            transport: Optional httpx transport, mainly for tests

        Raises:
            ConfigurationError: If the API key, base URL or timeout is invalid
        """
        validate_api_key(api_key)

        super().__init__(
            base_url=base_url,
            api_key=api_key,
            timeout=timeout,
            custom_headers=custom_headers,
            transport=transport
        )

        self.endpoints = ENDPOINTS[self.api_revision]

        self.logger.info(f"ShopSavvy API client initialized ({self.api_revision} revision, {self.base_url})")

    @classmethod
    def from_env(cls, **kwargs) -> "ShopSavvyClient":
        """
        Create a client from SHOPSAVVY_API_KEY / SHOPSAVVY_BASE_URL / SHOPSAVVY_TIMEOUT

        Raises:
            ConfigurationError: If the environment does not hold a valid configuration
        """
        settings = load_settings_from_env()
        return cls(
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout,
            **kwargs
        )

    def _merge_headers(self, additional_headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Merge caller headers, then apply the fixed ShopSavvy headers on top"""
        fixed_headers = dict(SHOPSAVVY_CONFIG["default_headers"])
        fixed_headers.update(self.get_authentication_headers())
        fixed_names = {name.lower() for name in fixed_headers}

        headers = {
            name: value
            for name, value in super()._merge_headers(additional_headers).items()
            if name.lower() not in fixed_names
        }
        headers.update(fixed_headers)
        return headers

    # Product search and details

    async def search_products(
        self,
        query: str,
        limit: Optional[int] = None,
        offset: Optional[int] = None
    ) -> ApiResponse[List[ProductDetails]]:
        """
        Search products by keyword

        Pagination counters are returned in ``response.pagination``; further
        pages must be requested explicitly with ``offset``.
        """
        params = {"q": query, "limit": limit, "offset": offset}
        return await self._perform_request(
            self.endpoints["search"],
            ApiResponse[List[ProductDetails]],
            params=params
        )

    async def get_product_details(
        self,
        identifier: str,
        format: Optional[str] = None
    ) -> Union[ApiResponse[ProductDetails], str]:
        """
        Look up product details by identifier

        Args:
            identifier: Barcode, ASIN, URL, model number or ShopSavvy product ID
            format: 'json' or 'csv'; csv returns the raw response text
        """
        params = {self.endpoints["identifier_param"]: identifier, "format": format}
        return await self._perform_request(
            self.endpoints["product_details"],
            self._response_type(ApiResponse[ProductDetails], format),
            params=params
        )

    async def get_product_details_batch(
        self,
        identifiers: Sequence[str],
        format: Optional[str] = None
    ) -> Union[ApiResponse[List[ProductDetails]], str]:
        """
        Look up details for several products in one request

        Identifiers are comma-joined into one parameter; batch size limits are
        enforced by the server only.
        """
        params = {self.endpoints["batch_identifier_param"]: join_identifiers(identifiers), "format": format}
        return await self._perform_request(
            self.endpoints["product_details"],
            self._response_type(ApiResponse[List[ProductDetails]], format),
            params=params
        )

    # Current offers

    async def get_current_offers(
        self,
        identifier: str,
        retailer: Optional[str] = None,
        format: Optional[str] = None
    ) -> Union[ApiResponse[List[ProductWithOffers]], str]:
        """Get current offers for a product, optionally for one retailer"""
        params = {
            self.endpoints["identifier_param"]: identifier,
            "retailer": retailer,
            "format": format,
        }
        return await self._perform_request(
            self.endpoints["offers"],
            self._response_type(ApiResponse[List[ProductWithOffers]], format),
            params=params
        )

    async def get_current_offers_batch(
        self,
        identifiers: Sequence[str],
        retailer: Optional[str] = None,
        format: Optional[str] = None
    ) -> Union[ApiResponse[List[ProductWithOffers]], str]:
        """Get current offers for several products in one request"""
        params = {
            self.endpoints["batch_identifier_param"]: join_identifiers(identifiers),
            "retailer": retailer,
            "format": format,
        }
        return await self._perform_request(
            self.endpoints["offers"],
            self._response_type(ApiResponse[List[ProductWithOffers]], format),
            params=params
        )

    # Price history

    async def get_price_history(
        self,
        identifier: str,
        start_date: DateLike,
        end_date: DateLike,
        retailer: Optional[str] = None,
        format: Optional[str] = None
    ) -> Union[ApiResponse[List[OfferWithHistory]], str]:
        """
        Get offers with their price history

        Args:
            identifier: Product identifier
            start_date: First day (YYYY-MM-DD string or datetime.date)
            end_date: Last day (YYYY-MM-DD string or datetime.date)
            retailer: Optional retailer to filter by
            format: 'json' or 'csv'
        """
        params = {
            self.endpoints["identifier_param"]: identifier,
            "start_date": format_date(start_date),
            "end_date": format_date(end_date),
            "retailer": retailer,
            "format": format,
        }
        return await self._perform_request(
            self.endpoints["price_history"],
            self._response_type(ApiResponse[List[OfferWithHistory]], format),
            params=params
        )

    # Monitoring

    async def schedule_product_monitoring(
        self,
        identifier: str,
        frequency: Union[MonitoringFrequency, str],
        retailer: Optional[str] = None
    ) -> ApiResponse[ScheduleResponse]:
        """
        Schedule periodic refresh of a product

        Args:
            identifier: Product identifier
            frequency: 'hourly', 'daily' or 'weekly'
            retailer: Optional retailer to monitor
        """
        if isinstance(frequency, MonitoringFrequency):
            frequency = frequency.value

        body = ScheduleRequest(identifier=identifier, frequency=frequency, retailer=retailer)
        return await self._perform_request(
            self.endpoints["schedule"],
            ApiResponse[ScheduleResponse],
            method=HTTPMethod.POST,
            body=body.to_payload()
        )

    async def get_scheduled_products(self) -> ApiResponse[List[ScheduledProduct]]:
        """List all products scheduled for monitoring"""
        return await self._perform_request(
            self.endpoints["scheduled"],
            ApiResponse[List[ScheduledProduct]]
        )

    async def remove_product_from_schedule(self, identifier: str) -> ApiResponse[RemoveResponse]:
        """Stop monitoring a product"""
        body = RemoveRequest(identifier=identifier)
        return await self._perform_request(
            self.endpoints["schedule"],
            ApiResponse[RemoveResponse],
            method=HTTPMethod.DELETE,
            body=body.to_payload()
        )

    # Usage

    async def get_usage(self) -> ApiResponse[UsageInfo]:
        """Get current billing period usage and credits"""
        return await self._perform_request(self.endpoints["usage"], ApiResponse[UsageInfo])

    # Dispatch

    @staticmethod
    def _response_type(json_type: Any, format: Optional[str]) -> Any:
        return str if format == CSV_FORMAT else json_type

    async def _perform_request(
        self,
        endpoint: str,
        response_type: Union[Type[Any], Any],
        method: HTTPMethod = HTTPMethod.GET,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None
    ) -> Any:
        """
        Dispatch a request and decode the 2xx body into ``response_type``

        Raises:
            ShopSavvyError: Mapped transport/HTTP failure, or DecodingError
        """
        raw = await self.request(method, endpoint, params=params, data=body)

        if response_type is str:
            return raw.raw_content

        try:
            return response_adapter(response_type).validate_json(raw.raw_content)
        except PydanticValidationError as e:
            type_name = getattr(response_type, "__name__", str(response_type))
            self.logger.warning(f"Could not decode {endpoint} response as {type_name}")
            raise DecodingError(
                f"Failed to decode response: {e}",
                expected_type=type_name,
                status_code=raw.status_code
            ) from e
