"""
Legacy ShopSavvy Data API Client

Speaks the first API revision: product details live under /products/details,
single lookups use the ``identifier`` parameter and batches ``identifiers``,
and batch offers come back keyed by identifier. Kept for integrations that
have not migrated yet; new code should use ShopSavvyClient.
"""

import warnings
from typing import Dict, Optional, List, Union, Sequence

from ShopSavvy.schemas.response import ApiResponse
from ShopSavvy.schemas.product_schemas import Offer
from .shopsavvy_client import ShopSavvyClient, join_identifiers


class LegacyShopSavvyClient(ShopSavvyClient):
    """Deprecated client for the first ShopSavvy Data API revision"""

    api_revision = "legacy"

    def __init__(self, api_key: str, **kwargs):
        warnings.warn(
            "LegacyShopSavvyClient targets the first API revision and is deprecated, "
            "use ShopSavvyClient instead",
            DeprecationWarning,
            stacklevel=2,
        )
        super().__init__(api_key, **kwargs)

    async def get_current_offers(
        self,
        identifier: str,
        retailer: Optional[str] = None,
        format: Optional[str] = None
    ) -> Union[ApiResponse[List[Offer]], str]:
        """Get current offers for a product as a flat list"""
        params = {
            self.endpoints["identifier_param"]: identifier,
            "retailer": retailer,
            "format": format,
        }
        return await self._perform_request(
            self.endpoints["offers"],
            self._response_type(ApiResponse[List[Offer]], format),
            params=params
        )

    async def get_current_offers_batch(
        self,
        identifiers: Sequence[str],
        retailer: Optional[str] = None,
        format: Optional[str] = None
    ) -> Union[ApiResponse[Dict[str, List[Offer]]], str]:
        """Get current offers for several products, keyed by identifier"""
        params = {
            self.endpoints["batch_identifier_param"]: join_identifiers(identifiers),
            "retailer": retailer,
            "format": format,
        }
        return await self._perform_request(
            self.endpoints["offers"],
            self._response_type(ApiResponse[Dict[str, List[Offer]]], format),
            params=params
        )
