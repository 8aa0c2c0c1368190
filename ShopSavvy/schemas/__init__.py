"""
Typed request and response shapes for the ShopSavvy Data API.
"""

from .response import ApiResponse, ApiMeta, PaginationInfo
from .product_schemas import (
    ProductDetails,
    ProductWithOffers,
    Offer,
    OfferWithHistory,
    PriceHistoryEntry,
    PricePoint,
)
from .monitoring_schemas import (
    MonitoringFrequency,
    ScheduleRequest,
    ScheduleResponse,
    ScheduledProduct,
    RemoveRequest,
    RemoveResponse,
)
from .usage_schemas import UsageInfo, UsagePeriod

__all__ = [
    "ApiResponse",
    "ApiMeta",
    "PaginationInfo",
    "ProductDetails",
    "ProductWithOffers",
    "Offer",
    "OfferWithHistory",
    "PriceHistoryEntry",
    "PricePoint",
    "MonitoringFrequency",
    "ScheduleRequest",
    "ScheduleResponse",
    "ScheduledProduct",
    "RemoveRequest",
    "RemoveResponse",
    "UsageInfo",
    "UsagePeriod",
]
