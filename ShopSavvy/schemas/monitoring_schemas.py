"""
Monitoring Schedule Schemas

Request and response shapes for scheduling products for periodic refresh.
"""

from enum import Enum
from typing import Optional, Dict, Any
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ShopSavvy.utils.deprecation import warn_deprecated


class MonitoringFrequency(str, Enum):
    """Refresh frequencies accepted by the schedule endpoint"""
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"


class ScheduleRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    identifier: str
    frequency: str
    retailer: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """JSON body with absent optional fields left out"""
        return self.model_dump(exclude_none=True)


class ScheduleResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    message: Optional[str] = None
    identifier: Optional[str] = None
    frequency: Optional[str] = None


class ScheduledProduct(BaseModel):
    """A product currently scheduled for monitoring"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    identifier: str
    frequency: str
    retailer: Optional[str] = None
    created_at: Optional[str] = None
    last_refreshed: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("last_refreshed", "last_updated"),
    )

    @property
    def last_updated(self) -> Optional[str]:
        warn_deprecated("last_updated", "last_refreshed")
        return self.last_refreshed


class RemoveRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    identifier: str

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump()


class RemoveResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    message: Optional[str] = None
    identifier: Optional[str] = None
