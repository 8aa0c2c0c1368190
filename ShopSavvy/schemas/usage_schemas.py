"""
Usage Schemas

Billing-period counters returned by the usage endpoint. The first API revision
returned the counters flat on the usage object; they are folded into
``current_period`` on decode and remain reachable through deprecated properties.
"""

from typing import Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, model_validator

from ShopSavvy.utils.deprecation import warn_deprecated

# Flat first-revision key -> UsagePeriod field
LEGACY_PERIOD_FIELDS: Dict[str, str] = {
    "credits_used": "credits_used",
    "credits_remaining": "credits_remaining",
    "credits_limit": "credits_limit",
    "current_period_start": "start_date",
    "current_period_end": "end_date",
}


class UsagePeriod(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_date: Optional[str] = None
    end_date: Optional[str] = None
    credits_used: Optional[int] = None
    credits_limit: Optional[int] = None
    credits_remaining: Optional[int] = None
    requests_made: Optional[int] = None


class UsageInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_period: UsagePeriod
    usage_percentage: Optional[float] = None
    reset_date: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _fold_legacy_period(cls, values: Any) -> Any:
        if not isinstance(values, dict) or "current_period" in values:
            return values

        values = dict(values)
        values["current_period"] = {
            period_field: values.get(legacy_key)
            for legacy_key, period_field in LEGACY_PERIOD_FIELDS.items()
            if values.get(legacy_key) is not None
        }
        return values

    @model_validator(mode="after")
    def _derive_usage_percentage(self) -> "UsageInfo":
        # Counters are coerced to int by now; the model is frozen so bypass __setattr__
        if self.usage_percentage is None:
            used = self.current_period.credits_used
            limit = self.current_period.credits_limit
            if used is not None and limit:
                object.__setattr__(self, "usage_percentage", round(used / limit * 100, 2))
        return self

    @property
    def credits_used(self) -> Optional[int]:
        warn_deprecated("credits_used", "current_period.credits_used")
        return self.current_period.credits_used

    @property
    def credits_remaining(self) -> Optional[int]:
        warn_deprecated("credits_remaining", "current_period.credits_remaining")
        return self.current_period.credits_remaining

    @property
    def credits_limit(self) -> Optional[int]:
        warn_deprecated("credits_limit", "current_period.credits_limit")
        return self.current_period.credits_limit

    @property
    def current_period_start(self) -> Optional[str]:
        warn_deprecated("current_period_start", "current_period.start_date")
        return self.current_period.start_date

    @property
    def current_period_end(self) -> Optional[str]:
        warn_deprecated("current_period_end", "current_period.end_date")
        return self.current_period.end_date
