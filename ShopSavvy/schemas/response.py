from typing import Optional, Generic, TypeVar
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

T = TypeVar("T")


class ApiMeta(BaseModel):
    """Metadata returned next to every payload"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    credits_used: Optional[int] = None
    credits_remaining: Optional[int] = None
    rate_limit_remaining: Optional[int] = None
    request_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("request_id", "requestId"),
    )
    timestamp: Optional[str] = None
    cached: Optional[bool] = None


class PaginationInfo(BaseModel):
    """Counters for search-style results; pages are never followed automatically"""
    model_config = ConfigDict(frozen=True)

    total: int
    limit: int
    offset: int
    returned: int


class ApiResponse(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True)

    data: T
    success: Optional[bool] = None
    message: Optional[str] = None
    meta: Optional[ApiMeta] = None
    pagination: Optional[PaginationInfo] = None  # Search results only

    @property
    def credits_used(self) -> Optional[int]:
        return self.meta.credits_used if self.meta else None

    @property
    def credits_remaining(self) -> Optional[int]:
        return self.meta.credits_remaining if self.meta else None
