"""
Product, Offer and Price History Schemas

Typed shapes for product lookups, current offers and price history. The current
API revision renamed several fields; decoding accepts both spellings, and the old
names stay available as read-only properties that always mirror the new field.
"""

from typing import Optional, List, Dict
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, JsonValue

from ShopSavvy.utils.deprecation import warn_deprecated


class ProductDetails(BaseModel):
    """Identifying and descriptive data for a single product"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(validation_alias=AliasChoices("title", "name"))
    shopsavvy: str = Field(
        validation_alias=AliasChoices("shopsavvy", "id"),
        description="ShopSavvy canonical product ID",
    )
    brand: Optional[str] = None
    category: Optional[str] = None
    images: Optional[List[str]] = None
    barcode: Optional[str] = Field(default=None, validation_alias=AliasChoices("barcode", "upc"))
    amazon: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("amazon", "asin"),
        description="Amazon ASIN",
    )
    model: Optional[str] = Field(default=None, validation_alias=AliasChoices("model", "model_number"))
    mpn: Optional[str] = None
    color: Optional[str] = None
    description: Optional[str] = None
    specifications: Optional[Dict[str, JsonValue]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def name(self) -> str:
        warn_deprecated("name", "title")
        return self.title

    @property
    def product_id(self) -> str:
        warn_deprecated("product_id", "shopsavvy")
        return self.shopsavvy

    @property
    def upc(self) -> Optional[str]:
        warn_deprecated("upc", "barcode")
        return self.barcode

    @property
    def asin(self) -> Optional[str]:
        warn_deprecated("asin", "amazon")
        return self.amazon

    @property
    def model_number(self) -> Optional[str]:
        warn_deprecated("model_number", "model")
        return self.model


class PriceHistoryEntry(BaseModel):
    """A single historical price observation"""
    model_config = ConfigDict(frozen=True)

    date: str
    price: Optional[float] = None
    availability: Optional[str] = None


# First-revision name for the same shape
PricePoint = PriceHistoryEntry


class _OfferFields(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Optional[str] = None
    retailer: str
    price: Optional[float] = None
    currency: Optional[str] = None
    availability: Optional[str] = None
    condition: Optional[str] = None
    url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("URL", "url"),
        serialization_alias="URL",
    )
    seller: Optional[str] = None
    shipping_cost: Optional[float] = None
    timestamp: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("timestamp", "last_updated"),
    )

    @property
    def offer_id(self) -> Optional[str]:
        warn_deprecated("offer_id", "id")
        return self.id

    @property
    def last_updated(self) -> Optional[str]:
        warn_deprecated("last_updated", "timestamp")
        return self.timestamp


class Offer(_OfferFields):
    """A retailer's current listing for a product"""

    history: Optional[List[PriceHistoryEntry]] = None


class OfferWithHistory(_OfferFields):
    """An offer together with its ordered price history"""

    price_history: List[PriceHistoryEntry]


class ProductWithOffers(ProductDetails):
    """Product details with the offers found for it"""

    offers: Optional[List[Offer]] = None
