"""
Marketplace listing schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from buildmarket.core.schemas import Filters, Input, ModerationStatus, Patch, Record, StringList


class MarketplaceListing(Record):
    user_id: int
    title: str
    description: str | None = None
    price: float | None = None
    category: str | None = None
    subcategory: str | None = None
    listing_type: str | None = None
    location: str | None = None
    images: StringList = Field(default_factory=list)
    views: int = 0
    is_active: bool = True
    moderation_status: str = "pending"
    created_at: datetime
    updated_at: datetime


class MarketplaceListingCreate(Input):
    user_id: int
    title: str = Field(..., min_length=1)
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    category: str | None = None
    subcategory: str | None = None
    listing_type: str | None = None
    location: str | None = None
    images: StringList = Field(default_factory=list)
    is_active: bool | None = None


class MarketplaceListingPatch(Patch):
    title: str | None = None
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    category: str | None = None
    subcategory: str | None = None
    listing_type: str | None = None
    location: str | None = None
    images: StringList | None = None
    is_active: bool | None = None


class MarketplaceListingFilters(Filters):
    category: str | None = None
    subcategory: str | None = None
    listing_type: str | None = None
    user_id: int | None = None
    location: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    search_term: str | None = None
    is_active: bool | None = None
    moderation_status: ModerationStatus | None = None
