"""
Tender and tender bid schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from buildmarket.core.schemas import Filters, Input, ModerationStatus, Patch, Record, StringList

BidStatus = Literal["pending", "accepted", "rejected"]


class Tender(Record):
    user_id: int
    title: str
    description: str | None = None
    category: str | None = None
    subcategory: str | None = None
    location: str | None = None
    budget: float | None = None
    deadline: datetime | None = None
    status: str = "open"
    person_type: str | None = None
    requirements: str | None = None
    contact_info: str | None = None
    images: StringList = Field(default_factory=list)
    required_professions: StringList = Field(default_factory=list)
    views: int = 0
    moderation_status: str = "pending"
    created_at: datetime
    updated_at: datetime


class TenderCreate(Input):
    user_id: int
    title: str = Field(..., min_length=1)
    description: str | None = None
    category: str | None = None
    subcategory: str | None = None
    location: str | None = None
    budget: float | None = None
    deadline: datetime | None = None
    status: str | None = None
    person_type: str | None = None
    requirements: str | None = None
    contact_info: str | None = None
    images: StringList = Field(default_factory=list)
    required_professions: StringList = Field(default_factory=list)


class TenderPatch(Patch):
    title: str | None = None
    description: str | None = None
    category: str | None = None
    subcategory: str | None = None
    location: str | None = None
    budget: float | None = None
    deadline: datetime | None = None
    status: str | None = None
    person_type: str | None = None
    requirements: str | None = None
    contact_info: str | None = None
    images: StringList | None = None
    required_professions: StringList | None = None


class TenderFilters(Filters):
    category: str | None = None
    subcategory: str | None = None
    status: str | None = None
    moderation_status: ModerationStatus | None = None
    user_id: int | None = None
    person_type: str | None = None
    location: str | None = None
    min_budget: float | None = None
    max_budget: float | None = None
    search_term: str | None = None
    # Exact element of required_professions (decoded, in memory).
    profession: str | None = None
    # Substring of the serialized required_professions column (in SQL).
    profession_like: str | None = None


class TenderBid(Record):
    tender_id: int
    user_id: int
    amount: float
    description: str | None = None
    timeframe: int | None = None
    documents: StringList = Field(default_factory=list)
    status: str = "pending"
    is_accepted: bool = False
    created_at: datetime
    updated_at: datetime


class TenderBidCreate(Input):
    tender_id: int
    user_id: int
    amount: float = Field(..., ge=0)
    description: str | None = None
    timeframe: int | None = Field(default=None, ge=0)
    documents: StringList = Field(default_factory=list)
    status: BidStatus | None = None


class TenderBidPatch(Patch):
    amount: float | None = Field(default=None, ge=0)
    description: str | None = None
    timeframe: int | None = Field(default=None, ge=0)
    documents: StringList | None = None
