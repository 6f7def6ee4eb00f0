"""
Estimate and estimate item schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from buildmarket.core.schemas import Filters, Input, Patch, Record


class Estimate(Record):
    user_id: int
    tender_id: int | None = None
    title: str
    description: str | None = None
    total_amount: float = 0
    status: str = "draft"
    created_at: datetime
    updated_at: datetime


class EstimateCreate(Input):
    user_id: int
    tender_id: int | None = None
    title: str = Field(..., min_length=1)
    description: str | None = None
    total_amount: float | None = Field(default=None, ge=0)
    status: str | None = None


class EstimatePatch(Patch):
    tender_id: int | None = None
    title: str | None = None
    description: str | None = None
    total_amount: float | None = Field(default=None, ge=0)
    status: str | None = None


class EstimateFilters(Filters):
    user_id: int | None = None
    tender_id: int | None = None
    status: str | None = None


class EstimateItem(Record):
    estimate_id: int
    name: str
    description: str | None = None
    quantity: float = 1
    unit: str | None = None
    unit_price: float = 0
    total_price: float = 0
    created_at: datetime
    updated_at: datetime


class EstimateItemCreate(Input):
    estimate_id: int
    name: str = Field(..., min_length=1)
    description: str | None = None
    quantity: float = Field(default=1, ge=0)
    unit: str | None = None
    unit_price: float = Field(default=0, ge=0)
    total_price: float | None = Field(default=None, ge=0)


class EstimateItemPatch(Patch):
    name: str | None = None
    description: str | None = None
    quantity: float | None = Field(default=None, ge=0)
    unit: str | None = None
    unit_price: float | None = Field(default=None, ge=0)
    total_price: float | None = Field(default=None, ge=0)
