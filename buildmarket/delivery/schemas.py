"""
Delivery option and order schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from buildmarket.core.schemas import Filters, Input, Patch, Record


class DeliveryOption(Record):
    name: str
    description: str | None = None
    price: float = 0
    estimated_days: int | None = None
    is_active: bool = True
    created_at: datetime
    updated_at: datetime


class DeliveryOptionCreate(Input):
    name: str = Field(..., min_length=1)
    description: str | None = None
    price: float = Field(default=0, ge=0)
    estimated_days: int | None = Field(default=None, ge=0)
    is_active: bool | None = None


class DeliveryOptionPatch(Patch):
    name: str | None = None
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    estimated_days: int | None = Field(default=None, ge=0)
    is_active: bool | None = None


class DeliveryOrder(Record):
    user_id: int
    listing_id: int | None = None
    delivery_option_id: int | None = None
    address: str
    status: str = "pending"
    tracking_code: str | None = None
    total_price: float | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


class DeliveryOrderCreate(Input):
    user_id: int
    listing_id: int | None = None
    delivery_option_id: int | None = None
    address: str = Field(..., min_length=1)
    status: str | None = None
    tracking_code: str | None = None
    total_price: float | None = Field(default=None, ge=0)
    notes: str | None = None


class DeliveryOrderPatch(Patch):
    address: str | None = None
    delivery_option_id: int | None = None
    total_price: float | None = Field(default=None, ge=0)
    notes: str | None = None


class DeliveryOrderFilters(Filters):
    user_id: int | None = None
    listing_id: int | None = None
    status: str | None = None
