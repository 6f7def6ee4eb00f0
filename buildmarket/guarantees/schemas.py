"""
Bank guarantee schemas.

`start_date`/`end_date` accept a date, a datetime or ISO text and are stored
as DATE.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Literal

from pydantic import Field, model_validator

from buildmarket.core.schemas import Filters, Input, LooseDate, Patch, Record

GuaranteeStatus = Literal["pending", "approved", "active", "rejected", "expired", "cancelled"]


class BankGuarantee(Record):
    customer_id: int
    contractor_id: int
    tender_id: int | None = None
    amount: float
    description: str | None = None
    terms: str | None = None
    start_date: date
    end_date: date
    status: str = "pending"
    created_at: datetime
    updated_at: datetime


class BankGuaranteeCreate(Input):
    customer_id: int
    contractor_id: int
    tender_id: int | None = None
    amount: float = Field(..., gt=0)
    description: str | None = None
    terms: str | None = None
    start_date: LooseDate
    end_date: LooseDate
    status: GuaranteeStatus | None = None

    @model_validator(mode="after")
    def _check_period(self) -> BankGuaranteeCreate:
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class BankGuaranteePatch(Patch):
    amount: float | None = Field(default=None, gt=0)
    description: str | None = None
    terms: str | None = None
    start_date: LooseDate | None = None
    end_date: LooseDate | None = None
    status: GuaranteeStatus | None = None


class BankGuaranteeFilters(Filters):
    customer_id: int | None = None
    contractor_id: int | None = None
    tender_id: int | None = None
    status: str | None = None
