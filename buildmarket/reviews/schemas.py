"""
Review schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from buildmarket.core.schemas import Input, Patch, Record


class Review(Record):
    author_id: int
    recipient_id: int
    tender_id: int | None = None
    crew_id: int | None = None
    rating: int
    comment: str | None = None
    created_at: datetime
    updated_at: datetime


class ReviewCreate(Input):
    author_id: int
    recipient_id: int
    tender_id: int | None = None
    crew_id: int | None = None
    rating: int = Field(..., ge=1, le=5)
    comment: str | None = None


class ReviewPatch(Patch):
    rating: int | None = Field(default=None, ge=1, le=5)
    comment: str | None = None
