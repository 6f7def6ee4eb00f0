"""
Design project schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from buildmarket.core.schemas import Filters, Input, Patch, Record, StringList


class DesignProject(Record):
    user_id: int
    title: str
    description: str | None = None
    room_type: str | None = None
    area: float | None = None
    style: str | None = None
    budget: float | None = None
    status: str = "draft"
    visualization_urls: StringList = Field(default_factory=list)
    project_files: StringList = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class DesignProjectCreate(Input):
    user_id: int
    title: str = Field(..., min_length=1)
    description: str | None = None
    room_type: str | None = None
    area: float | None = Field(default=None, ge=0)
    style: str | None = None
    budget: float | None = Field(default=None, ge=0)
    status: str | None = None
    visualization_urls: StringList = Field(default_factory=list)
    project_files: StringList = Field(default_factory=list)


class DesignProjectPatch(Patch):
    title: str | None = None
    description: str | None = None
    room_type: str | None = None
    area: float | None = Field(default=None, ge=0)
    style: str | None = None
    budget: float | None = Field(default=None, ge=0)
    status: str | None = None
    visualization_urls: StringList | None = None
    project_files: StringList | None = None


class DesignProjectFilters(Filters):
    user_id: int | None = None
    status: str | None = None
    room_type: str | None = None
    style: str | None = None
