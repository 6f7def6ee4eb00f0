"""
Crew schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from buildmarket.core.schemas import Filters, Input, Patch, Record, StringList


class Crew(Record):
    owner_id: int
    name: str
    description: str | None = None
    specialization: str | None = None
    location: str | None = None
    experience_years: int | None = None
    hourly_rate: float | None = None
    is_verified: bool = False
    is_available: bool = True
    rating: int = 0
    created_at: datetime
    updated_at: datetime


class CrewCreate(Input):
    owner_id: int
    name: str = Field(..., min_length=1)
    description: str | None = None
    specialization: str | None = None
    location: str | None = None
    experience_years: int | None = Field(default=None, ge=0)
    hourly_rate: float | None = Field(default=None, ge=0)
    is_verified: bool | None = None
    is_available: bool | None = None


class CrewPatch(Patch):
    name: str | None = None
    description: str | None = None
    specialization: str | None = None
    location: str | None = None
    experience_years: int | None = Field(default=None, ge=0)
    hourly_rate: float | None = Field(default=None, ge=0)
    is_verified: bool | None = None
    is_available: bool | None = None
    rating: int | None = Field(default=None, ge=0, le=5)


class CrewFilters(Filters):
    owner_id: int | None = None
    specialization: str | None = None
    location: str | None = None
    is_verified: bool | None = None
    is_available: bool | None = None
    search_term: str | None = None


class CrewMember(Record):
    crew_id: int
    user_id: int | None = None
    name: str
    role: str | None = None
    experience_years: int | None = None
    phone: str | None = None
    created_at: datetime
    updated_at: datetime


class CrewMemberCreate(Input):
    crew_id: int
    user_id: int | None = None
    name: str = Field(..., min_length=1)
    role: str | None = None
    experience_years: int | None = Field(default=None, ge=0)
    phone: str | None = None


class CrewMemberPatch(Patch):
    user_id: int | None = None
    name: str | None = None
    role: str | None = None
    experience_years: int | None = Field(default=None, ge=0)
    phone: str | None = None


class CrewPortfolio(Record):
    crew_id: int
    title: str
    description: str | None = None
    images: StringList = Field(default_factory=list)
    completed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


class CrewPortfolioCreate(Input):
    crew_id: int
    title: str = Field(..., min_length=1)
    description: str | None = None
    images: StringList = Field(default_factory=list)
    completed_at: datetime | None = None


class CrewPortfolioPatch(Patch):
    title: str | None = None
    description: str | None = None
    images: StringList | None = None
    completed_at: datetime | None = None


class CrewMemberSkill(Record):
    member_id: int
    skill_name: str
    level: str | None = None
    years_of_experience: int | None = None
    created_at: datetime
    updated_at: datetime


class CrewMemberSkillCreate(Input):
    member_id: int
    skill_name: str = Field(..., min_length=1)
    level: str | None = None
    years_of_experience: int | None = Field(default=None, ge=0)


class CrewMemberSkillPatch(Patch):
    skill_name: str | None = None
    level: str | None = None
    years_of_experience: int | None = Field(default=None, ge=0)
