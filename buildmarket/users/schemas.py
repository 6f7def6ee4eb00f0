"""
User schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from buildmarket.core.schemas import Filters, Input, Patch, Record


class User(Record):
    username: str
    email: str
    password: str
    full_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    location: str | None = None
    bio: str | None = None
    avatar: str | None = None
    website: str | None = None
    inn: str | None = None
    user_type: str = "individual"
    rating: int = 0
    completed_projects: int = 0
    wallet_balance: float = 0
    is_verified: bool = False
    is_admin: bool = False
    created_at: datetime
    updated_at: datetime


class UserCreate(Input):
    username: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=320)
    # bcrypt hash, see users.security.hash_password
    password: str = Field(..., min_length=1)
    full_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    location: str | None = None
    bio: str | None = None
    avatar: str | None = None
    website: str | None = None
    inn: str | None = None
    user_type: str | None = None
    is_verified: bool | None = None
    is_admin: bool | None = None


class UserPatch(Patch):
    username: str | None = None
    email: str | None = None
    password: str | None = None
    full_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    location: str | None = None
    bio: str | None = None
    avatar: str | None = None
    website: str | None = None
    inn: str | None = None
    user_type: str | None = None
    completed_projects: int | None = None
    is_verified: bool | None = None
    is_admin: bool | None = None


class UserFilters(Filters):
    user_type: str | None = None
    location: str | None = None
    is_verified: bool | None = None
    search_term: str | None = None
