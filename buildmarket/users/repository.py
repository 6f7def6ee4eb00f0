"""
User persistence.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from buildmarket.core import crud, timestamps
from buildmarket.core.db import Executor
from buildmarket.core.filters import FilterBuilder
from buildmarket.core.schemas import coerce

from .schemas import User, UserCreate, UserFilters, UserPatch

TABLE = "users"
SPECIALIST_TYPES = ("contractor", "specialist", "company")

logger = logging.getLogger(__name__)


def _to_user(row: dict[str, Any] | None) -> User | None:
    return User.model_validate(row) if row is not None else None


def rounded_mean(values: list[int]) -> int:
    """
    Half-up rounding (4.5 -> 5), unlike Python's round().
    """
    if not values:
        return 0
    return int(math.floor(sum(values) / len(values) + 0.5))


async def get_user(db: Executor, user_id: int) -> User | None:
    return _to_user(await crud.fetch_by_id(db, TABLE, user_id))


async def get_user_by_username(db: Executor, username: str) -> User | None:
    row = await db.fetch_one("SELECT * FROM users WHERE username = $1", username)
    return _to_user(row)


async def get_user_by_email(db: Executor, email: str) -> User | None:
    row = await db.fetch_one(
        "SELECT * FROM users WHERE lower(email) = lower($1)",
        (email or "").strip(),
    )
    return _to_user(row)


async def get_users(db: Executor, filters: UserFilters | Mapping[str, Any] | None = None) -> list[User]:
    f = coerce(UserFilters, filters)
    fb = (
        FilterBuilder()
        .equals("user_type", f.user_type)
        .equals("is_verified", f.is_verified)
        .contains("location", f.location)
        .search(("username", "full_name"), f.search_term)
    )
    rows = await crud.select_rows(db, TABLE, where_sql=fb.where_sql(), params=fb.params)
    return [User.model_validate(r) for r in rows]


async def get_top_specialists(db: Executor, *, limit: int = 10) -> list[User]:
    rows = await db.fetch_all(
        """
        SELECT *
        FROM users
        WHERE user_type = ANY($1::text[])
        ORDER BY rating DESC, completed_projects DESC, id ASC
        LIMIT $2
        """,
        list(SPECIALIST_TYPES),
        limit,
    )
    return [User.model_validate(r) for r in rows]


async def create_user(db: Executor, data: UserCreate | Mapping[str, Any]) -> User:
    payload = coerce(UserCreate, data)
    values = payload.values()
    values["email"] = values["email"].strip().lower()
    row = await crud.insert_row(db, TABLE, values)
    return User.model_validate(row)


async def update_user(db: Executor, user_id: int, patch: UserPatch | Mapping[str, Any]) -> User | None:
    values = coerce(UserPatch, patch).values()
    if values.get("email"):
        values["email"] = values["email"].strip().lower()
    return _to_user(await crud.update_columns(db, TABLE, user_id, values))


async def delete_user(db: Executor, user_id: int) -> bool:
    return await crud.delete_row(db, TABLE, user_id)


async def update_wallet_balance(db: Executor, user_id: int, delta: float) -> User | None:
    row = await db.fetch_one(
        """
        UPDATE users
        SET wallet_balance = wallet_balance + $2,
            updated_at = $3
        WHERE id = $1
        RETURNING *
        """,
        user_id,
        delta,
        timestamps.utc_now(),
    )
    return _to_user(row)


async def update_user_rating(db: Executor, user_id: int) -> int:
    """
    Recompute `users.rating` as the rounded mean of every review addressed to
    the user. With no reviews the user row is left untouched and 0 returned.
    """
    rows = await db.fetch_all("SELECT rating FROM reviews WHERE recipient_id = $1", user_id)
    ratings = [int(r["rating"]) for r in rows if r.get("rating") is not None]
    if not ratings:
        return 0

    rating = rounded_mean(ratings)
    await crud.update_columns(db, TABLE, user_id, {"rating": rating})
    logger.info("user_rating_updated user_id=%s rating=%s reviews=%s", user_id, rating, len(ratings))
    return rating
