"""
Review persistence.

Aggregate user ratings are recomputed by `users.repository.update_user_rating`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from buildmarket.core import crud
from buildmarket.core.db import Executor
from buildmarket.core.schemas import coerce

from .schemas import Review, ReviewCreate, ReviewPatch

TABLE = "reviews"


def _to_review(row: dict[str, Any] | None) -> Review | None:
    return Review.model_validate(row) if row is not None else None


async def get_review(db: Executor, review_id: int) -> Review | None:
    return _to_review(await crud.fetch_by_id(db, TABLE, review_id))


async def get_user_reviews(db: Executor, recipient_id: int) -> list[Review]:
    rows = await crud.select_rows(db, TABLE, where_sql="WHERE recipient_id = $1", params=[recipient_id])
    return [Review.model_validate(r) for r in rows]


async def get_reviews_by_author(db: Executor, author_id: int) -> list[Review]:
    rows = await crud.select_rows(db, TABLE, where_sql="WHERE author_id = $1", params=[author_id])
    return [Review.model_validate(r) for r in rows]


async def get_crew_reviews(db: Executor, crew_id: int) -> list[Review]:
    rows = await crud.select_rows(db, TABLE, where_sql="WHERE crew_id = $1", params=[crew_id])
    return [Review.model_validate(r) for r in rows]


async def create_review(db: Executor, data: ReviewCreate | Mapping[str, Any]) -> Review:
    payload = coerce(ReviewCreate, data)
    row = await crud.insert_row(db, TABLE, payload.values())
    return Review.model_validate(row)


async def update_review(db: Executor, review_id: int, patch: ReviewPatch | Mapping[str, Any]) -> Review | None:
    values = coerce(ReviewPatch, patch).values()
    return _to_review(await crud.update_columns(db, TABLE, review_id, values))


async def delete_review(db: Executor, review_id: int) -> bool:
    return await crud.delete_row(db, TABLE, review_id)
