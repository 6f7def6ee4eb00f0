"""
Tender and tender-bid persistence.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from buildmarket.core import crud, timestamps
from buildmarket.core.db import Executor
from buildmarket.core.filters import FilterBuilder, filter_by_element
from buildmarket.core.schemas import ModerationStatus, coerce

from .schemas import (
    BidStatus,
    Tender,
    TenderBid,
    TenderBidCreate,
    TenderBidPatch,
    TenderCreate,
    TenderFilters,
    TenderPatch,
)

TENDERS = "tenders"
BIDS = "tender_bids"
TENDER_JSON_COLUMNS = ("images", "required_professions")
BID_JSON_COLUMNS = ("documents",)

TENDER_IN_PROGRESS = "in_progress"

logger = logging.getLogger(__name__)


def _to_tender(row: dict[str, Any] | None) -> Tender | None:
    return Tender.model_validate(row) if row is not None else None


def _to_bid(row: dict[str, Any] | None) -> TenderBid | None:
    return TenderBid.model_validate(row) if row is not None else None


# ── Tenders ──────────────────────────────────────────────


async def get_tender(db: Executor, tender_id: int) -> Tender | None:
    return _to_tender(await crud.fetch_by_id(db, TENDERS, tender_id))


async def get_tenders(db: Executor, filters: TenderFilters | Mapping[str, Any] | None = None) -> list[Tender]:
    """
    List tenders, newest first.

    `profession` is matched exactly against the decoded list after the SQL
    filters ran; `profession_like` is pushed into SQL as a substring match on
    the stored JSON text.
    """
    f = coerce(TenderFilters, filters)
    fb = (
        FilterBuilder()
        .equals("category", f.category)
        .equals("subcategory", f.subcategory)
        .equals("status", f.status)
        .equals("moderation_status", f.moderation_status)
        .equals("user_id", f.user_id)
        .equals("person_type", f.person_type)
        .contains("location", f.location)
        .between("budget", f.min_budget, f.max_budget)
        .search(("title", "description"), f.search_term)
        .json_contains("required_professions", f.profession_like)
    )
    rows = await crud.select_rows(db, TENDERS, where_sql=fb.where_sql(), params=fb.params)
    tenders = [Tender.model_validate(r) for r in rows]
    return filter_by_element(tenders, "required_professions", f.profession)


async def get_user_tenders(db: Executor, user_id: int) -> list[Tender]:
    return await get_tenders(db, TenderFilters(user_id=user_id))


async def create_tender(db: Executor, data: TenderCreate | Mapping[str, Any]) -> Tender:
    payload = coerce(TenderCreate, data)
    row = await crud.insert_row(db, TENDERS, payload.values(), json_columns=TENDER_JSON_COLUMNS)
    return Tender.model_validate(row)


async def update_tender(db: Executor, tender_id: int, patch: TenderPatch | Mapping[str, Any]) -> Tender | None:
    values = coerce(TenderPatch, patch).values()
    row = await crud.update_columns(db, TENDERS, tender_id, values, json_columns=TENDER_JSON_COLUMNS)
    return _to_tender(row)


async def delete_tender(db: Executor, tender_id: int) -> bool:
    """
    Remove a tender and its bids in one transaction. Estimates, reviews or
    guarantees still pointing at the tender make the store reject the delete
    and nothing is removed.
    """
    async with db.transaction() as tx:
        await tx.execute("DELETE FROM tender_bids WHERE tender_id = $1", tender_id)
        return await crud.delete_row(tx, TENDERS, tender_id)


async def increment_tender_views(db: Executor, tender_id: int) -> int | None:
    return await crud.increment(db, TENDERS, tender_id, "views")


async def update_tender_moderation_status(
    db: Executor,
    tender_id: int,
    status: ModerationStatus,
) -> Tender | None:
    row = await crud.update_columns(db, TENDERS, tender_id, {"moderation_status": status})
    if row is not None:
        logger.info("tender_moderated id=%s status=%s", tender_id, status)
    return _to_tender(row)


# ── Bids ─────────────────────────────────────────────────


async def get_tender_bid(db: Executor, bid_id: int) -> TenderBid | None:
    return _to_bid(await crud.fetch_by_id(db, BIDS, bid_id))


async def get_tender_bids(db: Executor, tender_id: int) -> list[TenderBid]:
    rows = await crud.select_rows(db, BIDS, where_sql="WHERE tender_id = $1", params=[tender_id])
    return [TenderBid.model_validate(r) for r in rows]


async def get_user_tender_bids(db: Executor, user_id: int) -> list[TenderBid]:
    rows = await crud.select_rows(db, BIDS, where_sql="WHERE user_id = $1", params=[user_id])
    return [TenderBid.model_validate(r) for r in rows]


async def create_tender_bid(db: Executor, data: TenderBidCreate | Mapping[str, Any]) -> TenderBid:
    payload = coerce(TenderBidCreate, data)
    row = await crud.insert_row(db, BIDS, payload.values(), json_columns=BID_JSON_COLUMNS)
    return TenderBid.model_validate(row)


async def update_tender_bid(db: Executor, bid_id: int, patch: TenderBidPatch | Mapping[str, Any]) -> TenderBid | None:
    values = coerce(TenderBidPatch, patch).values()
    row = await crud.update_columns(db, BIDS, bid_id, values, json_columns=BID_JSON_COLUMNS)
    return _to_bid(row)


async def update_tender_bid_status(db: Executor, bid_id: int, status: BidStatus) -> TenderBid | None:
    """
    `accepted` is routed through `accept_tender_bid` so a tender never has
    more than one accepted bid; any other status clears the flag.
    """
    if status == "accepted":
        return await accept_tender_bid(db, bid_id)
    row = await crud.update_columns(db, BIDS, bid_id, {"status": status, "is_accepted": False})
    return _to_bid(row)


async def delete_tender_bid(db: Executor, bid_id: int) -> bool:
    return await crud.delete_row(db, BIDS, bid_id)


async def accept_tender_bid(db: Executor, bid_id: int) -> TenderBid | None:
    """
    Accept a bid and move its tender to `in_progress`, atomically.

    Any other bid on the same tender loses its accepted flag. Calling this
    again for an already-accepted bid re-applies both writes.
    """
    now = timestamps.utc_now()
    async with db.transaction() as tx:
        row = await tx.fetch_one(
            """
            UPDATE tender_bids
            SET is_accepted = true,
                status = 'accepted',
                updated_at = $2
            WHERE id = $1
            RETURNING *
            """,
            bid_id,
            now,
        )
        if row is None:
            return None

        tender_id = int(row["tender_id"])
        await tx.execute(
            """
            UPDATE tender_bids
            SET is_accepted = false,
                updated_at = $3
            WHERE tender_id = $1
              AND id <> $2
              AND is_accepted = true
            """,
            tender_id,
            bid_id,
            now,
        )
        await tx.execute(
            """
            UPDATE tenders
            SET status = $2,
                updated_at = $3
            WHERE id = $1
            """,
            tender_id,
            TENDER_IN_PROGRESS,
            now,
        )

    logger.info("tender_bid_accepted bid_id=%s tender_id=%s", bid_id, tender_id)
    return TenderBid.model_validate(row)
