"""
Estimate and estimate item persistence.

Deleting an estimate removes its items in the same transaction.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from buildmarket.core import crud
from buildmarket.core.db import Executor
from buildmarket.core.filters import FilterBuilder
from buildmarket.core.schemas import coerce

from .schemas import (
    Estimate,
    EstimateCreate,
    EstimateFilters,
    EstimateItem,
    EstimateItemCreate,
    EstimateItemPatch,
    EstimatePatch,
)

ESTIMATES = "estimates"
ITEMS = "estimate_items"

logger = logging.getLogger(__name__)


def _to_estimate(row: dict[str, Any] | None) -> Estimate | None:
    return Estimate.model_validate(row) if row is not None else None


def _to_item(row: dict[str, Any] | None) -> EstimateItem | None:
    return EstimateItem.model_validate(row) if row is not None else None


# ── Estimates ────────────────────────────────────────────


async def get_estimate(db: Executor, estimate_id: int) -> Estimate | None:
    return _to_estimate(await crud.fetch_by_id(db, ESTIMATES, estimate_id))


async def get_estimates(db: Executor, filters: EstimateFilters | Mapping[str, Any] | None = None) -> list[Estimate]:
    f = coerce(EstimateFilters, filters)
    fb = (
        FilterBuilder()
        .equals("user_id", f.user_id)
        .equals("tender_id", f.tender_id)
        .equals("status", f.status)
    )
    rows = await crud.select_rows(db, ESTIMATES, where_sql=fb.where_sql(), params=fb.params)
    return [Estimate.model_validate(r) for r in rows]


async def get_user_estimates(db: Executor, user_id: int) -> list[Estimate]:
    return await get_estimates(db, EstimateFilters(user_id=user_id))


async def create_estimate(db: Executor, data: EstimateCreate | Mapping[str, Any]) -> Estimate:
    payload = coerce(EstimateCreate, data)
    row = await crud.insert_row(db, ESTIMATES, payload.values())
    return Estimate.model_validate(row)


async def update_estimate(db: Executor, estimate_id: int, patch: EstimatePatch | Mapping[str, Any]) -> Estimate | None:
    values = coerce(EstimatePatch, patch).values()
    return _to_estimate(await crud.update_columns(db, ESTIMATES, estimate_id, values))


async def delete_estimate(db: Executor, estimate_id: int) -> bool:
    async with db.transaction() as tx:
        await tx.execute("DELETE FROM estimate_items WHERE estimate_id = $1", estimate_id)
        return await crud.delete_row(tx, ESTIMATES, estimate_id)


async def recalculate_estimate_total(db: Executor, estimate_id: int) -> Estimate | None:
    """
    Set `total_amount` to the sum of the estimate's item totals.
    """
    row = await db.fetch_one(
        "SELECT COALESCE(SUM(total_price), 0) AS total FROM estimate_items WHERE estimate_id = $1",
        estimate_id,
    )
    total = float((row or {}).get("total") or 0)
    updated = await crud.update_columns(db, ESTIMATES, estimate_id, {"total_amount": total})
    if updated is not None:
        logger.info("estimate_total_recalculated id=%s total=%s", estimate_id, total)
    return _to_estimate(updated)


# ── Items ────────────────────────────────────────────────


async def get_estimate_item(db: Executor, item_id: int) -> EstimateItem | None:
    return _to_item(await crud.fetch_by_id(db, ITEMS, item_id))


async def get_estimate_items(db: Executor, estimate_id: int) -> list[EstimateItem]:
    rows = await crud.select_rows(
        db,
        ITEMS,
        where_sql="WHERE estimate_id = $1",
        params=[estimate_id],
        order_by="id ASC",
    )
    return [EstimateItem.model_validate(r) for r in rows]


async def create_estimate_item(db: Executor, data: EstimateItemCreate | Mapping[str, Any]) -> EstimateItem:
    payload = coerce(EstimateItemCreate, data)
    values = payload.values()
    if payload.total_price is None:
        values["total_price"] = payload.quantity * payload.unit_price
    row = await crud.insert_row(db, ITEMS, values)
    return EstimateItem.model_validate(row)


async def update_estimate_item(
    db: Executor,
    item_id: int,
    patch: EstimateItemPatch | Mapping[str, Any],
) -> EstimateItem | None:
    """
    Changing `quantity` or `unit_price` without an explicit `total_price`
    recomputes the total from the stored row.
    """
    values = coerce(EstimateItemPatch, patch).values()
    if "total_price" not in values and ("quantity" in values or "unit_price" in values):
        current = await crud.fetch_by_id(db, ITEMS, item_id)
        if current is None:
            return None
        quantity = values.get("quantity", current.get("quantity"))
        unit_price = values.get("unit_price", current.get("unit_price"))
        values["total_price"] = (quantity or 0) * (unit_price or 0)
    return _to_item(await crud.update_columns(db, ITEMS, item_id, values))


async def delete_estimate_item(db: Executor, item_id: int) -> bool:
    return await crud.delete_row(db, ITEMS, item_id)
