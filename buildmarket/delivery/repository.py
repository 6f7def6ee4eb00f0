"""
Delivery option and delivery order persistence.

Options are never removed: "delete" deactivates them so past orders can still
reference them.
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
    DeliveryOption,
    DeliveryOptionCreate,
    DeliveryOptionPatch,
    DeliveryOrder,
    DeliveryOrderCreate,
    DeliveryOrderFilters,
    DeliveryOrderPatch,
)

OPTIONS = "delivery_options"
ORDERS = "delivery_orders"

logger = logging.getLogger(__name__)


def _to_option(row: dict[str, Any] | None) -> DeliveryOption | None:
    return DeliveryOption.model_validate(row) if row is not None else None


def _to_order(row: dict[str, Any] | None) -> DeliveryOrder | None:
    return DeliveryOrder.model_validate(row) if row is not None else None


# ── Options ──────────────────────────────────────────────


async def get_delivery_options(db: Executor) -> list[DeliveryOption]:
    """
    Active options only, cheapest first.
    """
    rows = await crud.select_rows(
        db,
        OPTIONS,
        where_sql="WHERE is_active = true",
        order_by="price ASC, id ASC",
    )
    return [DeliveryOption.model_validate(r) for r in rows]


async def get_delivery_option(db: Executor, option_id: int) -> DeliveryOption | None:
    # Inactive options are still returned by id.
    return _to_option(await crud.fetch_by_id(db, OPTIONS, option_id))


async def create_delivery_option(db: Executor, data: DeliveryOptionCreate | Mapping[str, Any]) -> DeliveryOption:
    payload = coerce(DeliveryOptionCreate, data)
    row = await crud.insert_row(db, OPTIONS, payload.values())
    return DeliveryOption.model_validate(row)


async def update_delivery_option(
    db: Executor,
    option_id: int,
    patch: DeliveryOptionPatch | Mapping[str, Any],
) -> DeliveryOption | None:
    values = coerce(DeliveryOptionPatch, patch).values()
    return _to_option(await crud.update_columns(db, OPTIONS, option_id, values))


async def delete_delivery_option(db: Executor, option_id: int) -> bool:
    row = await crud.update_columns(db, OPTIONS, option_id, {"is_active": False})
    if row is not None:
        logger.info("delivery_option_deactivated id=%s", option_id)
    return row is not None


# ── Orders ───────────────────────────────────────────────


async def get_delivery_order(db: Executor, order_id: int) -> DeliveryOrder | None:
    return _to_order(await crud.fetch_by_id(db, ORDERS, order_id))


async def get_delivery_orders(
    db: Executor,
    filters: DeliveryOrderFilters | Mapping[str, Any] | None = None,
) -> list[DeliveryOrder]:
    f = coerce(DeliveryOrderFilters, filters)
    fb = (
        FilterBuilder()
        .equals("user_id", f.user_id)
        .equals("listing_id", f.listing_id)
        .equals("status", f.status)
    )
    rows = await crud.select_rows(db, ORDERS, where_sql=fb.where_sql(), params=fb.params)
    return [DeliveryOrder.model_validate(r) for r in rows]


async def get_user_delivery_orders(db: Executor, user_id: int) -> list[DeliveryOrder]:
    return await get_delivery_orders(db, DeliveryOrderFilters(user_id=user_id))


async def create_delivery_order(db: Executor, data: DeliveryOrderCreate | Mapping[str, Any]) -> DeliveryOrder:
    payload = coerce(DeliveryOrderCreate, data)
    row = await crud.insert_row(db, ORDERS, payload.values())
    return DeliveryOrder.model_validate(row)


async def update_delivery_order(
    db: Executor,
    order_id: int,
    patch: DeliveryOrderPatch | Mapping[str, Any],
) -> DeliveryOrder | None:
    values = coerce(DeliveryOrderPatch, patch).values()
    return _to_order(await crud.update_columns(db, ORDERS, order_id, values))


async def update_delivery_order_status(db: Executor, order_id: int, status: str) -> DeliveryOrder | None:
    return _to_order(await crud.update_columns(db, ORDERS, order_id, {"status": status}))


async def update_delivery_order_tracking(db: Executor, order_id: int, tracking_code: str) -> DeliveryOrder | None:
    return _to_order(await crud.update_columns(db, ORDERS, order_id, {"tracking_code": tracking_code}))


async def delete_delivery_order(db: Executor, order_id: int) -> bool:
    return await crud.delete_row(db, ORDERS, order_id)
