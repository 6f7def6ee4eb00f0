"""
Marketplace listing persistence.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from buildmarket.core import crud
from buildmarket.core.db import Executor
from buildmarket.core.filters import FilterBuilder
from buildmarket.core.schemas import ModerationStatus, coerce

from .schemas import (
    MarketplaceListing,
    MarketplaceListingCreate,
    MarketplaceListingFilters,
    MarketplaceListingPatch,
)

TABLE = "marketplace_listings"
JSON_COLUMNS = ("images",)

logger = logging.getLogger(__name__)


def _to_listing(row: dict[str, Any] | None) -> MarketplaceListing | None:
    return MarketplaceListing.model_validate(row) if row is not None else None


async def get_marketplace_listing(db: Executor, listing_id: int) -> MarketplaceListing | None:
    return _to_listing(await crud.fetch_by_id(db, TABLE, listing_id))


async def get_marketplace_listings(
    db: Executor,
    filters: MarketplaceListingFilters | Mapping[str, Any] | None = None,
) -> list[MarketplaceListing]:
    f = coerce(MarketplaceListingFilters, filters)
    fb = (
        FilterBuilder()
        .equals("category", f.category)
        .equals("subcategory", f.subcategory)
        .equals("listing_type", f.listing_type)
        .equals("user_id", f.user_id)
        .equals("is_active", f.is_active)
        .equals("moderation_status", f.moderation_status)
        .contains("location", f.location)
        .between("price", f.min_price, f.max_price)
        .search(("title", "description"), f.search_term)
    )
    rows = await crud.select_rows(db, TABLE, where_sql=fb.where_sql(), params=fb.params)
    return [MarketplaceListing.model_validate(r) for r in rows]


async def create_marketplace_listing(
    db: Executor,
    data: MarketplaceListingCreate | Mapping[str, Any],
) -> MarketplaceListing:
    payload = coerce(MarketplaceListingCreate, data)
    row = await crud.insert_row(db, TABLE, payload.values(), json_columns=JSON_COLUMNS)
    return MarketplaceListing.model_validate(row)


async def update_marketplace_listing(
    db: Executor,
    listing_id: int,
    patch: MarketplaceListingPatch | Mapping[str, Any],
) -> MarketplaceListing | None:
    values = coerce(MarketplaceListingPatch, patch).values()
    return _to_listing(await crud.update_columns(db, TABLE, listing_id, values, json_columns=JSON_COLUMNS))


async def delete_marketplace_listing(db: Executor, listing_id: int) -> bool:
    return await crud.delete_row(db, TABLE, listing_id)


async def increment_listing_views(db: Executor, listing_id: int) -> int | None:
    return await crud.increment(db, TABLE, listing_id, "views")


async def update_listing_moderation_status(
    db: Executor,
    listing_id: int,
    status: ModerationStatus,
) -> MarketplaceListing | None:
    row = await crud.update_columns(db, TABLE, listing_id, {"moderation_status": status})
    if row is not None:
        logger.info("listing_moderated id=%s status=%s", listing_id, status)
    return _to_listing(row)
