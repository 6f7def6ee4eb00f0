"""
Bank guarantee persistence.
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
    BankGuarantee,
    BankGuaranteeCreate,
    BankGuaranteeFilters,
    BankGuaranteePatch,
    GuaranteeStatus,
)

TABLE = "bank_guarantees"

logger = logging.getLogger(__name__)


def _to_guarantee(row: dict[str, Any] | None) -> BankGuarantee | None:
    return BankGuarantee.model_validate(row) if row is not None else None


async def get_bank_guarantee(db: Executor, guarantee_id: int) -> BankGuarantee | None:
    return _to_guarantee(await crud.fetch_by_id(db, TABLE, guarantee_id))


async def get_bank_guarantees(
    db: Executor,
    filters: BankGuaranteeFilters | Mapping[str, Any] | None = None,
) -> list[BankGuarantee]:
    f = coerce(BankGuaranteeFilters, filters)
    fb = (
        FilterBuilder()
        .equals("customer_id", f.customer_id)
        .equals("contractor_id", f.contractor_id)
        .equals("tender_id", f.tender_id)
        .equals("status", f.status)
    )
    rows = await crud.select_rows(db, TABLE, where_sql=fb.where_sql(), params=fb.params)
    return [BankGuarantee.model_validate(r) for r in rows]


async def get_user_bank_guarantees(db: Executor, user_id: int) -> list[BankGuarantee]:
    """
    Guarantees where the user is either the customer or the contractor.
    """
    rows = await crud.select_rows(
        db,
        TABLE,
        where_sql="WHERE customer_id = $1 OR contractor_id = $1",
        params=[user_id],
    )
    return [BankGuarantee.model_validate(r) for r in rows]


async def create_bank_guarantee(db: Executor, data: BankGuaranteeCreate | Mapping[str, Any]) -> BankGuarantee:
    payload = coerce(BankGuaranteeCreate, data)
    row = await crud.insert_row(db, TABLE, payload.values())
    return BankGuarantee.model_validate(row)


async def update_bank_guarantee(
    db: Executor,
    guarantee_id: int,
    patch: BankGuaranteePatch | Mapping[str, Any],
) -> BankGuarantee | None:
    values = coerce(BankGuaranteePatch, patch).values()
    return _to_guarantee(await crud.update_columns(db, TABLE, guarantee_id, values))


async def update_bank_guarantee_status(
    db: Executor,
    guarantee_id: int,
    status: GuaranteeStatus,
) -> BankGuarantee | None:
    row = await crud.update_columns(db, TABLE, guarantee_id, {"status": status})
    if row is not None:
        logger.info("bank_guarantee_status id=%s status=%s", guarantee_id, status)
    return _to_guarantee(row)


async def delete_bank_guarantee(db: Executor, guarantee_id: int) -> bool:
    return await crud.delete_row(db, TABLE, guarantee_id)
