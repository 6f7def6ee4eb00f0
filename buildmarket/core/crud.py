"""
Generic row helpers shared by the entity repositories.

Table and column names interpolated into SQL come from repository constants
and schema field names only; values always travel as positional parameters.
"""

from __future__ import annotations

import logging
from collections.abc import Collection
from datetime import datetime
from typing import Any

from . import timestamps
from .db import Executor
from .errors import PersistenceIntegrityError
from .json_columns import encode_string_list

logger = logging.getLogger(__name__)


def db_value(column: str, value: Any, json_columns: Collection[str] = ()) -> Any:
    if column in json_columns:
        return encode_string_list(value)
    if isinstance(value, datetime):
        return timestamps.ensure_utc(value)
    return value


async def fetch_by_id(db: Executor, table: str, row_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(f"SELECT * FROM {table} WHERE id = $1", row_id)


async def insert_row(
    db: Executor,
    table: str,
    values: dict[str, Any],
    *,
    json_columns: Collection[str] = (),
    with_updated_at: bool = True,
) -> dict[str, Any]:
    """
    Insert a row and return it as re-read from the store (so column defaults
    are visible). Raises PersistenceIntegrityError when the row cannot be
    found again by its generated id.
    """
    # List columns are always written, even when the caller omitted them.
    values = {column: [] for column in json_columns} | values
    stamped = timestamps.stamp_created(values, with_updated=with_updated_at)

    columns = list(stamped)
    placeholders = ", ".join(f"${i}" for i in range(1, len(columns) + 1))
    params = [db_value(column, stamped[column], json_columns) for column in columns]

    row = await db.fetch_one(
        f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({placeholders}) RETURNING id",
        *params,
    )
    if row is None or row.get("id") is None:
        raise PersistenceIntegrityError(table)

    row_id = int(row["id"])
    created = await fetch_by_id(db, table, row_id)
    if created is None:
        raise PersistenceIntegrityError(table, row_id)

    logger.info("row_created table=%s id=%s", table, row_id)
    return created


async def update_columns(
    db: Executor,
    table: str,
    row_id: int,
    values: dict[str, Any],
    *,
    json_columns: Collection[str] = (),
) -> dict[str, Any] | None:
    """
    Set the given columns plus `updated_at`; returns the updated row or None
    when the id does not exist.
    """
    stamped = timestamps.stamp_updated(values)

    assignments: list[str] = []
    params: list[Any] = []
    for column, value in stamped.items():
        params.append(db_value(column, value, json_columns))
        assignments.append(f"{column} = ${len(params)}")
    params.append(row_id)

    return await db.fetch_one(
        f"UPDATE {table} SET {', '.join(assignments)} WHERE id = ${len(params)} RETURNING *",
        *params,
    )


async def delete_row(db: Executor, table: str, row_id: int) -> bool:
    row = await db.fetch_one(f"DELETE FROM {table} WHERE id = $1 RETURNING id", row_id)
    if row is not None:
        logger.info("row_deleted table=%s id=%s", table, row_id)
    return row is not None


async def increment(db: Executor, table: str, row_id: int, column: str, by: int = 1) -> int | None:
    """
    Atomic counter bump in the store; returns the new value or None.
    """
    row = await db.fetch_one(
        f"UPDATE {table} SET {column} = COALESCE({column}, 0) + $2 WHERE id = $1 RETURNING {column}",
        row_id,
        by,
    )
    if row is None:
        return None
    return int(row[column])


async def select_rows(
    db: Executor,
    table: str,
    *,
    where_sql: str = "",
    params: Collection[Any] = (),
    order_by: str = "created_at DESC, id DESC",
) -> list[dict[str, Any]]:
    sql = f"SELECT * FROM {table}"
    if where_sql:
        sql += f" {where_sql}"
    sql += f" ORDER BY {order_by}"
    return await db.fetch_all(sql, *params)
