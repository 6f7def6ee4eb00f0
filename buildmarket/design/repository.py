"""
Design project persistence.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from buildmarket.core import crud
from buildmarket.core.db import Executor
from buildmarket.core.filters import FilterBuilder
from buildmarket.core.schemas import coerce

from .schemas import DesignProject, DesignProjectCreate, DesignProjectFilters, DesignProjectPatch

TABLE = "design_projects"
JSON_COLUMNS = ("visualization_urls", "project_files")


def _to_project(row: dict[str, Any] | None) -> DesignProject | None:
    return DesignProject.model_validate(row) if row is not None else None


async def get_design_project(db: Executor, project_id: int) -> DesignProject | None:
    return _to_project(await crud.fetch_by_id(db, TABLE, project_id))


async def get_design_projects(
    db: Executor,
    filters: DesignProjectFilters | Mapping[str, Any] | None = None,
) -> list[DesignProject]:
    f = coerce(DesignProjectFilters, filters)
    fb = (
        FilterBuilder()
        .equals("user_id", f.user_id)
        .equals("status", f.status)
        .equals("room_type", f.room_type)
        .equals("style", f.style)
    )
    rows = await crud.select_rows(db, TABLE, where_sql=fb.where_sql(), params=fb.params)
    return [DesignProject.model_validate(r) for r in rows]


async def create_design_project(db: Executor, data: DesignProjectCreate | Mapping[str, Any]) -> DesignProject:
    payload = coerce(DesignProjectCreate, data)
    row = await crud.insert_row(db, TABLE, payload.values(), json_columns=JSON_COLUMNS)
    return DesignProject.model_validate(row)


async def update_design_project(
    db: Executor,
    project_id: int,
    patch: DesignProjectPatch | Mapping[str, Any],
) -> DesignProject | None:
    values = coerce(DesignProjectPatch, patch).values()
    return _to_project(await crud.update_columns(db, TABLE, project_id, values, json_columns=JSON_COLUMNS))


async def delete_design_project(db: Executor, project_id: int) -> bool:
    return await crud.delete_row(db, TABLE, project_id)


async def _append(db: Executor, project_id: int, column: str, value: str) -> DesignProject | None:
    # Read, append in Python, write back only this column.
    project = await get_design_project(db, project_id)
    if project is None:
        return None
    items = [*getattr(project, column), value]
    row = await crud.update_columns(db, TABLE, project_id, {column: items}, json_columns=JSON_COLUMNS)
    return _to_project(row)


async def add_project_visualization(db: Executor, project_id: int, url: str) -> DesignProject | None:
    return await _append(db, project_id, "visualization_urls", url)


async def add_project_file(db: Executor, project_id: int, file_url: str) -> DesignProject | None:
    return await _append(db, project_id, "project_files", file_url)
