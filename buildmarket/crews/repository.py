"""
Crew persistence: crews, members, member skills, portfolio entries.
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
    Crew,
    CrewCreate,
    CrewFilters,
    CrewMember,
    CrewMemberCreate,
    CrewMemberPatch,
    CrewMemberSkill,
    CrewMemberSkillCreate,
    CrewMemberSkillPatch,
    CrewPatch,
    CrewPortfolio,
    CrewPortfolioCreate,
    CrewPortfolioPatch,
)

CREWS = "crews"
MEMBERS = "crew_members"
PORTFOLIOS = "crew_portfolios"
SKILLS = "crew_member_skills"
PORTFOLIO_JSON_COLUMNS = ("images",)

logger = logging.getLogger(__name__)


# ── Crews ────────────────────────────────────────────────


async def get_crew(db: Executor, crew_id: int) -> Crew | None:
    row = await crud.fetch_by_id(db, CREWS, crew_id)
    return Crew.model_validate(row) if row is not None else None


async def get_crews(db: Executor, filters: CrewFilters | Mapping[str, Any] | None = None) -> list[Crew]:
    f = coerce(CrewFilters, filters)
    fb = (
        FilterBuilder()
        .equals("owner_id", f.owner_id)
        .equals("is_verified", f.is_verified)
        .equals("is_available", f.is_available)
        .contains("specialization", f.specialization)
        .contains("location", f.location)
        .search(("name", "description"), f.search_term)
    )
    rows = await crud.select_rows(
        db,
        CREWS,
        where_sql=fb.where_sql(),
        params=fb.params,
        order_by="rating DESC, created_at DESC, id DESC",
    )
    return [Crew.model_validate(r) for r in rows]


async def get_user_crews(db: Executor, owner_id: int) -> list[Crew]:
    return await get_crews(db, CrewFilters(owner_id=owner_id))


async def create_crew(db: Executor, data: CrewCreate | Mapping[str, Any]) -> Crew:
    payload = coerce(CrewCreate, data)
    row = await crud.insert_row(db, CREWS, payload.values())
    return Crew.model_validate(row)


async def update_crew(db: Executor, crew_id: int, patch: CrewPatch | Mapping[str, Any]) -> Crew | None:
    values = coerce(CrewPatch, patch).values()
    row = await crud.update_columns(db, CREWS, crew_id, values)
    return Crew.model_validate(row) if row is not None else None


async def delete_crew(db: Executor, crew_id: int) -> bool:
    """
    Remove a crew together with its member skills, members and portfolio.
    Reviews still pointing at the crew make the store reject the delete and
    nothing is removed.
    """
    async with db.transaction() as tx:
        await tx.execute(
            """
            DELETE FROM crew_member_skills
            WHERE member_id IN (SELECT id FROM crew_members WHERE crew_id = $1)
            """,
            crew_id,
        )
        await tx.execute("DELETE FROM crew_members WHERE crew_id = $1", crew_id)
        await tx.execute("DELETE FROM crew_portfolios WHERE crew_id = $1", crew_id)
        return await crud.delete_row(tx, CREWS, crew_id)


# ── Members ──────────────────────────────────────────────


async def get_crew_member(db: Executor, member_id: int) -> CrewMember | None:
    row = await crud.fetch_by_id(db, MEMBERS, member_id)
    return CrewMember.model_validate(row) if row is not None else None


async def get_crew_members(db: Executor, crew_id: int) -> list[CrewMember]:
    rows = await crud.select_rows(db, MEMBERS, where_sql="WHERE crew_id = $1", params=[crew_id], order_by="id ASC")
    return [CrewMember.model_validate(r) for r in rows]


async def create_crew_member(db: Executor, data: CrewMemberCreate | Mapping[str, Any]) -> CrewMember:
    payload = coerce(CrewMemberCreate, data)
    row = await crud.insert_row(db, MEMBERS, payload.values())
    return CrewMember.model_validate(row)


async def update_crew_member(
    db: Executor,
    member_id: int,
    patch: CrewMemberPatch | Mapping[str, Any],
) -> CrewMember | None:
    values = coerce(CrewMemberPatch, patch).values()
    row = await crud.update_columns(db, MEMBERS, member_id, values)
    return CrewMember.model_validate(row) if row is not None else None


async def delete_crew_member(db: Executor, member_id: int) -> bool:
    async with db.transaction() as tx:
        await tx.execute("DELETE FROM crew_member_skills WHERE member_id = $1", member_id)
        return await crud.delete_row(tx, MEMBERS, member_id)


# ── Member skills ────────────────────────────────────────


async def get_crew_member_skills(db: Executor, member_id: int) -> list[CrewMemberSkill]:
    rows = await crud.select_rows(db, SKILLS, where_sql="WHERE member_id = $1", params=[member_id], order_by="id ASC")
    return [CrewMemberSkill.model_validate(r) for r in rows]


async def create_crew_member_skill(db: Executor, data: CrewMemberSkillCreate | Mapping[str, Any]) -> CrewMemberSkill:
    payload = coerce(CrewMemberSkillCreate, data)
    row = await crud.insert_row(db, SKILLS, payload.values())
    return CrewMemberSkill.model_validate(row)


async def update_crew_member_skill(
    db: Executor,
    skill_id: int,
    patch: CrewMemberSkillPatch | Mapping[str, Any],
) -> CrewMemberSkill | None:
    values = coerce(CrewMemberSkillPatch, patch).values()
    row = await crud.update_columns(db, SKILLS, skill_id, values)
    return CrewMemberSkill.model_validate(row) if row is not None else None


async def delete_crew_member_skill(db: Executor, skill_id: int) -> bool:
    return await crud.delete_row(db, SKILLS, skill_id)


# ── Portfolio ────────────────────────────────────────────


async def get_crew_portfolio(db: Executor, portfolio_id: int) -> CrewPortfolio | None:
    row = await crud.fetch_by_id(db, PORTFOLIOS, portfolio_id)
    return CrewPortfolio.model_validate(row) if row is not None else None


async def get_crew_portfolios(db: Executor, crew_id: int) -> list[CrewPortfolio]:
    rows = await crud.select_rows(db, PORTFOLIOS, where_sql="WHERE crew_id = $1", params=[crew_id])
    return [CrewPortfolio.model_validate(r) for r in rows]


async def create_crew_portfolio(db: Executor, data: CrewPortfolioCreate | Mapping[str, Any]) -> CrewPortfolio:
    payload = coerce(CrewPortfolioCreate, data)
    row = await crud.insert_row(db, PORTFOLIOS, payload.values(), json_columns=PORTFOLIO_JSON_COLUMNS)
    return CrewPortfolio.model_validate(row)


async def update_crew_portfolio(
    db: Executor,
    portfolio_id: int,
    patch: CrewPortfolioPatch | Mapping[str, Any],
) -> CrewPortfolio | None:
    values = coerce(CrewPortfolioPatch, patch).values()
    row = await crud.update_columns(db, PORTFOLIOS, portfolio_id, values, json_columns=PORTFOLIO_JSON_COLUMNS)
    return CrewPortfolio.model_validate(row) if row is not None else None


async def delete_crew_portfolio(db: Executor, portfolio_id: int) -> bool:
    return await crud.delete_row(db, PORTFOLIOS, portfolio_id)
