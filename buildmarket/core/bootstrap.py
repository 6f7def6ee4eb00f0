"""
One-shot startup tasks: apply the schema, seed default rows.

Both are idempotent and run from the application lifespan before any request
is served. Repositories never issue DDL themselves.
"""

from __future__ import annotations

import logging
from importlib import resources

from .db import Database

logger = logging.getLogger(__name__)

DEFAULT_DELIVERY_OPTIONS: tuple[dict, ...] = (
    {"name": "Самовывоз", "description": "Забрать со склада продавца", "price": 0.0, "estimated_days": 0},
    {"name": "Стандартная доставка", "description": "Доставка по городу", "price": 1500.0, "estimated_days": 3},
    {"name": "Экспресс-доставка", "description": "Доставка в течение суток", "price": 3500.0, "estimated_days": 1},
    {"name": "Грузовая доставка", "description": "Доставка крупногабаритных материалов", "price": 6000.0, "estimated_days": 5},
)

SAMPLE_USERS: tuple[dict, ...] = (
    {
        "username": "admin",
        "email": "admin@buildmarket.local",
        "full_name": "Администратор",
        "user_type": "company",
        "is_admin": True,
        "is_verified": True,
    },
    {
        "username": "specialist_builder",
        "email": "builder@buildmarket.local",
        "full_name": "Иван Строителев",
        "user_type": "contractor",
        "location": "Москва",
        "is_verified": True,
    },
)


def schema_sql() -> str:
    return resources.files("buildmarket.core").joinpath("schema.sql").read_text(encoding="utf-8")


async def apply_schema(db: Database) -> None:
    await db.execute(schema_sql())
    logger.info("schema_applied")


async def _is_empty(db: Database, table: str) -> bool:
    row = await db.fetch_one(f"SELECT count(*) AS n FROM {table}")
    return int((row or {}).get("n", 0)) == 0


async def seed_if_empty(db: Database, *, sample_password: str = "changeme123") -> dict[str, int]:
    """
    Insert default delivery options and sample users into empty tables.
    Returns how many rows were inserted per table.
    """
    # Imported here: feature packages depend on core, not the other way round.
    from buildmarket.delivery import repository as delivery_repository
    from buildmarket.users import repository as users_repository
    from buildmarket.users.security import hash_password

    inserted = {"delivery_options": 0, "users": 0}

    if await _is_empty(db, "delivery_options"):
        for option in DEFAULT_DELIVERY_OPTIONS:
            await delivery_repository.create_delivery_option(db, option)
            inserted["delivery_options"] += 1

    if await _is_empty(db, "users"):
        password_hash = hash_password(sample_password)
        for user in SAMPLE_USERS:
            await users_repository.create_user(db, {**user, "password": password_hash})
            inserted["users"] += 1

    logger.info(
        "seed_complete delivery_options=%s users=%s",
        inserted["delivery_options"],
        inserted["users"],
    )
    return inserted
