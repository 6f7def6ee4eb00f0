from __future__ import annotations

import asyncio
from collections import deque
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

T0 = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


class FakeDatabase:
    """
    Stands in for `buildmarket.core.db.Database`.

    `fetch_one`/`fetch_all` return queued results in order (None / [] once the
    queue is empty) and raise queued exceptions; `execute` never consumes the
    queue. Every call is recorded in `calls` as (method, sql, args).
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, tuple]] = []
        self._results: deque = deque()
        self.transactions: list[str] = []

    def queue(self, *results: Any) -> FakeDatabase:
        self._results.extend(results)
        return self

    def _next(self, default: Any) -> Any:
        result = self._results.popleft() if self._results else default
        # A queued exception is raised in place of a result.
        if isinstance(result, Exception):
            raise result
        return result

    async def fetch_one(self, sql: str, *args: Any) -> dict | None:
        self.calls.append(("fetch_one", sql, args))
        return self._next(None)

    async def fetch_all(self, sql: str, *args: Any) -> list[dict]:
        self.calls.append(("fetch_all", sql, args))
        return self._next([])

    async def execute(self, sql: str, *args: Any) -> str:
        self.calls.append(("execute", sql, args))
        return "OK"

    @asynccontextmanager
    async def transaction(self):
        self.transactions.append("begin")
        try:
            yield self
        except BaseException:
            self.transactions.append("rollback")
            raise
        self.transactions.append("commit")

    def sql(self, index: int = -1) -> str:
        return " ".join(self.calls[index][1].split())

    def args(self, index: int = -1) -> tuple:
        return self.calls[index][2]

    def statements(self) -> list[str]:
        return [" ".join(sql.split()) for _, sql, _ in self.calls]


def run(coro):
    return asyncio.run(coro)


def stamped(**fields: Any) -> dict[str, Any]:
    row = {"created_at": T0, "updated_at": T0}
    row.update(fields)
    return row


def tender_row(**fields: Any) -> dict[str, Any]:
    return stamped(
        **{
            "id": 1,
            "user_id": 7,
            "title": "Строительство загородного дома",
            "description": "Двухэтажный дом 200 кв.м",
            "category": "construction",
            "subcategory": None,
            "location": "Московская область",
            "budget": 8000000.0,
            "deadline": T0 + timedelta(days=90),
            "status": "open",
            "person_type": None,
            "requirements": None,
            "contact_info": None,
            "images": "[]",
            "required_professions": '["каменщик", "электрик"]',
            "views": 0,
            **fields,
        }
    )


def bid_row(**fields: Any) -> dict[str, Any]:
    return stamped(
        **{
            "id": 10,
            "tender_id": 1,
            "user_id": 3,
            "amount": 7500000.0,
            "description": "Готов взяться",
            "timeframe": 120,
            "documents": '["license.pdf"]',
            "status": "pending",
            "is_accepted": False,
            **fields,
        }
    )


def user_row(**fields: Any) -> dict[str, Any]:
    return stamped(
        **{
            "id": 7,
            "username": "builder",
            "email": "builder@example.com",
            "password": "$2b$12$hash",
            "full_name": None,
            "first_name": None,
            "last_name": None,
            "phone": None,
            "location": "Москва",
            "bio": None,
            "avatar": None,
            "website": None,
            "inn": None,
            "user_type": "contractor",
            "rating": 0,
            "completed_projects": 0,
            "wallet_balance": 0.0,
            "is_verified": False,
            "is_admin": False,
            **fields,
        }
    )


@pytest.fixture
def db() -> FakeDatabase:
    return FakeDatabase()
