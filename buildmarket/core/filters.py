"""
Filter builder for list queries.

Criteria are AND-ed together; a criterion whose value is None (or an empty
string for text criteria) is skipped entirely rather than matched against NULL.

Example:
    fb = FilterBuilder()
    fb.equals("category", "construction").search(("title", "description"), "дом")
    sql = f"SELECT * FROM tenders {fb.where_sql()} ORDER BY created_at DESC"
    rows = await db.fetch_all(sql, *fb.params)
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def escape_like(value: str) -> str:
    """
    Escape LIKE wildcards so the value matches literally (backslash is the
    default LIKE escape character in PostgreSQL).
    """
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class FilterBuilder:
    def __init__(self, *, start: int = 1) -> None:
        # `start` lets callers reserve leading placeholders for their own params.
        self._start = start
        self._clauses: list[str] = []
        self._params: list[Any] = []

    @property
    def params(self) -> list[Any]:
        return list(self._params)

    def _bind(self, value: Any) -> str:
        self._params.append(value)
        return f"${self._start + len(self._params) - 1}"

    def _like_pattern(self, value: str) -> str:
        return f"'%' || {self._bind(escape_like(value))} || '%'"

    def equals(self, column: str, value: Any) -> FilterBuilder:
        if value is None:
            return self
        self._clauses.append(f"{column} = {self._bind(value)}")
        return self

    def contains(self, column: str, value: str | None) -> FilterBuilder:
        if _is_blank(value):
            return self
        self._clauses.append(f"{column} LIKE {self._like_pattern(value)}")
        return self

    def between(self, column: str, low: Any = None, high: Any = None) -> FilterBuilder:
        if low is not None and high is not None:
            self._clauses.append(f"{column} BETWEEN {self._bind(low)} AND {self._bind(high)}")
        elif low is not None:
            self._clauses.append(f"{column} >= {self._bind(low)}")
        elif high is not None:
            self._clauses.append(f"{column} <= {self._bind(high)}")
        return self

    def search(self, columns: Sequence[str], term: str | None) -> FilterBuilder:
        """
        Substring match against any of `columns` (one shared parameter).
        """
        if _is_blank(term) or not columns:
            return self
        pattern = self._like_pattern(term)
        alternatives = " OR ".join(f"{column} LIKE {pattern}" for column in columns)
        self._clauses.append(f"({alternatives})")
        return self

    def json_contains(self, column: str, value: str | None) -> FilterBuilder:
        """
        Approximate membership for a JSON list column: substring of the
        serialized text. May match substrings of other elements; use
        `filter_by_element` when exact membership matters.
        """
        return self.contains(column, value)

    def where_sql(self) -> str:
        if not self._clauses:
            return ""
        return "WHERE " + " AND ".join(self._clauses)


def filter_by_element(records: Iterable[T], attribute: str, value: str | None) -> list[T]:
    """
    Exact membership on an already-decoded list attribute, evaluated in memory.
    """
    items = list(records)
    if _is_blank(value):
        return items
    return [record for record in items if value in (getattr(record, attribute, None) or [])]
