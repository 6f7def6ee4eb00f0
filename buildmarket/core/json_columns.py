"""
List-of-strings columns (images, documents, URLs) stored as JSON array text.

Older rows may hold a bare URL instead of an array; reads tolerate that and
never raise on malformed data.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

logger = logging.getLogger(__name__)


def _looks_like_url(text: str) -> bool:
    return "http" in text or "www" in text


def _as_strings(items: list[Any]) -> list[str]:
    return [item if isinstance(item, str) else str(item) for item in items if item is not None]


def decode_string_list(value: Any) -> list[str]:
    """
    Normalize a stored list column into a Python list of strings.

    - None -> []
    - list -> unchanged
    - '["a", "b"]' -> ["a", "b"]
    - 'https://host/a.png' -> ["https://host/a.png"]
    - anything unparseable -> [] (logged)
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    if not isinstance(value, str):
        logger.warning("json_column_unexpected_type type=%s", type(value).__name__)
        return []

    text = value.strip()
    if not text:
        return []

    if text.startswith("["):
        try:
            parsed = json.loads(text)
        except ValueError:
            parsed = None
        if isinstance(parsed, list):
            return _as_strings(parsed)

    elif _looks_like_url(text):
        return [text]

    try:
        parsed = json.loads(text)
    except ValueError:
        if _looks_like_url(text):
            return [text]
        logger.warning("json_column_malformed value=%r", text[:120])
        return []

    if isinstance(parsed, list):
        return _as_strings(parsed)
    if isinstance(parsed, str) and parsed:
        return [parsed]

    logger.warning("json_column_not_a_list value=%r", text[:120])
    return []


def encode_string_list(value: Iterable[str] | None) -> str:
    # Non-ASCII stays literal so LIKE push-down can match Cyrillic text.
    return json.dumps(list(value or []), ensure_ascii=False)
