"""
Identifier case conversion between records (camelCase) and columns (snake_case).
"""

from __future__ import annotations

import re

_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def to_snake(name: str) -> str:
    """
    `visualizationUrls` -> `visualization_urls`. Already-snake names pass through.
    """
    return _BOUNDARY.sub(r"_\1", name).lower()


def to_camel(name: str) -> str:
    """
    `visualization_urls` -> `visualizationUrls`.
    """
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)
