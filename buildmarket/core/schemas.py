"""
Base models shared by every entity schema.

Python attributes are snake_case (matching columns); the serialized form is
camelCase (`model_dump(by_alias=True)`). Inputs accept either spelling.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import Annotated, Any, Literal, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, model_validator

from .json_columns import decode_string_list
from .naming import to_camel, to_snake
from .timestamps import SERVER_MANAGED

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _parse_date(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.date()
    if value is None or isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        # Accepts "2025-03-01", "2025-03-01T10:00:00", "2025-03-01T10:00:00Z".
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    return value


StringList = Annotated[list[str], BeforeValidator(decode_string_list)]
LooseDate = Annotated[date, BeforeValidator(_parse_date)]

# Review state of user-submitted content (tenders, marketplace listings).
ModerationStatus = Literal["pending", "approved", "rejected"]


class Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int


class Input(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _drop_server_managed(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            dropped = [key for key in data if key in SERVER_MANAGED]
            if dropped:
                logger.debug("input_server_fields_discarded model=%s keys=%s", cls.__name__, dropped)
                data = {key: value for key, value in data.items() if key not in SERVER_MANAGED}
        return data

    def values(self) -> dict[str, Any]:
        """
        Column -> value for an INSERT. Unset optional fields are left out so
        column defaults apply.
        """
        dumped = self.model_dump(by_alias=True, exclude_none=True)
        return {to_snake(key): value for key, value in dumped.items()}


class Patch(Input):
    """
    Partial update: every field optional, unknown keys rejected, server-owned
    keys (id, createdAt, updatedAt) silently discarded.
    """

    def values(self) -> dict[str, Any]:
        dumped = self.model_dump(by_alias=True, exclude_unset=True)
        return {to_snake(key): value for key, value in dumped.items()}


class Filters(Input):
    pass


def coerce(model: type[M], value: M | Mapping[str, Any] | None) -> M:
    if value is None:
        return model()
    if isinstance(value, model):
        return value
    return model.model_validate(value)
