"""
Message and notification schemas.

Neither has an `updated_at`: the only mutation is flipping `is_read`.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from buildmarket.core.schemas import Input, Record


class Message(Record):
    sender_id: int
    receiver_id: int
    content: str
    is_read: bool = False
    created_at: datetime


class MessageCreate(Input):
    sender_id: int
    receiver_id: int
    content: str = Field(..., min_length=1)


class Notification(Record):
    user_id: int
    title: str
    message: str
    type: str | None = None
    related_id: int | None = None
    is_read: bool = False
    created_at: datetime


class NotificationCreate(Input):
    user_id: int
    title: str = Field(..., min_length=1)
    message: str
    type: str | None = None
    related_id: int | None = None
    is_read: bool | None = None
