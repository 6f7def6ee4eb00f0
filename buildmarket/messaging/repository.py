"""
Message and notification persistence.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from buildmarket.core import crud
from buildmarket.core.db import Executor
from buildmarket.core.schemas import coerce

from .schemas import Message, MessageCreate, Notification, NotificationCreate

MESSAGES = "messages"
NOTIFICATIONS = "notifications"


def _to_message(row: dict[str, Any] | None) -> Message | None:
    return Message.model_validate(row) if row is not None else None


# ── Messages ─────────────────────────────────────────────


async def get_message(db: Executor, message_id: int) -> Message | None:
    return _to_message(await crud.fetch_by_id(db, MESSAGES, message_id))


async def get_user_messages(db: Executor, user_id: int) -> list[Message]:
    """
    Everything the user sent or received, newest first.
    """
    rows = await crud.select_rows(
        db,
        MESSAGES,
        where_sql="WHERE sender_id = $1 OR receiver_id = $1",
        params=[user_id],
    )
    return [Message.model_validate(r) for r in rows]


async def get_messages_between(db: Executor, user_id: int, other_user_id: int) -> list[Message]:
    """
    Conversation between two users in chronological order.
    """
    rows = await crud.select_rows(
        db,
        MESSAGES,
        where_sql=(
            "WHERE (sender_id = $1 AND receiver_id = $2) "
            "OR (sender_id = $2 AND receiver_id = $1)"
        ),
        params=[user_id, other_user_id],
        order_by="created_at ASC, id ASC",
    )
    return [Message.model_validate(r) for r in rows]


async def get_unread_message_count(db: Executor, user_id: int) -> int:
    row = await db.fetch_one(
        "SELECT count(*) AS n FROM messages WHERE receiver_id = $1 AND is_read = false",
        user_id,
    )
    return int((row or {}).get("n", 0))


async def create_message(db: Executor, data: MessageCreate | Mapping[str, Any]) -> Message:
    payload = coerce(MessageCreate, data)
    row = await crud.insert_row(db, MESSAGES, payload.values(), with_updated_at=False)
    return Message.model_validate(row)


async def mark_message_as_read(db: Executor, message_id: int) -> Message | None:
    row = await db.fetch_one(
        "UPDATE messages SET is_read = true WHERE id = $1 RETURNING *",
        message_id,
    )
    return _to_message(row)


async def delete_message(db: Executor, message_id: int) -> bool:
    return await crud.delete_row(db, MESSAGES, message_id)


# ── Notifications ────────────────────────────────────────


async def get_notification(db: Executor, notification_id: int) -> Notification | None:
    row = await crud.fetch_by_id(db, NOTIFICATIONS, notification_id)
    return Notification.model_validate(row) if row is not None else None


async def get_user_notifications(db: Executor, user_id: int, *, unread_only: bool = False) -> list[Notification]:
    where_sql = "WHERE user_id = $1"
    if unread_only:
        where_sql += " AND is_read = false"
    rows = await crud.select_rows(db, NOTIFICATIONS, where_sql=where_sql, params=[user_id])
    return [Notification.model_validate(r) for r in rows]


async def create_notification(db: Executor, data: NotificationCreate | Mapping[str, Any]) -> Notification:
    payload = coerce(NotificationCreate, data)
    row = await crud.insert_row(db, NOTIFICATIONS, payload.values(), with_updated_at=False)
    return Notification.model_validate(row)


async def mark_notification_as_read(db: Executor, notification_id: int) -> Notification | None:
    row = await db.fetch_one(
        "UPDATE notifications SET is_read = true WHERE id = $1 RETURNING *",
        notification_id,
    )
    return Notification.model_validate(row) if row is not None else None


async def mark_all_notifications_as_read(db: Executor, user_id: int) -> int:
    rows = await db.fetch_all(
        """
        UPDATE notifications
        SET is_read = true
        WHERE user_id = $1
          AND is_read = false
        RETURNING id
        """,
        user_id,
    )
    return len(rows)


async def delete_notification(db: Executor, notification_id: int) -> bool:
    return await crud.delete_row(db, NOTIFICATIONS, notification_id)
