from buildmarket.messaging import repository

from conftest import T0, run


def message_row(**fields):
    return {"id": 1, "sender_id": 7, "receiver_id": 8, "content": "Здравствуйте", "is_read": False, "created_at": T0, **fields}


def test_create_message_only_stamps_created_at(db):
    db.queue({"id": 1}, message_row())
    message = run(repository.create_message(db, {"senderId": 7, "receiverId": 8, "content": "Здравствуйте"}))
    assert message.is_read is False
    assert "created_at" in db.sql(0)
    assert "updated_at" not in db.sql(0)


def test_mark_read_is_the_only_mutation(db):
    db.queue(message_row(is_read=True))
    message = run(repository.mark_message_as_read(db, 1))
    assert message.is_read is True
    assert db.sql() == "UPDATE messages SET is_read = true WHERE id = $1 RETURNING *"


def test_conversation_is_chronological_both_directions(db):
    run(repository.get_messages_between(db, 7, 8))
    sql = db.sql()
    assert "(sender_id = $1 AND receiver_id = $2) OR (sender_id = $2 AND receiver_id = $1)" in sql
    assert sql.endswith("ORDER BY created_at ASC, id ASC")


def test_unread_count(db):
    db.queue({"n": 3})
    assert run(repository.get_unread_message_count(db, 8)) == 3


def test_unread_notifications_only(db):
    run(repository.get_user_notifications(db, 8, unread_only=True))
    assert "WHERE user_id = $1 AND is_read = false" in db.sql()


def test_mark_all_notifications_counts_rows(db):
    db.queue([{"id": 1}, {"id": 2}])
    assert run(repository.mark_all_notifications_as_read(db, 8)) == 2


def test_create_notification(db):
    db.queue(
        {"id": 4},
        {"id": 4, "user_id": 17, "title": "Новая заявка на тендер", "message": "...", "type": "tender_bid", "related_id": 1, "is_read": False, "created_at": T0},
    )
    notification = run(
        repository.create_notification(
            db,
            {"userId": 17, "title": "Новая заявка на тендер", "message": "...", "type": "tender_bid", "relatedId": 1},
        )
    )
    assert notification.related_id == 1
    assert notification.model_dump(by_alias=True)["relatedId"] == 1
