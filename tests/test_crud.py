from datetime import datetime

import pytest

from buildmarket.core import crud
from buildmarket.core.errors import PersistenceIntegrityError

from conftest import run, stamped


def test_insert_stamps_encodes_and_rereads(db):
    db.queue({"id": 5}, stamped(id=5, title="t", images='["a.png"]'))

    row = run(crud.insert_row(db, "tenders", {"title": "t", "images": ["a.png"]}, json_columns=("images",)))

    assert row["id"] == 5
    insert_sql = db.sql(0)
    assert insert_sql.startswith("INSERT INTO tenders (images, title, created_at, updated_at)")
    assert insert_sql.endswith("VALUES ($1, $2, $3, $4) RETURNING id")
    images, title, created_at, updated_at = db.args(0)
    assert images == '["a.png"]'
    assert title == "t"
    assert isinstance(created_at, datetime) and created_at.tzinfo is not None
    assert created_at == updated_at
    assert db.sql(1) == "SELECT * FROM tenders WHERE id = $1"
    assert db.args(1) == (5,)


def test_insert_writes_empty_list_for_omitted_list_column(db):
    db.queue({"id": 1}, stamped(id=1))
    run(crud.insert_row(db, "design_projects", {"title": "t"}, json_columns=("visualization_urls", "project_files")))
    assert db.args(0)[:2] == ("[]", "[]")


def test_insert_without_updated_at(db):
    db.queue({"id": 1}, {"id": 1})
    run(crud.insert_row(db, "messages", {"content": "hi"}, with_updated_at=False))
    assert "updated_at" not in db.sql(0)


def test_insert_without_returned_id_is_integrity_error(db):
    db.queue(None)
    with pytest.raises(PersistenceIntegrityError):
        run(crud.insert_row(db, "tenders", {"title": "t"}))


def test_insert_that_cannot_be_reread_is_integrity_error(db):
    db.queue({"id": 42}, None)
    with pytest.raises(PersistenceIntegrityError) as excinfo:
        run(crud.insert_row(db, "tenders", {"title": "t"}))
    assert excinfo.value.row_id == 42
    assert excinfo.value.table == "tenders"


def test_update_sets_columns_and_updated_at(db):
    db.queue(stamped(id=3))
    run(crud.update_columns(db, "tenders", 3, {"status": "closed"}))
    assert db.sql() == "UPDATE tenders SET status = $1, updated_at = $2 WHERE id = $3 RETURNING *"
    status, updated_at, row_id = db.args()
    assert status == "closed"
    assert isinstance(updated_at, datetime)
    assert row_id == 3


def test_update_missing_row_returns_none(db):
    assert run(crud.update_columns(db, "tenders", 3, {"status": "closed"})) is None


def test_update_naive_datetime_is_made_utc(db):
    run(crud.update_columns(db, "tenders", 1, {"deadline": datetime(2025, 5, 1)}))
    assert db.args()[0].tzinfo is not None


def test_delete_reports_whether_a_row_went_away(db):
    db.queue({"id": 1})
    assert run(crud.delete_row(db, "reviews", 1)) is True
    assert run(crud.delete_row(db, "reviews", 2)) is False
    assert db.sql() == "DELETE FROM reviews WHERE id = $1 RETURNING id"


def test_increment_is_done_in_sql(db):
    db.queue({"views": 8})
    assert run(crud.increment(db, "tenders", 1, "views")) == 8
    assert db.sql() == "UPDATE tenders SET views = COALESCE(views, 0) + $2 WHERE id = $1 RETURNING views"
    assert db.args() == (1, 1)


def test_increment_missing_row(db):
    assert run(crud.increment(db, "tenders", 1, "views")) is None
