import pytest
from pydantic import ValidationError

from buildmarket.reviews import repository

from conftest import run, stamped


def test_rating_must_be_between_one_and_five(db):
    with pytest.raises(ValidationError):
        run(repository.create_review(db, {"authorId": 1, "recipientId": 2, "rating": 6}))
    assert db.calls == []


def test_create_review(db):
    db.queue({"id": 1}, stamped(id=1, author_id=1, recipient_id=2, tender_id=None, crew_id=None, rating=5, comment="Отлично"))
    review = run(repository.create_review(db, {"authorId": 1, "recipientId": 2, "rating": 5, "comment": "Отлично"}))
    assert review.rating == 5


def test_reviews_for_recipient(db):
    run(repository.get_user_reviews(db, 2))
    assert db.sql() == "SELECT * FROM reviews WHERE recipient_id = $1 ORDER BY created_at DESC, id DESC"


def test_crew_reviews(db):
    run(repository.get_crew_reviews(db, 2))
    assert db.sql() == "SELECT * FROM reviews WHERE crew_id = $1 ORDER BY created_at DESC, id DESC"


def test_rating_patch_is_bounded(db):
    with pytest.raises(ValidationError):
        run(repository.update_review(db, 1, {"rating": 0}))
