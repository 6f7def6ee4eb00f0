from buildmarket.users import repository
from buildmarket.users.repository import rounded_mean

from conftest import run, user_row


def test_rating_without_reviews_is_zero_and_not_written(db):
    db.queue([])
    assert run(repository.update_user_rating(db, 7)) == 0
    assert len(db.calls) == 1
    assert db.sql() == "SELECT rating FROM reviews WHERE recipient_id = $1"


def test_rating_is_rounded_mean_and_persisted(db):
    db.queue([{"rating": 5}, {"rating": 4}, {"rating": 3}], user_row(rating=4))
    assert run(repository.update_user_rating(db, 7)) == 4
    assert db.sql() == "UPDATE users SET rating = $1, updated_at = $2 WHERE id = $3 RETURNING *"
    assert db.args()[0] == 4
    assert db.args()[2] == 7


def test_rounding_is_half_up():
    assert rounded_mean([4, 5]) == 5
    assert rounded_mean([1, 2]) == 2
    assert rounded_mean([]) == 0


def test_create_user_normalizes_email(db):
    db.queue({"id": 7}, user_row())
    user = run(
        repository.create_user(db, {"username": "builder", "email": " Builder@Example.com ", "password": "$2b$12$hash"})
    )
    assert user.username == "builder"
    assert "builder@example.com" in db.args(0)


def test_lookup_by_email_is_case_insensitive(db):
    run(repository.get_user_by_email(db, " Builder@Example.com"))
    assert db.sql() == "SELECT * FROM users WHERE lower(email) = lower($1)"
    assert db.args() == ("Builder@Example.com",)


def test_user_filters(db):
    run(repository.get_users(db, {"userType": "contractor", "location": "Моск"}))
    assert "user_type = $1" in db.sql()
    assert "location LIKE '%' || $2 || '%'" in db.sql()


def test_wallet_balance_changes_in_sql(db):
    db.queue(user_row(wallet_balance=150.0))
    user = run(repository.update_wallet_balance(db, 7, 150.0))
    assert user.wallet_balance == 150.0
    assert "wallet_balance = wallet_balance + $2" in db.sql()


def test_top_specialists_limit(db):
    run(repository.get_top_specialists(db, limit=3))
    assert "user_type = ANY($1::text[])" in db.sql()
    assert db.args() == (["contractor", "specialist", "company"], 3)
