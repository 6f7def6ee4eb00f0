from buildmarket.marketplace import repository

from conftest import run, stamped


def listing_row(**fields):
    return stamped(
        **{
            "id": 2,
            "user_id": 7,
            "title": "Кирпич облицовочный",
            "description": None,
            "price": 35.0,
            "category": "materials",
            "subcategory": None,
            "listing_type": "sell",
            "location": "Казань",
            "images": "https://cdn.example.com/brick.jpg",
            "views": 4,
            "is_active": True,
            **fields,
        }
    )


def test_legacy_bare_url_image_is_wrapped(db):
    db.queue(listing_row())
    listing = run(repository.get_marketplace_listing(db, 2))
    assert listing.images == ["https://cdn.example.com/brick.jpg"]


def test_price_range_and_type(db):
    run(repository.get_marketplace_listings(db, {"listingType": "sell", "minPrice": 10, "maxPrice": 50}))
    assert db.sql() == (
        "SELECT * FROM marketplace_listings WHERE listing_type = $1 AND price BETWEEN $2 AND $3 "
        "ORDER BY created_at DESC, id DESC"
    )
    assert db.args() == ("sell", 10.0, 50.0)


def test_create_writes_empty_image_list(db):
    db.queue({"id": 2}, listing_row(images="[]"))
    listing = run(repository.create_marketplace_listing(db, {"userId": 7, "title": "Кирпич облицовочный"}))
    assert listing.images == []
    assert db.sql(0).startswith("INSERT INTO marketplace_listings (images, user_id, title")
    assert db.args(0)[0] == "[]"


def test_views_bump_returns_new_count(db):
    db.queue({"views": 5})
    assert run(repository.increment_listing_views(db, 2)) == 5
    assert "updated_at" not in db.sql()


def test_listing_moderation_transition(db):
    db.queue(listing_row(moderation_status="rejected"))
    listing = run(repository.update_listing_moderation_status(db, 2, "rejected"))
    assert listing.moderation_status == "rejected"
    assert db.sql().startswith("UPDATE marketplace_listings SET moderation_status = $1, updated_at = $2")


def test_listing_moderation_filter(db):
    run(repository.get_marketplace_listings(db, {"isActive": True, "moderationStatus": "approved"}))
    assert "WHERE is_active = $1 AND moderation_status = $2" in db.sql()


def test_moderating_missing_listing_is_none(db):
    assert run(repository.update_listing_moderation_status(db, 404, "approved")) is None
