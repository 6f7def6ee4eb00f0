from buildmarket.estimates import repository

from conftest import run, stamped


def item_row(**fields):
    return stamped(
        **{
            "id": 1,
            "estimate_id": 5,
            "name": "Кирпич",
            "description": None,
            "quantity": 1000.0,
            "unit": "шт",
            "unit_price": 25.0,
            "total_price": 25000.0,
            **fields,
        }
    )


def estimate_row(**fields):
    return stamped(
        **{
            "id": 5,
            "user_id": 7,
            "tender_id": None,
            "title": "Смета",
            "description": None,
            "total_amount": 0.0,
            "status": "draft",
            **fields,
        }
    )


def test_delete_estimate_cascades_to_items(db):
    db.queue({"id": 5})
    assert run(repository.delete_estimate(db, 5)) is True
    assert db.transactions == ["begin", "commit"]
    assert db.statements() == [
        "DELETE FROM estimate_items WHERE estimate_id = $1",
        "DELETE FROM estimates WHERE id = $1 RETURNING id",
    ]


def test_item_total_defaults_to_quantity_times_price(db):
    db.queue({"id": 1}, item_row())
    run(repository.create_estimate_item(db, {"estimateId": 5, "name": "Кирпич", "quantity": 1000, "unitPrice": 25}))
    assert 25000 in db.args(0)


def test_explicit_item_total_is_kept(db):
    db.queue({"id": 1}, item_row(total_price=20000.0))
    run(repository.create_estimate_item(db, {"estimateId": 5, "name": "Кирпич", "quantity": 1000, "unitPrice": 25, "totalPrice": 20000}))
    assert 20000 in db.args(0)
    assert 25000 not in db.args(0)


def test_recalculate_total(db):
    db.queue({"total": 31000.0}, estimate_row(total_amount=31000.0))
    estimate = run(repository.recalculate_estimate_total(db, 5))
    assert estimate.total_amount == 31000.0
    assert db.args()[0] == 31000.0


def test_items_listed_in_insertion_order(db):
    run(repository.get_estimate_items(db, 5))
    assert db.sql() == "SELECT * FROM estimate_items WHERE estimate_id = $1 ORDER BY id ASC"


def test_quantity_change_recomputes_item_total(db):
    db.queue(item_row(), item_row(quantity=5.0, total_price=125.0))
    item = run(repository.update_estimate_item(db, 1, {"quantity": 5}))
    assert item.total_price == 125.0
    assert db.sql(0) == "SELECT * FROM estimate_items WHERE id = $1"
    assert db.sql().startswith("UPDATE estimate_items SET quantity = $1, total_price = $2, updated_at = $3")
    assert db.args()[:2] == (5.0, 125.0)


def test_explicit_total_in_patch_skips_the_read(db):
    db.queue(item_row(unit_price=30.0, total_price=28000.0))
    run(repository.update_estimate_item(db, 1, {"unitPrice": 30, "totalPrice": 28000}))
    assert len(db.calls) == 1
    assert db.args()[:2] == (30.0, 28000.0)


def test_recomputing_total_of_missing_item_is_none(db):
    assert run(repository.update_estimate_item(db, 404, {"quantity": 2})) is None
    assert len(db.calls) == 1
