from fastapi.testclient import TestClient

from buildmarket.main import app, get_storage


def test_health_does_not_need_the_database():
    # Without the context manager the lifespan (and the pool) never starts.
    client = TestClient(app)
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_storage_dependency_reads_app_state(db):
    from buildmarket.storage import Storage

    app.state.storage = Storage(db)
    try:
        request = type("FakeRequest", (), {"app": app})()
        assert get_storage(request) is app.state.storage
    finally:
        del app.state.storage


def test_only_health_is_routed():
    client = TestClient(app)
    assert client.get("/").status_code == 404
