from buildmarket.design import repository

from conftest import run, stamped


def project_row(**fields):
    return stamped(
        **{
            "id": 3,
            "user_id": 7,
            "title": "Кухня",
            "description": None,
            "room_type": "kitchen",
            "area": 12.5,
            "style": "loft",
            "budget": None,
            "status": "draft",
            "visualization_urls": '["https://cdn.example.com/v1.png"]',
            "project_files": '["plan.pdf"]',
            **fields,
        }
    )


def test_add_visualization_appends_and_leaves_files_alone(db):
    db.queue(
        project_row(),
        project_row(visualization_urls='["https://cdn.example.com/v1.png", "https://cdn.example.com/v2.png"]'),
    )
    project = run(repository.add_project_visualization(db, 3, "https://cdn.example.com/v2.png"))

    assert project.visualization_urls == ["https://cdn.example.com/v1.png", "https://cdn.example.com/v2.png"]
    assert project.project_files == ["plan.pdf"]
    assert db.sql() == "UPDATE design_projects SET visualization_urls = $1, updated_at = $2 WHERE id = $3 RETURNING *"
    assert db.args()[0] == '["https://cdn.example.com/v1.png", "https://cdn.example.com/v2.png"]'


def test_add_file_to_legacy_bare_url_row(db):
    db.queue(project_row(project_files="https://old.example.com/a.dwg"), project_row())
    run(repository.add_project_file(db, 3, "b.dwg"))
    assert db.sql().startswith("UPDATE design_projects SET project_files = $1")
    assert db.args()[0] == '["https://old.example.com/a.dwg", "b.dwg"]'


def test_add_to_missing_project(db):
    assert run(repository.add_project_visualization(db, 404, "x")) is None
    assert len(db.calls) == 1


def test_filters(db):
    run(repository.get_design_projects(db, {"userId": 7, "status": "draft"}))
    assert "WHERE user_id = $1 AND status = $2" in db.sql()
