# backend/tests/api/test_projects.py
from fastapi import status
from sqlalchemy import text


def test_create_project(client):
    """Test project creation"""
    response = client.post(
        "/api/projects",
        json={"name": "New Project", "client_name": "Acme"}
    )

    assert response.status_code == status.HTTP_200_OK
    project_id = response.json()["id"]

    detail = client.get(f"/api/projects/{project_id}").json()
    assert detail["name"] == "New Project"
    assert detail["client_name"] == "Acme"
    assert detail["status"] == "active"
    assert detail["created_at"] is not None
    assert detail["sections"] == []
    assert detail["todos"] == []
    assert detail["hours"] == []
    assert detail["files"] == []


def test_create_project_without_name(client):
    response = client.post("/api/projects", json={"client_name": "Acme"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "Project name is required"}


def test_create_project_with_empty_name(client):
    response = client.post("/api/projects", json={"name": ""})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_list_projects_newest_first(client):
    first = client.post("/api/projects", json={"name": "First"}).json()["id"]
    second = client.post("/api/projects", json={"name": "Second"}).json()["id"]

    response = client.get("/api/projects")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [p["id"] for p in data] == [second, first]
    assert all(p["thumbnail"] is None for p in data)


def test_list_projects_thumbnail(client, sample_project):
    client.post(
        f"/api/projects/{sample_project}/files",
        data={"section_type": "assets"},
        files={"file": ("brief.pdf", b"%PDF", "application/pdf")}
    )
    image = client.post(
        f"/api/projects/{sample_project}/files",
        data={"section_type": "progress"},
        files={"file": ("shot.png", b"png", "image/png")}
    ).json()

    data = client.get("/api/projects").json()
    assert data[0]["thumbnail"] == image["filename"]


def test_update_project(client):
    """Round trip: create, complete, read back"""
    project_id = client.post(
        "/api/projects",
        json={"name": "Redesign_2026", "client_name": "Acme"}
    ).json()["id"]

    response = client.patch(f"/api/projects/{project_id}", json={"status": "completed"})
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": True}

    detail = client.get(f"/api/projects/{project_id}").json()
    assert detail["status"] == "completed"
    assert detail["name"] == "Redesign_2026"
    assert detail["client_name"] == "Acme"


def test_update_project_empty_patch(client, sample_project):
    response = client.patch(f"/api/projects/{sample_project}", json={})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "No updates provided"}


def test_update_project_invalid_status(client, sample_project):
    response = client.patch(f"/api/projects/{sample_project}", json={"status": "paused"})
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_update_nonexistent_project_is_noop(client):
    response = client.patch("/api/projects/99999", json={"name": "Ghost"})
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": True}


def test_delete_project(client, sample_project):
    """Test deleting a project"""
    response = client.delete(f"/api/projects/{sample_project}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": True, "changes": 1}

    get_response = client.get(f"/api/projects/{sample_project}")
    assert get_response.status_code == status.HTTP_404_NOT_FOUND


def test_delete_project_removes_uploads(client, sample_project, uploads_dir):
    upload = client.post(
        f"/api/projects/{sample_project}/files",
        data={"section_type": "assets"},
        files={"file": ("logo.png", b"png", "image/png")}
    ).json()
    assert (uploads_dir / upload["filename"]).exists()

    response = client.delete(f"/api/projects/{sample_project}")

    assert response.status_code == status.HTTP_200_OK
    assert not (uploads_dir / upload["filename"]).exists()


def test_delete_nonexistent_project(client):
    response = client.delete("/api/projects/99999")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert "not found" in response.json()["error"]


def test_get_nonexistent_project(client):
    """Test getting a project that doesn't exist"""
    response = client.get("/api/projects/99999")
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_upsert_section(client, sample_project):
    for content in ("First draft", "Final scope"):
        response = client.patch(
            f"/api/projects/{sample_project}/section",
            json={"section_type": "scope", "content": content}
        )
        assert response.status_code == status.HTTP_200_OK

    sections = client.get(f"/api/projects/{sample_project}").json()["sections"]
    assert len(sections) == 1
    assert sections[0]["section_type"] == "scope"
    assert sections[0]["content"] == "Final scope"


def test_upsert_section_unknown_project(client):
    response = client.patch(
        "/api/projects/99999/section",
        json={"section_type": "overview", "content": "x"}
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_export_handover(client, sample_project):
    client.patch(
        f"/api/projects/{sample_project}/section",
        json={"section_type": "overview", "content": "Ship <fast>"}
    )
    client.post(f"/api/projects/{sample_project}/hours",
                json={"date": "2026-01-02", "duration": 1.5, "description": "Kickoff"})
    client.post(f"/api/projects/{sample_project}/hours",
                json={"date": "2026-01-03", "duration": 2, "description": "Build"})

    response = client.get(f"/api/projects/{sample_project}/export")

    assert response.status_code == status.HTTP_200_OK
    assert response.headers["content-type"].startswith("text/html")
    assert response.headers["content-disposition"] == 'attachment; filename="test_project_handover.html"'
    assert "Ship &lt;fast&gt;" in response.text
    assert "No requirements provided." in response.text
    assert "Total: 3.5h" in response.text


def test_export_nonexistent_project(client):
    response = client.get("/api/projects/99999/export")
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_database_failure_on_read_returns_json_error(client, database, sample_project):
    with database.engine.begin() as connection:
        connection.execute(text("DROP TABLE project_files"))

    for path in ("/api/projects", f"/api/projects/{sample_project}"):
        response = client.get(path)
        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert "Database error" in response.json()["error"]
