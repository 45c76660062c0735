"""Tests for the /api/users endpoints."""

from fastapi.testclient import TestClient

from users_api.main import create_application


def test_create_user_returns_created_record(client) -> None:
    response = client.post(
        "/api/users", json={"name": "Rafia", "email": "rafia@example.com"}
    )

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Rafia"
    assert data["email"] == "rafia@example.com"
    assert data["id"]
    assert data["createdAt"]
    assert "_id" not in data


def test_duplicate_email_is_rejected(client, repository) -> None:
    payload = {"name": "Rafia", "email": "rafia@example.com"}
    assert client.post("/api/users", json=payload).status_code == 201

    response = client.post("/api/users", json=payload)

    assert response.status_code == 400
    assert "duplicate key" in response.json()["error"]
    assert len(repository.users) == 1
    assert len(client.get("/api/users").json()) == 1


def test_missing_name_is_rejected(client, repository) -> None:
    response = client.post("/api/users", json={"email": "a@example.com"})

    assert response.status_code == 400
    assert "name is required" in response.json()["error"]
    assert repository.users == []


def test_missing_email_is_rejected(client, repository) -> None:
    response = client.post("/api/users", json={"name": "Ana"})

    assert response.status_code == 400
    assert "email is required" in response.json()["error"]
    assert repository.users == []


def test_blank_fields_are_rejected(client, repository) -> None:
    response = client.post("/api/users", json={"name": "  ", "email": ""})

    assert response.status_code == 400
    error = response.json()["error"]
    assert "name is required" in error
    assert "email is required" in error
    assert repository.users == []


def test_malformed_json_is_client_error(client, repository) -> None:
    response = client.post(
        "/api/users",
        content=b'{"name": "Rafia",',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert "error" in response.json()
    assert repository.users == []


def test_wrong_field_type_is_client_error(client) -> None:
    response = client.post("/api/users", json={"name": ["x"], "email": "x@example.com"})

    assert response.status_code == 400
    assert "name" in response.json()["error"]


def test_list_is_empty_on_empty_store(client) -> None:
    response = client.get("/api/users")

    assert response.status_code == 200
    assert response.json() == []


def test_list_returns_created_users_in_insertion_order(client) -> None:
    created = []
    for i in range(3):
        response = client.post(
            "/api/users", json={"name": f"user{i}", "email": f"user{i}@example.com"}
        )
        created.append(response.json())

    response = client.get("/api/users")

    assert response.status_code == 200
    listed = response.json()
    assert [u["email"] for u in listed] == [u["email"] for u in created]
    assert [u["id"] for u in listed] == [u["id"] for u in created]


def test_trailing_slash_routes(client) -> None:
    response = client.post(
        "/api/users/", json={"name": "Rafia", "email": "rafia@example.com"}
    )
    assert response.status_code == 201

    response = client.get("/api/users/")
    assert response.status_code == 200
    assert len(response.json()) == 1


def test_list_store_failure_is_server_error(client, repository) -> None:
    repository.fail_reads = True

    response = client.get("/api/users")

    assert response.status_code == 500
    assert response.json() == {"error": "connection closed"}


def test_unsupported_verb_uses_error_body(client) -> None:
    response = client.delete("/api/users")

    assert response.status_code == 405
    assert "error" in response.json()


def test_unknown_path_is_not_found(client) -> None:
    response = client.get("/api/unknown")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_root_reports_running(client) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.text == "API is running..."


def test_root_does_not_need_store(settings, container, connection) -> None:
    # No lifespan: the store is never connected.
    app = create_application(settings=settings, container=container)
    client = TestClient(app)

    response = client.get("/")

    assert response.status_code == 200
    assert connection.is_connected is False


def test_health_reports_database_state(client, connection) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "connected"}


def test_cors_allows_any_origin(client) -> None:
    response = client.get("/api/users", headers={"Origin": "http://example.org"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_create_user_keeps_fields_exactly_as_sent(client) -> None:
    payload = {"name": " Rafia ", "email": "rafia@example.com "}

    response = client.post("/api/users", json=payload)

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == " Rafia "
    assert data["email"] == "rafia@example.com "
    listed = client.get("/api/users").json()
    assert listed[0]["name"] == " Rafia "
