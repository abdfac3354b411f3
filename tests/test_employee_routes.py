"""
HTTP tests for the employee, department, auth and health endpoints.

Storage and cache are replaced with in-memory fakes through dependency overrides.
"""

import json

from app.api.dependencies import get_cache_store, get_employee_repository
from app.core.cache import CacheStore
from app.core.security import create_access_token
from app.main import app
from tests.fakes import BrokenRedis, FailingEmployeeRepository, make_employee

EMPLOYEE_BODY = {
    "name": "Maria Souza",
    "email": "maria@example.com",
    "corporate_email": "maria.souza@company.com",
    "position": "Analyst",
    "enps": 9,
    "response_date": "2022-01-20",
}


def test_list_employees_empty_store(client):
    response = client.get("/api/employees?page=1&pageSize=10")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.content == (
        b'{"employees":[],"totalCount":0,"page":1,"pageSize":10,"totalPages":0}'
    )


def test_list_employees_invalid_params_fall_back_to_defaults(client, employee_repo):
    response = client.get("/api/employees?page=abc&pageSize=500")

    body = response.json()
    assert body["page"] == 1
    assert body["pageSize"] == 10
    assert employee_repo.paginated_calls == [(1, 10)]


def test_list_employees_hit_bypasses_storage(client, employee_repo, fake_redis):
    fake_redis.store["employees:page:1:size:10"] = b'{"cached":true}'

    response = client.get("/api/employees")

    assert response.status_code == 200
    assert response.content == b'{"cached":true}'
    assert employee_repo.paginated_calls == []


def test_create_employee_invalidates_base_key(client, employee_repo, fake_redis):
    # Arrange
    fake_redis.store["employees"] = b"stale"

    # Act
    response = client.post("/api/employees", json=EMPLOYEE_BODY)

    # Assert
    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 1
    assert body["position"] == "Analyst"
    assert body["role"] is None
    assert "employees" not in fake_redis.store
    assert employee_repo.find_by_id(1).item.corporate_email == "maria.souza@company.com"


def test_create_employee_rejects_malformed_body(client):
    response = client.post("/api/employees", json={"name": "No Emails"})

    assert response.status_code == 422


def test_get_employee_by_id(client, employee_repo):
    employee_repo.create(make_employee("John Doe"))

    found = client.get("/api/employees/1")
    missing = client.get("/api/employees/2")

    assert found.status_code == 200
    assert found.json()["name"] == "John Doe"
    assert missing.status_code == 404


def test_invalid_employee_id_is_rejected(client):
    response = client.get("/api/employees/not-a-number")

    assert response.status_code == 422


def test_update_employee_replaces_record(client, employee_repo, fake_redis):
    # Arrange
    employee_repo.create(make_employee("John Doe", position="Intern"))
    fake_redis.store["employees"] = b"stale"

    # Act
    response = client.put("/api/employees/1", json=EMPLOYEE_BODY)

    # Assert
    assert response.status_code == 200
    assert response.json()["name"] == "Maria Souza"
    assert response.json()["id"] == 1
    assert "employees" not in fake_redis.store


def test_update_missing_employee_returns_404(client):
    response = client.put("/api/employees/7", json=EMPLOYEE_BODY)

    assert response.status_code == 404


def test_delete_employee(client, employee_repo, fake_redis):
    employee_repo.create(make_employee("John Doe"))
    fake_redis.store["employees"] = b"stale"

    response = client.delete("/api/employees/1")

    assert response.status_code == 204
    assert employee_repo.deleted_ids == [1]
    assert "employees" not in fake_redis.store


def test_delete_succeeds_when_cache_delete_fails(client, employee_repo):
    # Arrange
    employee_repo.create(make_employee("John Doe"))
    app.dependency_overrides[get_cache_store] = lambda: CacheStore(BrokenRedis())

    # Act
    response = client.delete("/api/employees/1")

    # Assert
    assert response.status_code == 204
    assert employee_repo.deleted_ids == [1]


def test_storage_failure_returns_500(client):
    app.dependency_overrides[get_employee_repository] = lambda: FailingEmployeeRepository()

    response = client.get("/api/employees")

    assert response.status_code == 500
    assert response.json() == {"detail": "Storage failure"}


def test_cached_page_survives_base_key_invalidation(client, employee_repo):
    first = client.get("/api/employees?page=1&pageSize=10").json()
    client.post("/api/employees", json=EMPLOYEE_BODY)
    second = client.get("/api/employees?page=1&pageSize=10").json()

    assert first["totalCount"] == 0
    assert second["totalCount"] == 0


def test_departments_create_and_list(client):
    created = client.post(
        "/api/departments",
        json={
            "company_level0": "Company",
            "company_level1": "Board",
            "company_level2": "Management",
            "company_level3": "Coordination",
            "company_level4": "Area",
        },
    )
    listed = client.get("/api/departments")

    assert created.status_code == 201
    assert created.json()["id"] == 1
    assert [d["company_level4"] for d in listed.json()] == ["Area"]


def test_protected_routes_require_token(anonymous_client):
    missing = anonymous_client.get("/api/employees")
    malformed = anonymous_client.get(
        "/api/employees", headers={"Authorization": "token-without-scheme"}
    )
    invalid = anonymous_client.get(
        "/api/employees", headers={"Authorization": "Bearer not-a-jwt"}
    )

    assert missing.status_code == 401
    assert missing.json()["detail"] == "Missing auth token"
    assert malformed.status_code == 401
    assert malformed.json()["detail"] == "Invalid token format"
    assert invalid.status_code == 401
    assert invalid.json()["detail"] == "Invalid token"


def test_login_token_grants_access(anonymous_client):
    login = anonymous_client.post("/login", json={"username": "hr-admin", "password": "x"})
    token = login.json()["token"]

    response = anonymous_client.get(
        "/api/employees", headers={"Authorization": f"Bearer {token}"}
    )

    assert login.status_code == 200
    assert response.status_code == 200
    assert json.loads(response.content)["totalCount"] == 0


def test_login_rejects_empty_username(anonymous_client):
    response = anonymous_client.post("/login", json={"username": "", "password": "x"})

    assert response.status_code == 401


def test_expired_token_is_rejected(anonymous_client):
    token = create_access_token("hr-admin", expires_minutes=-1)

    response = anonymous_client.get(
        "/api/employees", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 401


def test_ping(anonymous_client):
    response = anonymous_client.get("/ping")

    assert response.json() == {"status": "ok", "message": "pong"}
