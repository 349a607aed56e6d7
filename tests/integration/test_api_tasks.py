"""
Integration tests for the /api/tasks endpoints.
"""
from unittest.mock import patch

import pytest
from bson import ObjectId

from todo_api.domain.exceptions import UnexpectedError

pytestmark = pytest.mark.integration


def _create(client, headers, **body) -> dict:
    response = client.post("/api/tasks", json=body, headers=headers)
    assert response.status_code == 200
    return response.json()["result"]


class TestAuthRequired:
    """Protected routes reject missing or bad tokens"""

    @pytest.mark.parametrize(
        "method, path",
        [
            ("get", "/api/tasks"),
            ("get", f"/api/tasks/{ObjectId()}"),
            ("delete", f"/api/tasks/{ObjectId()}"),
        ],
    )
    def test_missing_token(self, client, method, path):
        response = getattr(client, method)(path)
        assert response.status_code == 401

    def test_invalid_token(self, client):
        response = client.get("/api/tasks", headers={"Authorization": "Bearer forged.token.value"})
        assert response.status_code == 401

    def test_bare_token_is_accepted(self, client, login):
        headers = login()
        bare = {"Authorization": headers["Authorization"].split(" ", 1)[1]}
        assert client.get("/api/tasks", headers=bare).status_code == 200


class TestCreateTask:
    """Tests for POST /api/tasks"""

    def test_create_defaults_status(self, client, login):
        response = client.post("/api/tasks", json={"name": "Buy milk"}, headers=login())
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Successful!"
        assert data["result"]["name"] == "Buy milk"
        assert data["result"]["status"] == "to_do"
        assert data["result"]["created_at"]
        assert data["result"]["id"]

    def test_create_validation_error(self, client, login):
        response = client.post("/api/tasks", json={"name": "ab"}, headers=login())
        assert response.status_code == 400
        assert response.json()["message"][0]["path"] == ["name"]

    def test_create_cannot_choose_owner(self, client, login):
        response = client.post(
            "/api/tasks",
            json={"name": "Buy milk", "user_id": "someone-else"},
            headers=login(),
        )
        assert response.status_code == 400

    def test_store_failure_is_generic(self, client, login, task_repo):
        headers = login()
        with patch.object(task_repo, "create", side_effect=UnexpectedError("write concern")):
            response = client.post("/api/tasks", json={"name": "Buy milk"}, headers=headers)
        assert response.status_code == 500
        assert response.json() == "Error"


class TestReadTasks:
    """Tests for GET /api/tasks and GET /api/tasks/{id}"""

    def test_round_trip(self, client, login):
        headers = login()
        created = _create(client, headers, name="Buy milk", status="in_progress")

        response = client.get(f"/api/tasks/{created['id']}", headers=headers)
        assert response.status_code == 200
        fetched = response.json()["result"]
        assert fetched == created
        assert "message" not in response.json()

    def test_list_only_returns_own_tasks(self, client, login):
        alice = login("alice@example.com")
        bob = login("bob@example.com")
        _create(client, alice, name="Alice task")
        _create(client, bob, name="Bob task")

        alice_tasks = client.get("/api/tasks", headers=alice).json()
        bob_tasks = client.get("/api/tasks", headers=bob).json()
        assert [task["name"] for task in alice_tasks] == ["Alice task"]
        assert [task["name"] for task in bob_tasks] == ["Bob task"]

    def test_list_empty(self, client, login):
        response = client.get("/api/tasks", headers=login())
        assert response.status_code == 200
        assert response.json() == []

    def test_other_users_task_is_not_found(self, client, login):
        alice = login("alice@example.com")
        bob = login("bob@example.com")
        created = _create(client, alice, name="Alice task")

        response = client.get(f"/api/tasks/{created['id']}", headers=bob)
        assert response.status_code == 200
        assert response.json() == {"message": "Not found"}

    def test_malformed_id_is_not_found(self, client, login):
        response = client.get("/api/tasks/not-an-id", headers=login())
        assert response.status_code == 200
        assert response.json() == {"message": "Not found"}


class TestUpdateTask:
    """Tests for PUT /api/tasks/{id}"""

    def test_partial_update(self, client, login):
        headers = login()
        created = _create(client, headers, name="Buy milk")

        response = client.put(f"/api/tasks/{created['id']}", json={"status": "done"}, headers=headers)
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Update successful!"
        assert data["result"]["status"] == "done"
        assert data["result"]["name"] == "Buy milk"
        assert data["result"]["created_at"] == created["created_at"]

    def test_update_validation_error(self, client, login):
        headers = login()
        created = _create(client, headers, name="Buy milk")
        response = client.put(f"/api/tasks/{created['id']}", json={"status": "blocked"}, headers=headers)
        assert response.status_code == 400
        assert response.json()["message"][0]["path"] == ["status"]

    def test_update_other_users_task(self, client, login):
        alice = login("alice@example.com")
        bob = login("bob@example.com")
        created = _create(client, alice, name="Alice task")

        response = client.put(f"/api/tasks/{created['id']}", json={"name": "Hijacked"}, headers=bob)
        assert response.json() == {"message": "Not found"}
        assert client.get(f"/api/tasks/{created['id']}", headers=alice).json()["result"]["name"] == "Alice task"


class TestDeleteTask:
    """Tests for DELETE /api/tasks/{id}"""

    def test_delete_returns_removed_record(self, client, login):
        headers = login()
        created = _create(client, headers, name="Buy milk")

        response = client.delete(f"/api/tasks/{created['id']}", headers=headers)
        assert response.status_code == 200
        assert response.json() == {"message": "Delete successful!", "result": created}
        assert client.get("/api/tasks", headers=headers).json() == []

    def test_delete_nonexistent(self, client, login):
        response = client.delete(f"/api/tasks/{ObjectId()}", headers=login())
        assert response.status_code == 200
        assert response.json() == {"message": "Not found"}

    def test_delete_other_users_task(self, client, login):
        alice = login("alice@example.com")
        bob = login("bob@example.com")
        created = _create(client, alice, name="Alice task")

        response = client.delete(f"/api/tasks/{created['id']}", headers=bob)
        assert response.json() == {"message": "Not found"}
        assert len(client.get("/api/tasks", headers=alice).json()) == 1
