"""
Organizer API - Comment Tests
"""

import pytest


@pytest.fixture
def task_id(client, auth_headers):
    response = client.post("/task/new", json={"task": {"id": "commented", "name": "Has comments"}}, headers=auth_headers)
    return response.json()["id"]


class TestCreateComment:
    """Tests for POST /comment/new."""

    def test_create_comment(self, client, auth_headers, registered_user, task_id):
        response = client.post(
            "/comment/new",
            json={"comment": {"task": task_id, "content": "Looks good"}},
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["id"]
        assert data["task"] == task_id
        assert data["owner"] == registered_user["id"]
        assert data["content"] == "Looks good"

    def test_create_comment_with_client_id(self, client, auth_headers, task_id):
        response = client.post(
            "/comment/new",
            json={"comment": {"id": "C-1", "task": task_id, "content": "Pinned"}},
            headers=auth_headers,
        )
        assert response.json()["id"] == "C-1"

    def test_comment_on_other_users_task(self, client, second_user, task_id):
        response = client.post(
            "/comment/new",
            json={"comment": {"task": task_id, "content": "Drive-by"}},
            headers=second_user["headers"],
        )
        assert response.status_code == 200
        assert response.json()["owner"] == second_user["id"]

    def test_comment_on_unknown_task(self, client, auth_headers):
        response = client.post(
            "/comment/new",
            json={"comment": {"task": "existing-task-id", "content": "Hello"}},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert "existing-task-id" in response.json()["detail"]

    def test_comment_unknown_owner(self, client, auth_headers, task_id):
        response = client.post(
            "/comment/new",
            json={"comment": {"task": task_id, "owner": "nobody", "content": "Hello"}},
            headers=auth_headers,
        )
        assert response.status_code == 400

    @pytest.mark.parametrize("content", ["", "   ", None, 42])
    def test_comment_requires_content(self, client, auth_headers, task_id, content):
        response = client.post(
            "/comment/new",
            json={"comment": {"task": task_id, "content": content}},
            headers=auth_headers,
        )
        assert response.status_code == 422

    def test_comment_requires_auth(self, client, task_id):
        response = client.post("/comment/new", json={"comment": {"task": task_id, "content": "x"}})
        assert response.status_code == 401
