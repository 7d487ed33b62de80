"""
Organizer API - State Assembly Tests

Unit tests for StateAssembler against in-memory and mocked repositories,
plus the GET /state endpoint.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from organizer.auth.models import User
from organizer.comments.models import Comment
from organizer.groups.models import Group
from organizer.state.service import StateAssembler
from organizer.tasks.models import Task


@pytest.fixture
def assembler(user_repository, task_repository, comment_repository, group_repository):
    return StateAssembler(user_repository, task_repository, comment_repository, group_repository)


class TestStateAssembler:

    @pytest.mark.asyncio
    async def test_assembles_user_state(
        self, assembler, user_repository, task_repository, comment_repository, group_repository
    ):
        await user_repository.create(User(id="user1", name="Test User 1", password_hash="x", friends=["user2"]))
        await user_repository.create(User(id="user2", name="Test User 2", password_hash="y"))
        await user_repository.create(User(id="user3", name="Stranger", password_hash="z"))
        await task_repository.create(Task(id="task1", name="Mine", owner="user1"))
        await task_repository.create(Task(id="task2", name="Not mine", owner="user3"))
        await comment_repository.create(Comment(id="comment1", task="task1", owner="user2", content="hi"))
        await comment_repository.create(Comment(id="comment2", task="task2", owner="user3", content="elsewhere"))
        await group_repository.create(Group(id="group1", name="To Do", owner="user1"))

        state = await assembler.assemble("user1")

        assert state.session.authenticated == "AUTHENTICATED"
        assert state.session.id == "user1"
        assert [task.id for task in state.tasks] == ["task1"]
        assert [comment.id for comment in state.comments] == ["comment1"]
        assert [user.id for user in state.users] == ["user1", "user2"]
        assert state.users[0].friends == ["user2"]
        assert [group.id for group in state.groups] == ["group1"]

    @pytest.mark.asyncio
    async def test_empty_collections(self, assembler, user_repository):
        await user_repository.create(User(id="user1", name="Lonely", password_hash="x"))

        state = await assembler.assemble("user1")

        assert state.tasks == []
        assert state.comments == []
        assert state.groups == []
        assert [user.id for user in state.users] == ["user1"]

    @pytest.mark.asyncio
    async def test_related_users_listed_once(
        self, assembler, user_repository, task_repository, comment_repository
    ):
        await user_repository.create(User(id="user1", name="Me", password_hash="x"))
        await user_repository.create(User(id="user2", name="Chatty", password_hash="y"))
        await task_repository.create(Task(id="task1", name="A", owner="user1"))
        for i in range(3):
            await comment_repository.create(Comment(id=f"c{i}", task="task1", owner="user2", content="+1"))

        state = await assembler.assemble("user1")

        assert [user.id for user in state.users] == ["user1", "user2"]

    @pytest.mark.asyncio
    async def test_dangling_owner_reference_is_skipped(self, assembler, user_repository, task_repository, comment_repository):
        await user_repository.create(User(id="user1", name="Me", password_hash="x"))
        await task_repository.create(Task(id="task1", name="A", owner="user1"))
        await comment_repository.create(Comment(id="c1", task="task1", owner="deleted-user", content="?"))

        state = await assembler.assemble("user1")

        assert [user.id for user in state.users] == ["user1"]
        assert [comment.owner for comment in state.comments] == ["deleted-user"]

    @pytest.mark.asyncio
    async def test_database_error_propagates(self, user_repository, comment_repository, group_repository):
        failing_tasks = MagicMock()
        failing_tasks.list_by_owner = AsyncMock(side_effect=RuntimeError("Database error"))
        assembler = StateAssembler(user_repository, failing_tasks, comment_repository, group_repository)

        with pytest.raises(RuntimeError, match="Database error"):
            await assembler.assemble("user1")

    @pytest.mark.asyncio
    async def test_recomputed_every_call(self, assembler, user_repository, task_repository):
        await user_repository.create(User(id="user1", name="Me", password_hash="x"))
        first = await assembler.assemble("user1")
        await task_repository.create(Task(id="later", name="Added later", owner="user1"))
        second = await assembler.assemble("user1")

        assert first.tasks == []
        assert [task.id for task in second.tasks] == ["later"]


class TestStateEndpoint:
    """Tests for GET /state."""

    def test_state_matches_authenticate(self, client, registered_user, auth_headers):
        client.post("/task/new", json={"task": {"name": "Visible"}}, headers=auth_headers)

        response = client.get("/state", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["session"] == {"authenticated": "AUTHENTICATED", "id": registered_user["id"]}
        assert [task["name"] for task in data["tasks"]] == ["Visible"]
        assert data["tasks"][0]["isComplete"] is False
        assert data["users"][0]["id"] == registered_user["id"]
        assert len(data["groups"]) == 3

    def test_state_requires_auth(self, client):
        assert client.get("/state").status_code == 401
