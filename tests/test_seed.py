"""
Organizer API - Demo Data Tests
"""

import asyncio

import pytest

from organizer.seed import DEMO_TASKS, DEMO_USERS, seed
from organizer.state.service import StateAssembler


@pytest.fixture
def repositories(user_repository, task_repository, group_repository, comment_repository):
    return user_repository, task_repository, group_repository, comment_repository


class TestSeed:

    @pytest.mark.asyncio
    async def test_seed_once(self, repositories):
        assert await seed(*repositories) is True
        assert await seed(*repositories) is False

    @pytest.mark.asyncio
    async def test_seeded_state_for_dev(self, repositories):
        users, tasks, groups, comments = repositories
        await seed(*repositories)

        state = await StateAssembler(users, tasks, comments, groups).assemble("U1")

        owned = [t.id for t in DEMO_TASKS if t.owner == "U1"]
        assert sorted(task.id for task in state.tasks) == sorted(owned)
        assert [comment.id for comment in state.comments] == ["C1"]
        assert [user.name for user in state.users] == ["Dev"]
        assert len(state.groups) == 3


def test_demo_account_can_authenticate(client, user_repository, task_repository, group_repository, comment_repository):
    asyncio.run(seed(user_repository, task_repository, group_repository, comment_repository))

    response = client.post("/authenticate", json={"username": "Dev", "password": "TUPLES"})

    assert response.status_code == 200
    assert response.json()["state"]["session"]["id"] == DEMO_USERS[0].id
