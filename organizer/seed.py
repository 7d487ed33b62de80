"""
Organizer API - Demo Data

Seeds an empty database with two demo accounts and their board.
The demo passwords are stored as legacy MD5 digests, which
``AuthService.verify_password`` still accepts.

Run with:
  python -m organizer.seed
"""

import asyncio
import hashlib
import logging

from organizer.auth.models import User
from organizer.auth.repository import MongoUserRepository, UserRepositoryInterface
from organizer.comments.models import Comment
from organizer.comments.repository import CommentRepository, CommentRepositoryInterface
from organizer.database import database
from organizer.groups.models import Group
from organizer.groups.repository import GroupRepository, GroupRepositoryInterface
from organizer.tasks.models import Task
from organizer.tasks.repository import TaskRepository, TaskRepositoryInterface

logger = logging.getLogger(__name__)


def _md5(value: str) -> str:
    return hashlib.md5(value.encode("utf-8")).hexdigest()


DEMO_USERS = [
    User(id="U1", name="Dev", password_hash=_md5("TUPLES"), friends=["U2"]),
    User(id="U2", name="C. Eeyo", password_hash=_md5("PROFITING")),
]

DEMO_GROUPS = [
    Group(id="G1", name="To Do", owner="U1"),
    Group(id="G2", name="Doing", owner="U1"),
    Group(id="G3", name="Done", owner="U1"),
]

DEMO_TASKS = [
    Task(id="T1", name="Refactor tests", group="G1", owner="U1", is_complete=False),
    Task(id="T2", name="Meet with CTO", group="G1", owner="U1", is_complete=True),
    Task(id="T3", name="Compile ES6", group="G2", owner="U2", is_complete=False),
    Task(id="T4", name="Update component", group="G2", owner="U1", is_complete=True),
    Task(id="T5", name="Production optimizations", group="G3", owner="U1", is_complete=False),
]

DEMO_COMMENTS = [
    Comment(id="C1", task="T1", owner="U1", content="Great work!"),
]


async def seed(
    users: UserRepositoryInterface,
    tasks: TaskRepositoryInterface,
    groups: GroupRepositoryInterface,
    comments: CommentRepositoryInterface,
) -> bool:
    """Insert the demo data unless the demo accounts already exist. Returns True if seeded."""
    if await users.get_by_id(DEMO_USERS[0].id) is not None:
        logger.info("Demo data already present, skipping")
        return False

    for user in DEMO_USERS:
        await users.create(user)
    for group in DEMO_GROUPS:
        await groups.create(group)
    for task in DEMO_TASKS:
        await tasks.create(task)
    for comment in DEMO_COMMENTS:
        await comments.create(comment)

    logger.info(
        "Seeded %d users, %d groups, %d tasks, %d comments",
        len(DEMO_USERS), len(DEMO_GROUPS), len(DEMO_TASKS), len(DEMO_COMMENTS),
    )
    return True


async def _seed_mongo() -> None:
    await database.connect()
    try:
        db = database.get_database()
        await seed(
            MongoUserRepository(db),
            TaskRepository(db),
            GroupRepository(db),
            CommentRepository(db),
        )
    finally:
        await database.disconnect()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    asyncio.run(_seed_mongo())


if __name__ == "__main__":
    main()
