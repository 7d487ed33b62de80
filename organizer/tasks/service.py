"""
Organizer API - Task Service

Business logic for task operations, including the reference checks the
storage layer does not perform.
"""

import logging
from typing import List, Optional

from organizer.auth.repository import UserRepositoryInterface
from organizer.groups.repository import GroupRepositoryInterface
from organizer.tasks.models import Task
from organizer.tasks.repository import TaskRepositoryInterface
from organizer.tasks.schemas import TaskCreatePayload, TaskUpdatePayload, TaskResponse

logger = logging.getLogger(__name__)


class InvalidReferenceError(Exception):
    """A payload names a user, group or task that does not exist."""

    def __init__(self, kind: str, ref_id: str):
        self.kind = kind
        self.ref_id = ref_id
        super().__init__(f"Unknown {kind}: {ref_id}")


class DuplicateTaskError(Exception):
    """A task with the requested ID already exists."""

    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f"Task {task_id} already exists")


def task_to_response(task: Task) -> TaskResponse:
    """Convert a Task model to its API representation."""
    return TaskResponse(
        id=task.id,
        name=task.name,
        is_complete=task.is_complete,
        owner=task.owner,
        group=task.group,
    )


class TaskService:
    """Service layer for task business logic."""

    def __init__(
        self,
        repository: TaskRepositoryInterface,
        user_repository: UserRepositoryInterface,
        group_repository: GroupRepositoryInterface,
    ):
        self.repository = repository
        self.user_repository = user_repository
        self.group_repository = group_repository

    async def _check_references(
        self,
        owner: Optional[str] = None,
        group: Optional[str] = None,
    ) -> None:
        if owner is not None and await self.user_repository.get_by_id(owner) is None:
            raise InvalidReferenceError("owner", owner)
        if group is not None and await self.group_repository.get_by_id(group) is None:
            raise InvalidReferenceError("group", group)

    async def list_tasks(self, owner_id: str) -> List[TaskResponse]:
        """List the tasks owned by owner_id."""
        tasks = await self.repository.list_by_owner(owner_id)
        return [task_to_response(task) for task in tasks]

    async def create_task(self, owner_id: str, payload: TaskCreatePayload) -> TaskResponse:
        """Create a task. The owner defaults to the caller."""
        owner = payload.owner or owner_id
        await self._check_references(owner=owner, group=payload.group)

        if payload.id is not None and await self.repository.find_document(payload.id) is not None:
            raise DuplicateTaskError(payload.id)

        task = Task.create(
            name=payload.name,
            owner=owner,
            is_complete=payload.is_complete,
            group=payload.group,
            task_id=payload.id,
        )
        await self.repository.create(task)
        logger.debug("Created task %s for %s", task.id, owner)
        return task_to_response(task)

    async def update_task(self, owner_id: str, payload: TaskUpdatePayload) -> Optional[TaskResponse]:
        """
        Merge the supplied fields into a task owned by owner_id.

        Returns None if the task does not exist or belongs to someone else.
        An update never creates a task.
        """
        updates = payload.model_dump(exclude_unset=True, by_alias=True)
        updates.pop("id", None)

        await self._check_references(owner=updates.get("owner"), group=updates.get("group"))

        task = await self.repository.update(payload.id, owner_id, updates)
        if task is None:
            return None
        return task_to_response(task)
