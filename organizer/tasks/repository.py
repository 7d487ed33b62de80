"""
Organizer API - Task Repository

Repository pattern for task data access.
Includes MongoDB implementation for runtime and an in-memory one for tests.

The storage layer performs no shape validation: ``insert_document`` writes
whatever mapping it is given. Validation lives in the API schemas.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from organizer.tasks.models import Task

logger = logging.getLogger(__name__)


class TaskRepositoryInterface(ABC):
    """
    Abstract interface for task repository.

    Enables swapping implementations (MongoDB for runtime, in-memory for tests).
    """

    async def create(self, task: Task) -> Task:
        await self.insert_document(task.to_dict())
        return task

    @abstractmethod
    async def insert_document(self, document: dict) -> None:
        """Store a raw task document as-is."""
        pass

    @abstractmethod
    async def find_document(self, task_id: str) -> Optional[dict]:
        """Fetch the raw stored document for a task ID."""
        pass

    async def get_by_id(self, task_id: str) -> Optional[Task]:
        doc = await self.find_document(task_id)
        if doc is None:
            return None
        return Task.from_dict(doc)

    @abstractmethod
    async def list_by_owner(self, owner_id: str) -> List[Task]:
        pass

    @abstractmethod
    async def update(self, task_id: str, owner_id: str, updates: dict) -> Optional[Task]:
        """Merge updates into the task owned by owner_id. Returns None if no such task."""
        pass


class TaskRepository(TaskRepositoryInterface):
    """
    MongoDB implementation of the task repository.

    Documents are keyed by the application-level ``id`` field; ``_id`` is
    never returned.
    """

    COLLECTION_NAME = "tasks"
    PROJECTION = {"_id": 0}
    # documents stored without a string id cannot be addressed by the API
    HAS_ID = {"id": {"$type": "string"}}

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.COLLECTION_NAME]

    async def insert_document(self, document: dict) -> None:
        # insert_one adds _id to the mapping it is handed
        try:
            await self.collection.insert_one(dict(document))
        except Exception as e:
            logger.error(f"[TaskRepository] Error inserting task {document.get('id')}: {e}", exc_info=True)
            raise

    async def find_document(self, task_id: str) -> Optional[dict]:
        return await self.collection.find_one({"id": task_id}, self.PROJECTION)

    async def list_by_owner(self, owner_id: str) -> List[Task]:
        cursor = self.collection.find({"owner": owner_id, **self.HAS_ID}, self.PROJECTION)
        tasks: List[Task] = []
        async for doc in cursor:
            tasks.append(Task.from_dict(doc))
        return tasks

    async def update(self, task_id: str, owner_id: str, updates: dict) -> Optional[Task]:
        set_fields = {k: v for k, v in updates.items() if v is not None}
        unset_fields = {k: "" for k, v in updates.items() if v is None}
        operation: dict = {}
        if set_fields:
            operation["$set"] = set_fields
        if unset_fields:
            operation["$unset"] = unset_fields

        query = {"id": task_id, "owner": owner_id}
        if not operation:
            doc = await self.collection.find_one(query, self.PROJECTION)
        else:
            doc = await self.collection.find_one_and_update(
                query,
                operation,
                projection=self.PROJECTION,
                return_document=True,
            )
        if doc is None:
            return None
        return Task.from_dict(doc)


class InMemoryTaskRepository(TaskRepositoryInterface):
    """
    In-memory implementation for CI-safe testing.
    """

    def __init__(self):
        self._tasks: Dict[str, dict] = {}

    def clear(self) -> None:
        self._tasks.clear()

    async def insert_document(self, document: dict) -> None:
        self._tasks[document.get("id")] = dict(document)

    async def find_document(self, task_id: str) -> Optional[dict]:
        doc = self._tasks.get(task_id)
        return dict(doc) if doc is not None else None

    async def list_by_owner(self, owner_id: str) -> List[Task]:
        return [
            Task.from_dict(doc)
            for doc in self._tasks.values()
            if doc.get("owner") == owner_id and isinstance(doc.get("id"), str)
        ]

    async def update(self, task_id: str, owner_id: str, updates: dict) -> Optional[Task]:
        doc = self._tasks.get(task_id)
        if doc is None or doc.get("owner") != owner_id:
            return None

        for key, value in updates.items():
            if value is None:
                doc.pop(key, None)
            else:
                doc[key] = value
        return Task.from_dict(doc)
