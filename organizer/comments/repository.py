"""
Organizer API - Comment Repository
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List

from motor.motor_asyncio import AsyncIOMotorDatabase

from organizer.comments.models import Comment

logger = logging.getLogger(__name__)


class CommentRepositoryInterface(ABC):
    """Abstract interface for comment repository."""

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        pass

    @abstractmethod
    async def list_by_tasks(self, task_ids: List[str]) -> List[Comment]:
        """List every comment attached to one of task_ids."""
        pass


class CommentRepository(CommentRepositoryInterface):
    """MongoDB implementation of the comment repository."""

    COLLECTION_NAME = "comments"
    PROJECTION = {"_id": 0}
    HAS_ID = {"id": {"$type": "string"}}

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.COLLECTION_NAME]

    async def create(self, comment: Comment) -> Comment:
        try:
            await self.collection.insert_one(comment.to_dict())
        except Exception as e:
            logger.error(f"[CommentRepository] Error creating comment {comment.id}: {e}", exc_info=True)
            raise
        return comment

    async def list_by_tasks(self, task_ids: List[str]) -> List[Comment]:
        if not task_ids:
            return []
        cursor = self.collection.find({"task": {"$in": list(task_ids)}, **self.HAS_ID}, self.PROJECTION)
        comments: List[Comment] = []
        async for doc in cursor:
            comments.append(Comment.from_dict(doc))
        return comments


class InMemoryCommentRepository(CommentRepositoryInterface):
    """
    In-memory implementation for CI-safe testing.
    """

    def __init__(self):
        self._comments: Dict[str, dict] = {}

    def clear(self) -> None:
        self._comments.clear()

    async def create(self, comment: Comment) -> Comment:
        self._comments[comment.id] = comment.to_dict()
        return comment

    async def list_by_tasks(self, task_ids: List[str]) -> List[Comment]:
        wanted = set(task_ids)
        return [
            Comment.from_dict(doc)
            for doc in self._comments.values()
            if doc.get("task") in wanted and isinstance(doc.get("id"), str)
        ]
