"""
Organizer API - Group Repository
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from organizer.groups.models import Group

logger = logging.getLogger(__name__)


class GroupRepositoryInterface(ABC):
    """Abstract interface for group repository."""

    @abstractmethod
    async def create(self, group: Group) -> Group:
        pass

    @abstractmethod
    async def get_by_id(self, group_id: str) -> Optional[Group]:
        pass

    @abstractmethod
    async def list_by_owner(self, owner_id: str) -> List[Group]:
        pass


class GroupRepository(GroupRepositoryInterface):
    """MongoDB implementation of the group repository."""

    COLLECTION_NAME = "groups"
    PROJECTION = {"_id": 0}
    HAS_ID = {"id": {"$type": "string"}}

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.COLLECTION_NAME]

    async def create(self, group: Group) -> Group:
        try:
            await self.collection.insert_one(group.to_dict())
        except Exception as e:
            logger.error(f"[GroupRepository] Error creating group {group.id}: {e}", exc_info=True)
            raise
        return group

    async def get_by_id(self, group_id: str) -> Optional[Group]:
        doc = await self.collection.find_one({"id": group_id}, self.PROJECTION)
        if doc is None:
            return None
        return Group.from_dict(doc)

    async def list_by_owner(self, owner_id: str) -> List[Group]:
        cursor = self.collection.find({"owner": owner_id, **self.HAS_ID}, self.PROJECTION)
        groups: List[Group] = []
        async for doc in cursor:
            groups.append(Group.from_dict(doc))
        return groups


class InMemoryGroupRepository(GroupRepositoryInterface):
    """
    In-memory implementation for CI-safe testing.
    """

    def __init__(self):
        self._groups: Dict[str, dict] = {}

    def clear(self) -> None:
        self._groups.clear()

    async def create(self, group: Group) -> Group:
        self._groups[group.id] = group.to_dict()
        return group

    async def get_by_id(self, group_id: str) -> Optional[Group]:
        doc = self._groups.get(group_id)
        if doc is None:
            return None
        return Group.from_dict(doc)

    async def list_by_owner(self, owner_id: str) -> List[Group]:
        return [
            Group.from_dict(doc)
            for doc in self._groups.values()
            if doc.get("owner") == owner_id and isinstance(doc.get("id"), str)
        ]
