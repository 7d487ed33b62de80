import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from organizer.auth.models import User

logger = logging.getLogger(__name__)


class UserRepositoryInterface(ABC):
    """Abstract interface for user repository.

    This interface allows swapping implementations (in-memory -> MongoDB).
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user."""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[User]:
        """Get user by account name."""
        pass

    @abstractmethod
    async def exists_by_name(self, name: str) -> bool:
        """Check if an account name is taken."""
        pass

    @abstractmethod
    async def list_by_ids(self, user_ids: List[str]) -> List[User]:
        """Get every user whose ID is in user_ids. Unknown IDs are skipped."""
        pass


class MongoUserRepository(UserRepositoryInterface):
    """MongoDB implementation of the user repository.

    Documents are keyed by the application-level ``id`` field; Mongo's own
    ``_id`` is projected out of every read.
    """

    COLLECTION_NAME = "users"
    PROJECTION = {"_id": 0}
    HAS_ID = {"id": {"$type": "string"}}

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.COLLECTION_NAME]

    async def create(self, user: User) -> User:
        try:
            await self.collection.insert_one(user.to_dict())
        except Exception as e:
            logger.error(f"[MongoUserRepository] Error creating user {user.name}: {e}", exc_info=True)
            raise
        logger.info(f"[MongoUserRepository] User created: name={user.name}, id={user.id}")
        return user

    async def get_by_id(self, user_id: str) -> Optional[User]:
        doc = await self.collection.find_one({"id": user_id}, self.PROJECTION)
        if doc is None:
            return None
        return User.from_dict(doc)

    async def get_by_name(self, name: str) -> Optional[User]:
        doc = await self.collection.find_one({"name": name, **self.HAS_ID}, self.PROJECTION)
        if doc is None:
            return None
        return User.from_dict(doc)

    async def exists_by_name(self, name: str) -> bool:
        doc = await self.collection.find_one({"name": name}, {"_id": 1})
        return doc is not None

    async def list_by_ids(self, user_ids: List[str]) -> List[User]:
        if not user_ids:
            return []
        cursor = self.collection.find({"id": {"$in": list(user_ids)}}, self.PROJECTION)
        users = []
        async for doc in cursor:
            users.append(User.from_dict(doc))
        return users


class InMemoryUserRepository(UserRepositoryInterface):
    """In-memory user repository for CI-safe testing."""

    def __init__(self):
        self._users: Dict[str, dict] = {}

    def clear(self) -> None:
        self._users.clear()

    async def create(self, user: User) -> User:
        self._users[user.id] = user.to_dict()
        return user

    async def get_by_id(self, user_id: str) -> Optional[User]:
        doc = self._users.get(user_id)
        if doc is None:
            return None
        return User.from_dict(doc)

    async def get_by_name(self, name: str) -> Optional[User]:
        for doc in self._users.values():
            if doc.get("name") == name and isinstance(doc.get("id"), str):
                return User.from_dict(doc)
        return None

    async def exists_by_name(self, name: str) -> bool:
        return await self.get_by_name(name) is not None

    async def list_by_ids(self, user_ids: List[str]) -> List[User]:
        wanted = set(user_ids)
        return [User.from_dict(doc) for uid, doc in self._users.items() if uid in wanted]
