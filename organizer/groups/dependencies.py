from typing import Annotated

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from organizer.database import get_database
from organizer.groups.repository import GroupRepository, GroupRepositoryInterface


async def get_group_repository(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> GroupRepositoryInterface:
    """Dependency to get group repository instance."""
    return GroupRepository(db)
