"""
Organizer API - Task Router

Task listing, creation and partial update.
All endpoints are JWT-protected.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from organizer.database import get_database
from organizer.auth.dependencies import CurrentUser, get_user_repository
from organizer.auth.repository import UserRepositoryInterface
from organizer.groups.dependencies import get_group_repository
from organizer.groups.repository import GroupRepositoryInterface
from organizer.tasks.repository import TaskRepository, TaskRepositoryInterface
from organizer.tasks.schemas import TaskNewRequest, TaskUpdateRequest, TaskResponse
from organizer.tasks.service import DuplicateTaskError, InvalidReferenceError, TaskService


router = APIRouter(tags=["Tasks"])


async def get_task_repository(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> TaskRepositoryInterface:
    """Dependency to get task repository instance."""
    return TaskRepository(db)


async def get_task_service(
    repository: Annotated[TaskRepositoryInterface, Depends(get_task_repository)],
    user_repository: Annotated[UserRepositoryInterface, Depends(get_user_repository)],
    group_repository: Annotated[GroupRepositoryInterface, Depends(get_group_repository)],
) -> TaskService:
    """Dependency to get task service instance."""
    return TaskService(repository, user_repository, group_repository)


@router.get(
    "/tasks",
    response_model=List[TaskResponse],
    summary="List the caller's tasks",
)
async def list_tasks(
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> List[TaskResponse]:
    return await service.list_tasks(current_user.id)


@router.post(
    "/task/new",
    response_model=TaskResponse,
    summary="Create a new task",
)
async def create_task(
    request: TaskNewRequest,
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """
    Create a task.

    The ID is generated unless supplied. The owner defaults to the caller;
    owner and group must reference existing documents.
    """
    try:
        return await service.create_task(current_user.id, request.task)
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DuplicateTaskError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.post(
    "/task/update",
    response_model=TaskResponse,
    summary="Update a task",
)
async def update_task(
    request: TaskUpdateRequest,
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """
    Merge the supplied fields into an existing task.

    Only provided fields will be updated.
    Returns 404 if the task doesn't exist or belongs to another user.
    """
    try:
        task = await service.update_task(current_user.id, request.task)
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if task is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found",
        )
    return task
