"""
Organizer API - Comment Router
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from organizer.database import get_database
from organizer.auth.dependencies import CurrentUser, get_user_repository
from organizer.auth.repository import UserRepositoryInterface
from organizer.comments.repository import CommentRepository, CommentRepositoryInterface
from organizer.comments.schemas import CommentNewRequest, CommentResponse
from organizer.comments.service import CommentService
from organizer.tasks.repository import TaskRepositoryInterface
from organizer.tasks.router import get_task_repository
from organizer.tasks.service import InvalidReferenceError


router = APIRouter(tags=["Comments"])


async def get_comment_repository(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> CommentRepositoryInterface:
    """Dependency to get comment repository instance."""
    return CommentRepository(db)


async def get_comment_service(
    repository: Annotated[CommentRepositoryInterface, Depends(get_comment_repository)],
    task_repository: Annotated[TaskRepositoryInterface, Depends(get_task_repository)],
    user_repository: Annotated[UserRepositoryInterface, Depends(get_user_repository)],
) -> CommentService:
    """Dependency to get comment service instance."""
    return CommentService(repository, task_repository, user_repository)


@router.post(
    "/comment/new",
    response_model=CommentResponse,
    summary="Comment on a task",
)
async def create_comment(
    request: CommentNewRequest,
    current_user: CurrentUser,
    service: Annotated[CommentService, Depends(get_comment_service)],
) -> CommentResponse:
    try:
        return await service.create_comment(current_user.id, request.comment)
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
