"""
Organizer API - State Router

Lets a client holding a token rebuild its session state.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from organizer.auth.dependencies import CurrentUser, get_user_repository
from organizer.auth.repository import UserRepositoryInterface
from organizer.comments.repository import CommentRepositoryInterface
from organizer.comments.router import get_comment_repository
from organizer.groups.dependencies import get_group_repository
from organizer.groups.repository import GroupRepositoryInterface
from organizer.state.schemas import UserState
from organizer.state.service import StateAssembler
from organizer.tasks.repository import TaskRepositoryInterface
from organizer.tasks.router import get_task_repository


router = APIRouter(tags=["State"])


async def get_state_assembler(
    user_repository: Annotated[UserRepositoryInterface, Depends(get_user_repository)],
    task_repository: Annotated[TaskRepositoryInterface, Depends(get_task_repository)],
    comment_repository: Annotated[CommentRepositoryInterface, Depends(get_comment_repository)],
    group_repository: Annotated[GroupRepositoryInterface, Depends(get_group_repository)],
) -> StateAssembler:
    """Dependency to get the state assembler."""
    return StateAssembler(user_repository, task_repository, comment_repository, group_repository)


@router.get("/state", response_model=UserState, summary="Assemble the caller's state")
async def get_state(
    current_user: CurrentUser,
    assembler: Annotated[StateAssembler, Depends(get_state_assembler)],
) -> UserState:
    return await assembler.assemble(current_user.id)
