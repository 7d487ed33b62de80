"""
Organizer API - State Assembler

Gathers one user's tasks, the comments on those tasks, the users those
documents reference and the user's groups into a single payload.
Nothing is cached; every call reads the repositories again. Any repository
failure propagates to the caller.
"""

import asyncio
from typing import List

from organizer.auth.models import User
from organizer.auth.repository import UserRepositoryInterface
from organizer.comments.repository import CommentRepositoryInterface
from organizer.comments.service import comment_to_response
from organizer.groups.repository import GroupRepositoryInterface
from organizer.groups.schemas import GroupResponse
from organizer.state.schemas import PublicUserResponse, SessionInfo, UserState
from organizer.tasks.repository import TaskRepositoryInterface
from organizer.tasks.service import task_to_response


def _public_user(user: User) -> PublicUserResponse:
    return PublicUserResponse(id=user.id, name=user.name, friends=user.friends)


class StateAssembler:
    """Builds the ``{session, tasks, comments, users, groups}`` snapshot."""

    def __init__(
        self,
        user_repository: UserRepositoryInterface,
        task_repository: TaskRepositoryInterface,
        comment_repository: CommentRepositoryInterface,
        group_repository: GroupRepositoryInterface,
    ):
        self.user_repository = user_repository
        self.task_repository = task_repository
        self.comment_repository = comment_repository
        self.group_repository = group_repository

    async def assemble(self, user_id: str) -> UserState:
        tasks, groups, user = await asyncio.gather(
            self.task_repository.list_by_owner(user_id),
            self.group_repository.list_by_owner(user_id),
            self.user_repository.get_by_id(user_id),
        )
        comments = await self.comment_repository.list_by_tasks([task.id for task in tasks])

        # Requesting user first, then everyone else referenced, once each
        related_ids: List[str] = []
        for owner in [task.owner for task in tasks] + [comment.owner for comment in comments]:
            if owner and owner != user_id and owner not in related_ids:
                related_ids.append(owner)
        others = await self.user_repository.list_by_ids(related_ids)
        others.sort(key=lambda other: related_ids.index(other.id))

        users = [user] if user is not None else []
        users.extend(others)

        return UserState(
            session=SessionInfo(id=user_id),
            tasks=[task_to_response(task) for task in tasks],
            comments=[comment_to_response(comment) for comment in comments],
            users=[_public_user(u) for u in users],
            groups=[GroupResponse(id=g.id, name=g.name, owner=g.owner) for g in groups],
        )
