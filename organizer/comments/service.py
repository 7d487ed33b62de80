"""
Organizer API - Comment Service
"""

from organizer.auth.repository import UserRepositoryInterface
from organizer.comments.models import Comment
from organizer.comments.repository import CommentRepositoryInterface
from organizer.comments.schemas import CommentCreatePayload, CommentResponse
from organizer.tasks.repository import TaskRepositoryInterface
from organizer.tasks.service import InvalidReferenceError


def comment_to_response(comment: Comment) -> CommentResponse:
    return CommentResponse(
        id=comment.id,
        task=comment.task,
        owner=comment.owner,
        content=comment.content,
    )


class CommentService:
    """Service layer for comments."""

    def __init__(
        self,
        repository: CommentRepositoryInterface,
        task_repository: TaskRepositoryInterface,
        user_repository: UserRepositoryInterface,
    ):
        self.repository = repository
        self.task_repository = task_repository
        self.user_repository = user_repository

    async def create_comment(self, owner_id: str, payload: CommentCreatePayload) -> CommentResponse:
        """Attach a comment to an existing task. The author defaults to the caller."""
        owner = payload.owner or owner_id
        if await self.task_repository.find_document(payload.task) is None:
            raise InvalidReferenceError("task", payload.task)
        if await self.user_repository.get_by_id(owner) is None:
            raise InvalidReferenceError("owner", owner)

        comment = Comment.create(
            task=payload.task,
            owner=owner,
            content=payload.content,
            comment_id=payload.id,
        )
        await self.repository.create(comment)
        return comment_to_response(comment)
