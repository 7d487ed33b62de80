"""
Organizer API - State Schemas

The aggregate payload a client bootstraps its session from.
"""

from typing import List, Literal

from pydantic import BaseModel, Field

from organizer.comments.schemas import CommentResponse
from organizer.groups.schemas import GroupResponse
from organizer.tasks.schemas import TaskResponse

AUTHENTICATED = "AUTHENTICATED"


class SessionInfo(BaseModel):
    """Session marker the client stores alongside its token."""

    authenticated: Literal["AUTHENTICATED"] = AUTHENTICATED
    id: str = Field(description="Authenticated user ID")


class PublicUserResponse(BaseModel):
    """A user as other clients may see it (no password hash)."""

    id: str
    name: str
    friends: List[str] = Field(default_factory=list)


class UserState(BaseModel):
    """Everything visible to one user, assembled at session bootstrap."""

    session: SessionInfo
    tasks: List[TaskResponse] = Field(default_factory=list)
    comments: List[CommentResponse] = Field(default_factory=list)
    users: List[PublicUserResponse] = Field(default_factory=list)
    groups: List[GroupResponse] = Field(default_factory=list)
