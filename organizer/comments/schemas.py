"""
Organizer API - Comment Schemas
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class CommentCreatePayload(BaseModel):
    """Comment fields accepted by POST /comment/new."""

    id: Optional[str] = Field(default=None, min_length=1, max_length=200, description="Client-chosen comment ID")
    task: str = Field(min_length=1, description="ID of the task being commented on")
    owner: Optional[str] = Field(default=None, min_length=1, description="Author user ID (defaults to caller)")
    content: str = Field(min_length=1, max_length=5000, description="Comment text")

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class CommentNewRequest(BaseModel):
    """Request body for POST /comment/new."""

    comment: CommentCreatePayload


class CommentResponse(BaseModel):
    """Response model for a single comment."""

    id: str = Field(description="Comment ID")
    task: str = Field(description="Task ID")
    owner: str = Field(description="Author user ID")
    content: str = Field(description="Comment text")
