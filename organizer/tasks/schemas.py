"""
Organizer API - Task Schemas

Pydantic models for task API requests and responses.
Wire field names follow the client's camelCase (``isComplete``).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator


class TaskCreatePayload(BaseModel):
    """Task fields accepted by POST /task/new."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(default=None, min_length=1, max_length=200, description="Client-chosen task ID")
    name: str = Field(min_length=1, max_length=500, description="Task name")
    is_complete: StrictBool = Field(default=False, alias="isComplete", description="Completion flag")
    owner: Optional[str] = Field(default=None, min_length=1, description="Owner user ID (defaults to caller)")
    group: Optional[str] = Field(default=None, min_length=1, description="Group ID")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class TaskUpdatePayload(BaseModel):
    """Task fields accepted by POST /task/update. Only supplied fields are merged."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(min_length=1, max_length=200, description="ID of the task to update")
    name: Optional[str] = Field(default=None, min_length=1, max_length=500, description="Task name")
    is_complete: Optional[StrictBool] = Field(default=None, alias="isComplete", description="Completion flag")
    owner: Optional[str] = Field(default=None, min_length=1, description="Owner user ID")
    group: Optional[str] = Field(default=None, min_length=1, description="Group ID, null to clear")

    @field_validator("name", "is_complete", "owner")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        if isinstance(value, str) and not value.strip():
            raise ValueError("must not be blank")
        return value


class TaskNewRequest(BaseModel):
    """Request body for POST /task/new."""

    task: TaskCreatePayload


class TaskUpdateRequest(BaseModel):
    """Request body for POST /task/update."""

    task: TaskUpdatePayload


class TaskResponse(BaseModel):
    """Response model for a single task."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="Task ID")
    name: str = Field(description="Task name")
    is_complete: bool = Field(alias="isComplete", description="Completion flag")
    owner: str = Field(description="Owner user ID")
    group: Optional[str] = Field(default=None, description="Group ID")
