"""
Organizer API - Group Schemas
"""

from pydantic import BaseModel, Field


class GroupResponse(BaseModel):
    """Response model for a single group."""

    id: str = Field(description="Group ID")
    name: str = Field(description="Group name")
    owner: str = Field(description="Owner user ID")
