"""
Organizer API - Task Models

Internal task model for database operations.
"""

from dataclasses import dataclass
from typing import Optional
import uuid


def _text(value) -> str:
    return "" if value is None else str(value)


@dataclass
class Task:
    """Task entity for database storage."""

    id: str
    name: str
    owner: str
    is_complete: bool = False
    group: Optional[str] = None

    @classmethod
    def create(
        cls,
        name: str,
        owner: str,
        is_complete: bool = False,
        group: Optional[str] = None,
        task_id: Optional[str] = None,
    ) -> "Task":
        """Create a new task, generating an ID unless the client supplied one."""
        return cls(
            id=task_id or str(uuid.uuid4()),
            name=name,
            owner=owner,
            is_complete=is_complete,
            group=group,
        )

    def to_dict(self) -> dict:
        """Convert task to dictionary for MongoDB storage."""
        doc = {
            "id": self.id,
            "name": self.name,
            "isComplete": self.is_complete,
            "owner": self.owner,
        }
        if self.group is not None:
            doc["group"] = self.group
        return doc

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create task from MongoDB document.

        Documents written outside the API may carry any shape; fields are
        normalized rather than trusted.
        """
        group = data.get("group")
        return cls(
            id=_text(data.get("id")),
            name=_text(data.get("name")),
            owner=_text(data.get("owner")),
            is_complete=data.get("isComplete") is True,
            group=group if isinstance(group, str) else None,
        )
