from dataclasses import dataclass
from typing import Optional
import uuid


def _text(value) -> str:
    return "" if value is None else str(value)


@dataclass
class Comment:
    """Comment on a task."""

    id: str
    task: str
    owner: str
    content: str

    @classmethod
    def create(cls, task: str, owner: str, content: str, comment_id: Optional[str] = None) -> "Comment":
        """Create a new comment, generating an ID unless the client supplied one."""
        return cls(
            id=comment_id or str(uuid.uuid4()),
            task=task,
            owner=owner,
            content=content,
        )

    def to_dict(self) -> dict:
        """Convert comment to dictionary for MongoDB storage."""
        return {
            "id": self.id,
            "task": self.task,
            "owner": self.owner,
            "content": self.content,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Comment":
        """Create comment from MongoDB document."""
        return cls(
            id=_text(data.get("id")),
            task=_text(data.get("task")),
            owner=_text(data.get("owner")),
            content=_text(data.get("content")),
        )
