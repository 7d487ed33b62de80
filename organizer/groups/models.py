from dataclasses import dataclass
import uuid


def _text(value) -> str:
    return "" if value is None else str(value)


# Groups every new account starts with.
DEFAULT_GROUP_NAMES = ("To Do", "Doing", "Done")


@dataclass
class Group:
    """Group entity for database storage."""

    id: str
    name: str
    owner: str

    @classmethod
    def create(cls, name: str, owner: str) -> "Group":
        """Create a new group with generated ID."""
        return cls(id=str(uuid.uuid4()), name=name, owner=owner)

    def to_dict(self) -> dict:
        """Convert group to dictionary for MongoDB storage."""
        return {"id": self.id, "name": self.name, "owner": self.owner}

    @classmethod
    def from_dict(cls, data: dict) -> "Group":
        """Create group from MongoDB document, coercing odd field types."""
        return cls(
            id=_text(data.get("id")),
            name=_text(data.get("name")),
            owner=_text(data.get("owner")),
        )
