from dataclasses import dataclass, field
from typing import List
import uuid


def _text(value) -> str:
    return "" if value is None else str(value)


@dataclass
class User:
    """User entity for authentication."""

    id: str
    name: str
    password_hash: str
    friends: List[str] = field(default_factory=list)

    @classmethod
    def create(cls, name: str, password_hash: str) -> "User":
        """Create a new user with generated ID."""
        return cls(
            id=str(uuid.uuid4()),
            name=name,
            password_hash=password_hash,
        )

    def to_dict(self) -> dict:
        """Convert user to dictionary for MongoDB storage."""
        return {
            "id": self.id,
            "name": self.name,
            "passwordHash": self.password_hash,
            "friends": list(self.friends),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        """Create user from MongoDB document."""
        friends = data.get("friends")
        return cls(
            id=_text(data.get("id")),
            name=_text(data.get("name")),
            password_hash=_text(data.get("passwordHash")),
            friends=[str(f) for f in friends] if isinstance(friends, list) else [],
        )
