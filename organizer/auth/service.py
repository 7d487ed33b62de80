import hashlib
import hmac
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import jwt, JWTError

from organizer.config import settings
from organizer.auth.models import User
from organizer.auth.repository import UserRepositoryInterface
from organizer.groups.models import DEFAULT_GROUP_NAMES, Group
from organizer.groups.repository import GroupRepositoryInterface

logger = logging.getLogger(__name__)


class AuthService:
    """Authentication service with password hashing and JWT operations."""

    def __init__(
        self,
        repository: UserRepositoryInterface,
        group_repository: Optional[GroupRepositoryInterface] = None,
    ):
        self.repository = repository
        self.group_repository = group_repository

    def hash_password(self, password: str) -> str:
        """Hash a password using bcrypt."""
        password_bytes = password.encode("utf-8")
        salt = bcrypt.gensalt()
        return bcrypt.hashpw(password_bytes, salt).decode("utf-8")

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a password against its hash.

        bcrypt hashes start with "$2". Anything else is a legacy unsalted MD5
        hex digest written by the previous version of the service.
        """
        if not hashed_password:
            return False
        password_bytes = plain_password.encode("utf-8")
        if hashed_password.startswith("$2"):
            try:
                return bcrypt.checkpw(password_bytes, hashed_password.encode("utf-8"))
            except ValueError:
                return False
        digest = hashlib.md5(password_bytes).hexdigest()
        return hmac.compare_digest(digest, hashed_password.lower())

    def create_access_token(self, user_id: str, expires_delta: Optional[timedelta] = None) -> str:
        """Create a JWT access token."""
        if expires_delta is None:
            expires_delta = timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)

        now = datetime.now(timezone.utc)
        expire = now + expires_delta
        to_encode = {
            "sub": user_id,
            "exp": expire,
            "iat": now,
        }
        return jwt.encode(
            to_encode,
            settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )

    def decode_token(self, token: str) -> Optional[str]:
        """Decode and validate a JWT token. Returns user_id if valid."""
        try:
            payload = jwt.decode(
                token,
                settings.JWT_SECRET_KEY,
                algorithms=[settings.JWT_ALGORITHM],
            )
            user_id: str = payload.get("sub")
            if user_id is None:
                return None
            return user_id
        except JWTError:
            return None

    async def register_user(self, username: str, password: str) -> Optional[User]:
        """Register a new user and their default groups. Returns None if the name is taken."""
        if await self.repository.exists_by_name(username):
            return None

        password_hash = self.hash_password(password)
        user = User.create(name=username, password_hash=password_hash)
        await self.repository.create(user)

        if self.group_repository is not None:
            for group_name in DEFAULT_GROUP_NAMES:
                await self.group_repository.create(Group.create(name=group_name, owner=user.id))

        logger.info("Registered user %s (%s)", user.name, user.id)
        return user

    async def authenticate_user(self, username: str, password: str) -> Optional[User]:
        """Authenticate user by username and password."""
        user = await self.repository.get_by_name(username)
        if user is None:
            logger.info("Authentication failed: unknown user %r", username)
            return None
        if not self.verify_password(password, user.password_hash):
            logger.info("Authentication failed: bad password for %r", username)
            return None
        return user

    async def get_user_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        return await self.repository.get_by_id(user_id)
