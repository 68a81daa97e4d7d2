from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from ttms.core.db import MongoModel
from ttms.utils import now


class User(MongoModel):
    """User domain model with credentials.

    Indexed on email - unique, username - unique.
    """

    username: str
    email: str
    password_hash: str  # bcrypt hash
    created_at: datetime = Field(default_factory=now)
    updated_at: datetime = Field(default_factory=now)


class UserView(BaseModel):
    """User account information without credentials (API representation)."""

    id: UUID = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    email: str = Field(..., description="Email address")
    created_at: datetime = Field(..., description="Account creation time")
    updated_at: datetime = Field(..., description="Last update time")

    @classmethod
    def from_domain(cls, user: User) -> "UserView":
        """Create view model from domain model."""
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
