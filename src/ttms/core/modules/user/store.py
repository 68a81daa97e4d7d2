"""Persistence backends for user credentials.

Uniqueness of email and username is enforced by the backend itself.
Callers may check for an existing record first, but only ``insert_unique``
is safe against concurrent registrations.
"""

from typing import Any, Protocol
from uuid import UUID

import structlog
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError

from ttms.core.modules.user.models import User
from ttms.errors import ConflictError

logger = structlog.get_logger(__name__)


class CredentialStore(Protocol):
    async def ensure_indexes(self) -> None: ...

    async def find_by_email(self, email: str) -> User | None: ...

    async def insert_unique(self, user: User) -> User: ...

    async def delete(self, user_id: UUID) -> None: ...


class MongoCredentialStore:
    """Users collection with unique indexes on email and username."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        self._collection = database.get_collection("users")

    async def ensure_indexes(self) -> None:
        await self._collection.create_index([("email", 1)], unique=True)
        await self._collection.create_index([("username", 1)], unique=True)
        logger.debug("credential_store_started", backend="mongo")

    async def find_by_email(self, email: str) -> User | None:
        doc = await self._collection.find_one({"email": email})
        if doc is None:
            return None
        return User.model_validate(doc)

    async def insert_unique(self, user: User) -> User:
        try:
            res = await self._collection.insert_one(user.to_mongo())
        except DuplicateKeyError as e:
            raise ConflictError("User already exists, please login") from e
        doc = await self._collection.find_one({"_id": res.inserted_id})
        if doc is None:
            raise RuntimeError(f"User '{res.inserted_id}' vanished after insert")
        return User.model_validate(doc)

    async def delete(self, user_id: UUID) -> None:
        await self._collection.delete_one({"_id": user_id})


class InMemoryCredentialStore:
    """Dict-backed store. Check and write happen without yielding to the event loop."""

    def __init__(self) -> None:
        self._users: dict[UUID, User] = {}

    async def ensure_indexes(self) -> None:
        logger.debug("credential_store_started", backend="memory")

    async def find_by_email(self, email: str) -> User | None:
        user = next((u for u in self._users.values() if u.email == email), None)
        return user.model_copy() if user is not None else None

    async def insert_unique(self, user: User) -> User:
        for existing in self._users.values():
            if existing.email == user.email or existing.username == user.username or existing.id == user.id:
                raise ConflictError("User already exists, please login")
        self._users[user.id] = user.model_copy()
        return self._users[user.id].model_copy()

    async def delete(self, user_id: UUID) -> None:
        self._users.pop(user_id, None)

    def __len__(self) -> int:
        return len(self._users)
