from uuid import UUID

import structlog

from ttms.core.core import Core, Service
from ttms.core.modules.user.models import User
from ttms.core.modules.user.password import PasswordHasher
from ttms.errors import ConflictError, NotFoundError

logger = structlog.get_logger(__name__)


class UserService(Service):
    """Registers and looks up users through the credential store."""

    def __init__(self, core: Core) -> None:
        super().__init__(core)
        self._store = core.store
        self._hasher = PasswordHasher(core.config.bcrypt_rounds)

    async def get_user_by_email(self, email: str) -> User:
        """Get user by email from the store."""
        user = await self._store.find_by_email(email)
        if user is None:
            raise NotFoundError("User not found!")
        return user

    async def create_user(self, username: str, email: str, password: str) -> User:
        """Create user with hashed password."""
        # Fast path only; the store's unique indexes decide concurrent races
        if await self._store.find_by_email(email) is not None:
            raise ConflictError("User already exists, please login")

        password_hash = await self._hasher.hash_async(password)
        user = await self._store.insert_unique(User(username=username, email=email, password_hash=password_hash))
        logger.info("user_registered", user_id=str(user.id))
        return user

    async def verify_password(self, user: User, password: str) -> bool:
        """Verify password against stored hash."""
        return await self._hasher.verify_async(password, user.password_hash)

    async def delete_user(self, user_id: UUID) -> None:
        """Remove a user record, used to undo a registration that could not complete."""
        await self._store.delete(user_id)
        logger.warning("user_deleted", user_id=str(user_id))

    async def on_start(self) -> None:
        """Initialize store indexes."""
        await self._store.ensure_indexes()
