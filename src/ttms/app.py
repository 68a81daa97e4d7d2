from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog

from ttms.config import Config
from ttms.core.core import Core
from ttms.core.modules.session.models import AuthToken
from ttms.core.modules.user.models import UserView
from ttms.core.modules.user.store import CredentialStore
from ttms.errors import AuthenticationError, InternalError, UserError, ValidationError

logger = structlog.get_logger(__name__)


class App:
    """Facade for registration and login, maps failures to user-facing errors before returning to the web layer."""

    def __init__(self, config: Config, store: CredentialStore | None = None) -> None:
        self._core = Core(config, store)

    @property
    def config(self) -> Config:
        return self._core.config

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    async def signup(self, username: str | None, email: str | None, password: str | None) -> tuple[AuthToken, UserView]:
        """Register a new user and log them in immediately."""
        if not username or not email or not password:
            raise ValidationError("Username, email, and password are required!")

        try:
            user = await self._core.services.user.create_user(username, email, password)
        except UserError:
            raise
        except Exception as e:
            logger.exception("signup_failed", stage="persist")
            raise InternalError("Server error during signup!") from e

        try:
            token = self._core.services.session.create_session(user.id)
        except Exception as e:
            logger.exception("signup_failed", stage="token", user_id=str(user.id))
            # Undo the registration so the email can be used again
            try:
                await self._core.services.user.delete_user(user.id)
            except Exception:
                logger.exception("signup_rollback_failed", user_id=str(user.id))
            raise InternalError("Server error during signup!") from e

        return token, UserView.from_domain(user)

    async def login(self, email: str | None, password: str | None) -> tuple[AuthToken, UserView]:
        """Authenticate user by email and password and issue a session token."""
        if not email or not password:
            raise ValidationError("Email and password are required!")

        try:
            user = await self._core.services.user.get_user_by_email(email)
            if not await self._core.services.user.verify_password(user, password):
                raise AuthenticationError("Invalid credentials")
            token = self._core.services.session.create_session(user.id)
        except UserError:
            raise
        except Exception as e:
            logger.exception("login_failed")
            raise InternalError("Internal server error during login.") from e

        logger.info("user_logged_in", user_id=str(user.id))
        return token, UserView.from_domain(user)
