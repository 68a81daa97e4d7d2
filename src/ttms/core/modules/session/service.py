from datetime import timedelta
from uuid import UUID

from ttms.core.core import Core, Service
from ttms.core.modules.session.models import AuthToken
from ttms.core.modules.session.token import TokenIssuer


class SessionService(Service):
    """Service for issuing stateless session tokens."""

    def __init__(self, core: Core) -> None:
        super().__init__(core)
        # Raises ConfigurationError at startup when the secret is missing
        self._issuer = TokenIssuer(core.config.jwt_secret, timedelta(days=core.config.token_ttl_days))

    def create_session(self, user_id: UUID) -> AuthToken:
        return self._issuer.issue(user_id)
