import secrets
from datetime import UTC, datetime, timedelta
from uuid import UUID

from jose import JWTError, jwt

from ttms.core.modules.session.models import AuthToken, TokenClaims
from ttms.errors import AuthenticationError, ConfigurationError
from ttms.utils import now

ALGORITHM = "HS256"


class TokenIssuer:
    """Signs time-limited session tokens with a shared secret."""

    def __init__(self, secret: str, ttl: timedelta) -> None:
        if not secret:
            raise ConfigurationError("JWT secret is not configured")
        self._secret = secret
        self.ttl = ttl

    def issue(self, subject_id: UUID) -> AuthToken:
        """Create a signed token for the subject, expiring after ttl."""
        issued_at = now()
        payload = {
            "id": str(subject_id),
            "sub": str(subject_id),
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.ttl).timestamp()),
            "jti": secrets.token_urlsafe(16),
        }
        return AuthToken(jwt.encode(payload, self._secret, algorithm=ALGORITHM))

    def decode(self, token: str) -> TokenClaims:
        """Verify signature and expiry, return the claims."""
        try:
            payload = jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except JWTError as e:
            raise AuthenticationError("Invalid or expired token") from e

        return TokenClaims(
            subject_id=UUID(payload["id"]),
            issued_at=datetime.fromtimestamp(payload["iat"], UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
            token_id=payload["jti"],
        )
