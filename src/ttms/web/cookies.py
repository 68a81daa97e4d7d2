from fastapi import Response

from ttms.config import Config
from ttms.core.modules.session.models import AuthToken

SESSION_COOKIE_NAME = "X_TTMS_access_token"


def deliver_session(response: Response, token: AuthToken, config: Config) -> None:
    """Attach the session token to the response as an HTTP-only cookie."""
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        samesite="lax",
        secure=config.is_production,
        max_age=config.token_ttl_days * 24 * 60 * 60,  # Match token expiry
    )
