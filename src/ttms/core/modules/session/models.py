"""Session token models."""

from datetime import datetime
from typing import NewType
from uuid import UUID

from pydantic import BaseModel

AuthToken = NewType("AuthToken", str)


class TokenClaims(BaseModel):
    """Decoded session token payload."""

    subject_id: UUID
    issued_at: datetime
    expires_at: datetime
    token_id: str
