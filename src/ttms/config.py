from urllib.parse import urlparse

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str  # MongoDB URI including the database name, e.g. mongodb://localhost/ttms
    jwt_secret: str = Field(min_length=1)  # Signing secret for session tokens
    client_url: str = "http://localhost:5173"  # Frontend origin allowed by CORS
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8080
    environment: str = "development"
    debug: bool = False
    bcrypt_rounds: int = 10
    token_ttl_days: int = 4

    @field_validator("database_url")
    @classmethod
    def require_database_name(cls, value: str) -> str:
        if not urlparse(value).path[1:]:
            raise ValueError("database_url must include a database name, e.g. mongodb://localhost/ttms")
        return value

    model_config = {
        "env_file": [".env"],
        "env_prefix": "TTMS_",
        "extra": "ignore",
    }

    @property
    def is_production(self) -> bool:
        return self.environment == "production"
