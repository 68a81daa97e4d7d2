"""Shared pytest fixtures."""

from collections.abc import Iterator
from datetime import timedelta
from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from ttms.app import App
from ttms.config import Config
from ttms.core.modules.session.token import TokenIssuer
from ttms.core.modules.user.models import User
from ttms.core.modules.user.store import InMemoryCredentialStore
from ttms.web.server import create_fastapi_app


@pytest.fixture
def config():
    """Configuration that never touches a real database or .env file."""
    return Config(
        _env_file=None,
        database_url="mongodb://localhost:27017/ttms_test",
        jwt_secret="test-secret",
        bcrypt_rounds=4,  # bcrypt minimum, keeps tests fast
    )


@pytest.fixture
def store():
    return InMemoryCredentialStore()


@pytest.fixture
def app(config, store):
    return App(config, store)


@pytest.fixture
def client(app, config) -> Iterator[TestClient]:
    """HTTP client running the full FastAPI app with lifespan."""
    with TestClient(create_fastapi_app(app, config)) as test_client:
        yield test_client


@pytest.fixture
def issuer(config):
    """Token issuer sharing the application's secret, for checking issued tokens."""
    return TokenIssuer(config.jwt_secret, timedelta(days=config.token_ttl_days))


@pytest.fixture
def mock_user():
    """Create a mock user for testing."""
    return User(
        id=UUID("87654321-4321-8765-4321-876543218765"),
        username="testuser",
        email="test@example.com",
        password_hash="$2b$04$hashed_password_here",
    )
