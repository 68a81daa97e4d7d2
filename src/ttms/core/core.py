from __future__ import annotations

import importlib
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, cast
from urllib.parse import urlparse

from pymongo import AsyncMongoClient

from ttms.config import Config
from ttms.core.modules.user.store import CredentialStore, MongoCredentialStore
from ttms.errors import ConfigurationError

if TYPE_CHECKING:
    from ttms.core.modules.session.service import SessionService
    from ttms.core.modules.user.service import UserService


class Service:
    """Base class for services sharing the core context."""

    def __init__(self, core: Core) -> None:
        self._core = core

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""

    @property
    def core(self) -> Core:
        """Get the core application context."""
        return self._core


class Services:
    """Service registry that automatically discovers and initializes services."""

    user: UserService
    session: SessionService

    def __init__(self, core: Core) -> None:
        """Initialize all services automatically using service configuration."""
        self._services: list[Service] = []

        # Service configuration: (attribute_name, module_path, class_name)
        service_configs = [
            ("user", "ttms.core.modules.user.service", "UserService"),
            ("session", "ttms.core.modules.session.service", "SessionService"),
        ]

        # Dynamically import and instantiate services
        for attr_name, module_path, class_name in service_configs:
            module = importlib.import_module(module_path)
            service_class = cast(type[Service], getattr(module, class_name))
            service_instance = service_class(core)
            setattr(self, attr_name, service_instance)
            self._services.append(service_instance)

    async def start_all(self) -> None:
        """Start all services that have startup logic."""
        for service in self._services:
            await service.on_start()

    async def stop_all(self) -> None:
        """Stop all services that have cleanup logic."""
        for service in self._services:
            await service.on_stop()


class Core:
    """Container providing config, credential store, and all service instances."""

    config: Config
    mongo_client: AsyncMongoClient[dict[str, Any]] | None
    store: CredentialStore
    services: Services

    def __init__(self, config: Config, store: CredentialStore | None = None) -> None:
        """Initialize core with config and store (MongoDB unless one is given), and register services."""
        self.config = config
        self.mongo_client = None
        if store is None:
            database_name = urlparse(config.database_url).path[1:]
            if not database_name:
                raise ConfigurationError("Database URL does not name a database")
            self.mongo_client = AsyncMongoClient(config.database_url, uuidRepresentation="standard", tz_aware=True)
            database = self.mongo_client.get_database(database_name)
            store = MongoCredentialStore(database)
        self.store = store
        self.services = Services(self)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        """Start all services on application startup."""
        await self.services.start_all()

    async def on_stop(self) -> None:
        """Stop services and close MongoDB connection on shutdown."""
        await self.services.stop_all()
        if self.mongo_client is not None:
            await self.mongo_client.aclose()
