"""Tests for credential store backends."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import DuplicateKeyError

from ttms.core.modules.user.models import User
from ttms.core.modules.user.store import InMemoryCredentialStore, MongoCredentialStore
from ttms.errors import ConflictError


def make_user(username="alice", email="alice@example.com"):
    return User(username=username, email=email, password_hash="$2b$04$digest")


class TestInMemoryCredentialStore:
    @pytest.mark.asyncio
    async def test_insert_then_find_by_email(self):
        store = InMemoryCredentialStore()
        user = await store.insert_unique(make_user())
        found = await store.find_by_email("alice@example.com")
        assert found is not None
        assert found.id == user.id
        assert found.username == "alice"

    @pytest.mark.asyncio
    async def test_find_unknown_email_returns_none(self):
        assert await InMemoryCredentialStore().find_by_email("nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_duplicate_email_is_conflict(self):
        store = InMemoryCredentialStore()
        original = await store.insert_unique(make_user())
        with pytest.raises(ConflictError):
            await store.insert_unique(make_user(username="alice2"))
        assert len(store) == 1
        assert (await store.find_by_email("alice@example.com")).id == original.id

    @pytest.mark.asyncio
    async def test_duplicate_username_is_conflict(self):
        store = InMemoryCredentialStore()
        await store.insert_unique(make_user())
        with pytest.raises(ConflictError):
            await store.insert_unique(make_user(email="other@example.com"))
        assert len(store) == 1

    @pytest.mark.asyncio
    async def test_lookup_result_is_a_copy(self):
        store = InMemoryCredentialStore()
        await store.insert_unique(make_user())
        found = await store.find_by_email("alice@example.com")
        found.username = "mallory"
        assert (await store.find_by_email("alice@example.com")).username == "alice"

    @pytest.mark.asyncio
    async def test_delete_removes_record(self):
        store = InMemoryCredentialStore()
        user = await store.insert_unique(make_user())
        await store.delete(user.id)
        assert await store.find_by_email("alice@example.com") is None
        assert len(store) == 0


class TestMongoCredentialStore:
    @pytest.fixture(autouse=True)
    def setup(self):
        self.collection = MagicMock()
        database = MagicMock()
        database.get_collection.return_value = self.collection
        self.store = MongoCredentialStore(database)

    @pytest.mark.asyncio
    async def test_ensure_indexes_creates_unique_email_and_username(self):
        self.collection.create_index = AsyncMock()
        await self.store.ensure_indexes()
        self.collection.create_index.assert_any_await([("email", 1)], unique=True)
        self.collection.create_index.assert_any_await([("username", 1)], unique=True)

    @pytest.mark.asyncio
    async def test_find_by_email_maps_document(self, mock_user):
        self.collection.find_one = AsyncMock(return_value=mock_user.to_mongo())
        found = await self.store.find_by_email(mock_user.email)
        self.collection.find_one.assert_awaited_once_with({"email": mock_user.email})
        assert found == mock_user

    @pytest.mark.asyncio
    async def test_find_by_email_missing(self):
        self.collection.find_one = AsyncMock(return_value=None)
        assert await self.store.find_by_email("nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_insert_unique_returns_stored_record(self, mock_user):
        self.collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id=mock_user.id))
        self.collection.find_one = AsyncMock(return_value=mock_user.to_mongo())
        stored = await self.store.insert_unique(mock_user)
        self.collection.insert_one.assert_awaited_once_with(mock_user.to_mongo())
        assert stored.id == mock_user.id

    @pytest.mark.asyncio
    async def test_duplicate_key_becomes_conflict(self, mock_user):
        self.collection.insert_one = AsyncMock(side_effect=DuplicateKeyError("E11000 duplicate key error"))
        with pytest.raises(ConflictError, match="User already exists"):
            await self.store.insert_unique(mock_user)

    @pytest.mark.asyncio
    async def test_delete_by_id(self, mock_user):
        self.collection.delete_one = AsyncMock()
        await self.store.delete(mock_user.id)
        self.collection.delete_one.assert_awaited_once_with({"_id": mock_user.id})
