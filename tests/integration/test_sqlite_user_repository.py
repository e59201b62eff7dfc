"""
Integration tests for SqliteUserRepository against a temporary SQLite file.
"""
import sqlite3
import time
from uuid import UUID, uuid4

import pytest

pytestmark = pytest.mark.integration

from users_api.domain.models.user import User
from users_api.infrastructure.db.sqlite_connection import SqliteDbConnectionFactory
from users_api.infrastructure.db.sqlite_user_repository import SqliteUserRepository


@pytest.fixture
def repository(initialized_factory):
    return SqliteUserRepository(initialized_factory)


@pytest.fixture
def empty_repository(initialized_factory):
    with initialized_factory.connect() as connection:
        connection.execute("DELETE FROM Users")
    return SqliteUserRepository(initialized_factory)


class TestSqliteUserRepository:
    """Tests for SqliteUserRepository"""

    @pytest.mark.asyncio
    async def test_get_all_on_empty_store_returns_empty_list(self, empty_repository):
        assert await empty_repository.get_all() == []

    @pytest.mark.asyncio
    async def test_get_all_returns_seeded_user(self, repository):
        users = await repository.get_all()
        assert [u.full_name for u in users] == ["Peter Parker"]
        assert isinstance(users[0].id, UUID)

    @pytest.mark.asyncio
    async def test_get_by_id_returns_none_for_unknown_id(self, repository):
        assert await repository.get_by_id(uuid4()) is None

    @pytest.mark.asyncio
    async def test_create_then_get_by_id_returns_equal_user(self, repository):
        user = User(full_name="Nick Chapsas")
        assert await repository.create(user) is True
        assert await repository.get_by_id(user.id) == user

    @pytest.mark.asyncio
    async def test_create_with_existing_id_raises_and_keeps_original(self, repository):
        user = User(full_name="Nick Chapsas")
        await repository.create(user)
        with pytest.raises(sqlite3.IntegrityError):
            await repository.create(User(id=user.id, full_name="Someone Else"))
        assert await repository.get_by_id(user.id) == user

    @pytest.mark.asyncio
    async def test_delete_by_id_succeeds_once_then_returns_false(self, repository):
        user = User(full_name="Nick Chapsas")
        await repository.create(user)
        assert await repository.delete_by_id(user.id) is True
        assert await repository.delete_by_id(user.id) is False
        assert await repository.get_by_id(user.id) is None

    @pytest.mark.asyncio
    async def test_delete_unknown_id_returns_false(self, repository):
        assert await repository.delete_by_id(uuid4()) is False

    @pytest.mark.asyncio
    async def test_ids_are_stored_as_canonical_text(self, repository, initialized_factory):
        user = User(full_name="Nick Chapsas")
        await repository.create(user)
        with initialized_factory.connect() as connection:
            row = connection.execute(
                "SELECT Id, typeof(Id) AS kind FROM Users WHERE FullName = ?", ("Nick Chapsas",)
            ).fetchone()
        assert row["kind"] == "text"
        assert row["Id"] == str(user.id)

    @pytest.mark.asyncio
    async def test_missing_table_raises_store_error(self, connection_factory):
        repository = SqliteUserRepository(connection_factory)
        with pytest.raises(sqlite3.OperationalError, match="no such table"):
            await repository.get_all()

    @pytest.mark.asyncio
    async def test_unreachable_store_raises_store_error(self, tmp_path):
        factory = SqliteDbConnectionFactory(str(tmp_path / "missing-dir" / "users.db"))
        repository = SqliteUserRepository(factory)
        with pytest.raises(sqlite3.OperationalError):
            await repository.get_all()

    @pytest.mark.asyncio
    async def test_locked_store_fails_after_busy_timeout(self, initialized_factory):
        factory = SqliteDbConnectionFactory(initialized_factory.database_path, timeout_seconds=0.3)
        repository = SqliteUserRepository(factory)
        blocker = sqlite3.connect(initialized_factory.database_path, isolation_level=None)
        try:
            blocker.execute("BEGIN EXCLUSIVE")
            started = time.perf_counter()
            with pytest.raises(sqlite3.OperationalError, match="locked"):
                await repository.create(User(full_name="Nick Chapsas"))
            elapsed = time.perf_counter() - started
        finally:
            blocker.execute("ROLLBACK")
            blocker.close()
        assert 0.25 <= elapsed < 5.0
