"""
Shared pytest fixtures for users-api tests.
"""
import asyncio
import os
from unittest.mock import AsyncMock, MagicMock, patch
from uuid import uuid4

import pytest

from users_api.application.services.user_service import UserService
from users_api.core.config import Settings
from users_api.core.logger_adapter import LoggerAdapter
from users_api.domain.models.user import User
from users_api.domain.repositories.user_repository import UserRepository
from users_api.infrastructure.db.database_initializer import DatabaseInitializer
from users_api.infrastructure.db.sqlite_connection import SqliteDbConnectionFactory


@pytest.fixture
def mock_env(tmp_path):
    """Fixture to set common test environment variables."""
    env_vars = {
        "USERS_DB_PATH": str(tmp_path / "users.db"),
        "USERS_DB_TIMEOUT_SECONDS": "1.0",
        "SEED_USER_FULL_NAME": "Peter Parker",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def test_settings(mock_env):
    """Settings pointing at a temporary database file."""
    return Settings()


@pytest.fixture
def user():
    return User(id=uuid4(), full_name="Peter Parker")


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_logger():
    """Mock LoggerAdapter recording every info/error call."""
    return MagicMock(spec=LoggerAdapter)


@pytest.fixture
def mock_user_service():
    """Mock UserService with async methods."""
    return AsyncMock(spec=UserService)


@pytest.fixture
def connection_factory(tmp_path):
    """Connection factory for an empty, uninitialized database file."""
    return SqliteDbConnectionFactory(str(tmp_path / "store.db"), timeout_seconds=1.0)


@pytest.fixture
def initialized_factory(connection_factory):
    """Connection factory for a bootstrapped database (table created, one seeded user)."""
    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(DatabaseInitializer(connection_factory).initialize())
    finally:
        loop.close()
    return connection_factory
