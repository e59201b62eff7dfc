# Standard library imports
import asyncio
import sqlite3
from typing import Any, List, Optional, Sequence
from uuid import UUID

# Local application imports
from ...domain.constants import UserFields
from ...domain.models.user import User
from ...domain.repositories.user_repository import UserRepository
from .sqlite_connection import DbConnectionFactory


SELECT_USERS = f"SELECT {UserFields.ID_AS_UUID}, {UserFields.FULL_NAME} FROM {UserFields.TABLE}"


class SqliteUserRepository(UserRepository):
    """
    SQLite implementation of UserRepository.
    
    Every operation is one round trip on its own connection, executed in a
    worker thread so the event loop is never blocked. Driver errors
    (``sqlite3.Error``) propagate to the caller.
    """
    
    def __init__(self, connection_factory: DbConnectionFactory) -> None:
        self.connection_factory = connection_factory
    
    async def get_all(self) -> List[User]:
        rows = await asyncio.to_thread(self._query, SELECT_USERS)
        return [self._row_to_user(row) for row in rows]
    
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        rows = await asyncio.to_thread(
            self._query, f"{SELECT_USERS} WHERE {UserFields.ID} = ?", (user_id,)
        )
        if not rows:
            return None
        return self._row_to_user(rows[0])
    
    async def create(self, user: User) -> bool:
        """
        Insert a user
        
        Raises:
            sqlite3.IntegrityError: If a user with the same ID already exists
        """
        inserted = await asyncio.to_thread(
            self._execute,
            f"INSERT INTO {UserFields.TABLE} ({UserFields.ID}, {UserFields.FULL_NAME}) VALUES (?, ?)",
            (user.id, user.full_name),
        )
        return inserted > 0
    
    async def delete_by_id(self, user_id: UUID) -> bool:
        deleted = await asyncio.to_thread(
            self._execute,
            f"DELETE FROM {UserFields.TABLE} WHERE {UserFields.ID} = ?",
            (user_id,),
        )
        return deleted > 0
    
    def _query(self, sql: str, params: Sequence[Any] = ()) -> List[sqlite3.Row]:
        with self.connection_factory.connect() as connection:
            return connection.execute(sql, params).fetchall()
    
    def _execute(self, sql: str, params: Sequence[Any] = ()) -> int:
        with self.connection_factory.connect() as connection:
            return connection.execute(sql, params).rowcount
    
    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> User:
        return User(id=row[UserFields.ID], full_name=row[UserFields.FULL_NAME])
