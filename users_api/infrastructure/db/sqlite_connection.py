"""
SQLite connection factory.

Connections are opened per operation and closed unconditionally when the
operation ends. Rows are returned as ``sqlite3.Row`` so columns can be read
by name, and ``PARSE_COLNAMES`` is enabled so queries can opt into the UUID
converter with a ``"Id [uuid]"`` column alias.
"""

# Standard library imports
import sqlite3
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator
from uuid import UUID


UUID_TYPE_NAME = "uuid"


def register_uuid_type() -> None:
    """
    Register UUID encoding/decoding with the sqlite3 driver.
    
    UUIDs are stored as their canonical lowercase hyphenated text and
    decoded back for columns tagged with the ``uuid`` type name.
    Registration is global and idempotent.
    """
    sqlite3.register_adapter(UUID, str)
    sqlite3.register_converter(UUID_TYPE_NAME, lambda value: UUID(value.decode("ascii")))


class DbConnectionFactory(ABC):
    """Produces connections to the users store"""
    
    @abstractmethod
    def create_connection(self) -> sqlite3.Connection:
        """Open a new connection"""
        pass
    
    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        """Context manager that yields a connection, commits on success and always closes it."""
        connection = self.create_connection()
        try:
            yield connection
            connection.commit()
        finally:
            connection.close()


class SqliteDbConnectionFactory(DbConnectionFactory):
    """Connection factory for a SQLite database file"""
    
    def __init__(self, database_path: str, timeout_seconds: float = 5.0) -> None:
        self.database_path = database_path
        self.timeout_seconds = timeout_seconds
    
    def create_connection(self) -> sqlite3.Connection:
        connection = sqlite3.connect(
            self.database_path,
            timeout=self.timeout_seconds,
            detect_types=sqlite3.PARSE_COLNAMES,
        )
        connection.row_factory = sqlite3.Row
        return connection
