from .sqlite_connection import DbConnectionFactory, SqliteDbConnectionFactory, register_uuid_type
from .database_initializer import DatabaseInitializer
from .sqlite_user_repository import SqliteUserRepository

__all__ = [
    "DbConnectionFactory",
    "SqliteDbConnectionFactory",
    "register_uuid_type",
    "DatabaseInitializer",
    "SqliteUserRepository",
]
