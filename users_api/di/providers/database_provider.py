from typing import TYPE_CHECKING
from ...infrastructure.db.database_initializer import DatabaseInitializer
from ...infrastructure.db.sqlite_connection import DbConnectionFactory, SqliteDbConnectionFactory

if TYPE_CHECKING:
    from ..container import DIContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""
    
    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register the connection factory and the database initializer.
        This is the ONLY place where database connections are configured.
        """
        settings = container.settings
        connection_factory = SqliteDbConnectionFactory(
            database_path=settings.resolved_database_path(),
            timeout_seconds=settings.database_timeout_seconds,
        )
        
        container.register_singleton(DbConnectionFactory, connection_factory)
        container.register_singleton(
            DatabaseInitializer,
            DatabaseInitializer(
                connection_factory=connection_factory,
                seed_full_name=settings.seed_user_full_name,
            ),
        )
