from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.sqlite_connection import DbConnectionFactory
from ...infrastructure.db.sqlite_user_repository import SqliteUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets the connection factory from the database provider.
        """
        connection_factory = container.get(DbConnectionFactory)
        
        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            UserRepository,
            SqliteUserRepository(connection_factory=connection_factory)
        )
