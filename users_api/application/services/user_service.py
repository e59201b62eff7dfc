"""
Users service.

Delegates every operation to the UserRepository and wraps each call with
start/completion log entries and timing. Repository faults are logged once
at error level and re-raised unchanged; ``False``/``None`` results only ever
mean "not found" or "not created".
"""

# Standard library imports
import time
from typing import List, Optional
from uuid import UUID

# Local application imports
from ...core.logger_adapter import LoggerAdapter
from ...domain.models.user import User
from ...domain.repositories.user_repository import UserRepository


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


class UserService:
    """Service for reading, creating and deleting users"""
    
    def __init__(self, user_repository: UserRepository, logger: LoggerAdapter) -> None:
        self.user_repository = user_repository
        self.logger = logger
    
    async def get_all(self) -> List[User]:
        """
        Get all users
        
        Returns:
            List of users (empty when none exist)
        """
        self.logger.info("Retrieving all users")
        started = time.perf_counter()
        try:
            users = await self.user_repository.get_all()
        except Exception as exception:
            self.logger.error(exception, "Something went wrong while retrieving all users")
            raise
        self.logger.info("All users retrieved in %dms", _elapsed_ms(started))
        return users
    
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Get a user by ID
        
        Args:
            user_id: ID of the user
            
        Returns:
            User if found, None otherwise
        """
        self.logger.info("Retrieving user with id: %s", user_id)
        started = time.perf_counter()
        try:
            user = await self.user_repository.get_by_id(user_id)
        except Exception as exception:
            self.logger.error(
                exception, "Something went wrong while retrieving user with id %s", user_id
            )
            raise
        self.logger.info("User with id %s retrieved in %dms", user_id, _elapsed_ms(started))
        return user
    
    async def create(self, user: User) -> bool:
        """
        Create a user
        
        The full name is not re-validated here; the API boundary rejects
        empty names before this is called.
        
        Args:
            user: User entity with its ID already assigned
            
        Returns:
            True if the user was stored
        """
        self.logger.info("Creating user with id %s and name: %s", user.id, user.full_name)
        started = time.perf_counter()
        try:
            created = await self.user_repository.create(user)
        except Exception as exception:
            self.logger.error(exception, "Something went wrong while creating a user")
            raise
        self.logger.info("User with id %s created in %dms", user.id, _elapsed_ms(started))
        return created
    
    async def delete_by_id(self, user_id: UUID) -> bool:
        """
        Delete a user by ID
        
        Args:
            user_id: ID of the user
            
        Returns:
            True if a user was deleted, False if none matched
        """
        self.logger.info("Deleting user with id: %s", user_id)
        started = time.perf_counter()
        try:
            deleted = await self.user_repository.delete_by_id(user_id)
        except Exception as exception:
            self.logger.error(
                exception, "Something went wrong while deleting user with id %s", user_id
            )
            raise
        self.logger.info("User with id %s deleted in %dms", user_id, _elapsed_ms(started))
        return deleted
