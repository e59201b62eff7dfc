from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    async def get_all(self) -> List[User]:
        """Get every stored user (empty list when there are none)"""
        pass
    
    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Find user by ID"""
        pass
    
    @abstractmethod
    async def create(self, user: User) -> bool:
        """Insert a new user; never overwrites an existing ID"""
        pass
    
    @abstractmethod
    async def delete_by_id(self, user_id: UUID) -> bool:
        """Delete user by ID, returning whether a row was removed"""
        pass
