from typing import TYPE_CHECKING
from ...application.services.user_service import UserService
from ...core.logger_adapter import StandardLoggerAdapter
from ...domain.repositories.user_repository import UserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User service provider - registers the users service"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register UserService.
        Created on-demand via factory; holds no state between requests.
        """
        container.register_factory(
            UserService,
            lambda: UserService(
                user_repository=container.get(UserRepository),
                logger=StandardLoggerAdapter.for_class(UserService),
            )
        )
