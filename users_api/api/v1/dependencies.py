# Local application imports
from ...application.services.user_service import UserService
from ...di.container import get_container


def get_user_service() -> UserService:
    """
    FastAPI dependency that resolves the users service from the DI container
    
    Returns:
        UserService wired to the configured repository and logger
    """
    container = get_container()
    return container.get(UserService)
