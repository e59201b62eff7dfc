from ...domain.models.user import User
from ..dto.user_dto import UserResponse


def to_user_response(user: User) -> UserResponse:
    """Map a User entity to its API response shape"""
    return UserResponse(id=user.id, full_name=user.full_name)
