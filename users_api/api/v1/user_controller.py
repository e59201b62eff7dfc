# Standard library imports
from typing import List, Union
from uuid import UUID

# External package imports
from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.user_dto import CreateUserRequest, UserResponse
from ...application.mappers.user_mapper import to_user_response
from ...application.services.user_service import UserService
from ...domain.models.user import User
from .dependencies import get_user_service


USERS_ROUTE_PREFIX = "/users"

router = APIRouter(tags=["users"])


@router.get("", response_model=List[UserResponse])
async def get_all_users(
    user_service: UserService = Depends(get_user_service),
) -> List[UserResponse]:
    """
    List all users
    
    Returns:
        List of UserResponse objects (possibly empty)
    """
    users = await user_service.get_all()
    return [to_user_response(user) for user in users]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={status.HTTP_404_NOT_FOUND: {"description": "User not found"}},
)
async def get_user(
    user_id: UUID,
    user_service: UserService = Depends(get_user_service),
) -> Union[UserResponse, Response]:
    """
    Get a user by ID
    
    Args:
        user_id: ID of the user
        
    Returns:
        UserResponse, or an empty 404 response if the user does not exist
    """
    user = await user_service.get_by_id(user_id)
    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return to_user_response(user)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Full name is empty"}},
)
async def create_user(
    request: CreateUserRequest,
    user_service: UserService = Depends(get_user_service),
) -> Response:
    """
    Create a new user
    
    Args:
        request: User creation request
        
    Returns:
        201 with the created UserResponse and a Location header,
        or an empty 400 response if the user could not be created
    """
    if not request.full_name or not request.full_name.strip():
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    
    user = User(full_name=request.full_name)
    created = await user_service.create(user)
    if not created:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    
    user_response = to_user_response(user)
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=user_response.model_dump(mode="json"),
        headers={"Location": f"{USERS_ROUTE_PREFIX}/{user.id}"},
    )


@router.delete(
    "/{user_id}",
    responses={status.HTTP_404_NOT_FOUND: {"description": "User not found"}},
)
async def delete_user(
    user_id: UUID,
    user_service: UserService = Depends(get_user_service),
) -> Response:
    """
    Delete a user by ID
    
    Args:
        user_id: ID of the user
        
    Returns:
        Empty 200 response if deleted, empty 404 response otherwise
    """
    deleted = await user_service.delete_by_id(user_id)
    if not deleted:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_200_OK)
