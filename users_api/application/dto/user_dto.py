from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class CreateUserRequest(BaseModel):
    """DTO for user creation request (missing, null and blank names are rejected by the controller)"""
    full_name: Optional[str] = ""


class UserResponse(BaseModel):
    """DTO for user response"""
    id: UUID
    full_name: str
