"""User routes (no authentication).

- GET /users/{email}: Find a user by email
- POST /users: Register a user
"""

import logging

from fastapi import APIRouter, Depends, status

from api.dependencies import get_create_user, get_find_user
from api.models import CreateUserRequest, UserResponse, to_user_response
from domain.model.errors import UserNotFoundError
from services.user_service import CreateUser, FindUser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{email}", response_model=UserResponse)
def find_user_by_email(email: str, find_user: FindUser = Depends(get_find_user)):
    """Find a user by email (case/whitespace-insensitive)."""
    user = find_user.find_by_email(email)
    if user is None:
        raise UserNotFoundError(email, is_email=True)
    return to_user_response(user)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(request: CreateUserRequest, create: CreateUser = Depends(get_create_user)):
    """Register a new user by email."""
    user = create.execute(request.to_domain())
    return to_user_response(user)
