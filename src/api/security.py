"""Authentication dependencies for protected routes.

The caller identifies itself with the `user-id` header. The resolved
AuthenticatedUser is returned and also stored on request.state.user.
"""

from typing import Optional

from fastapi import Depends, Header, Request

from api.dependencies import get_auth_gate
from domain.model.user import AuthenticatedUser
from services.auth_service import AuthenticationGate

USER_ID_HEADER = "user-id"


def get_current_user(
    request: Request,
    user_id: Optional[str] = Header(None, alias=USER_ID_HEADER),
    gate: AuthenticationGate = Depends(get_auth_gate),
) -> Optional[AuthenticatedUser]:
    """Get current user (optional). Returns None if absent or unknown."""
    user = gate.authenticate(user_id, required=False)
    request.state.user = user
    return user


def get_current_user_required(
    request: Request,
    user_id: Optional[str] = Header(None, alias=USER_ID_HEADER),
    gate: AuthenticationGate = Depends(get_auth_gate),
) -> AuthenticatedUser:
    """Get current user (required). Raises AuthenticationError (401) otherwise."""
    user = gate.authenticate(user_id, required=True)
    request.state.user = user
    return user
