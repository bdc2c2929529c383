# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# API endpoints for authentication-related operations.
#
# Note: Actual signup/login is handled by the identity provider client-side.
# These routes are for checking a token after authentication.
# =============================================================================

from fastapi import APIRouter, Depends

from app.auth.dependencies import get_current_user
from app.auth.models import AuthUser, UserResponse
from app.config import Settings, get_settings
from core.navigation import is_admin

router = APIRouter()


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    user: AuthUser = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
) -> UserResponse:
    """
    Get the current authenticated user.

    Raises:
        401: If not authenticated
    """
    return UserResponse(
        id=user.id,
        email=user.email,
        is_admin=is_admin(user, settings.ADMIN_USER_ID),
    )


@router.get("/verify")
async def verify_token(
    user: AuthUser = Depends(get_current_user)
) -> dict:
    """
    Verify that the current token is valid.

    Raises:
        401: If token is invalid or expired
    """
    return {
        "valid": True,
        "user_id": user.id,
        "email": user.email
    }
