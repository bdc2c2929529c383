# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from typing import Optional

from pydantic import BaseModel, ConfigDict


class AuthUser(BaseModel):
    """
    Authenticated user extracted from the access token.

    This is the minimal user info available from the token itself.
    `id` is stored as the owner of products the user creates.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    email: Optional[str] = None


class UserResponse(BaseModel):
    """Current user as returned by GET /auth/me."""
    id: str
    email: Optional[str] = None
    is_admin: bool = False
