# =============================================================================
# app/routers/navigation.py - Navigation Links Endpoint
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends

from app.auth import AuthUser, get_current_user_optional
from app.dependencies import SettingsDep
from core.navigation import NavLink, build_nav_links

router = APIRouter()


@router.get("/navigation", response_model=list[NavLink])
async def get_navigation(
    settings: SettingsDep,
    user: Annotated[AuthUser | None, Depends(get_current_user_optional)],
):
    """
    Links for the site menu.

    The dashboard link is only included for the configured admin user.
    """
    return build_nav_links(user, settings.ADMIN_USER_ID)
