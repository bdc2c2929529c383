# =============================================================================
# core/navigation.py - Storefront Navigation Links
# =============================================================================
# The links menu shows the same entries to every visitor, plus a dashboard
# link for the configured admin user.
# =============================================================================

from pydantic import BaseModel

from app.auth.models import AuthUser


class NavLink(BaseModel):
    href: str
    label: str


PUBLIC_LINKS = (
    NavLink(href="/", label="home"),
    NavLink(href="/about", label="about"),
    NavLink(href="/products", label="products"),
    NavLink(href="/favorites", label="favorites"),
    NavLink(href="/cart", label="cart"),
    NavLink(href="/orders", label="orders"),
)

ADMIN_LINK = NavLink(href="/admin/sales", label="dashboard")


def is_admin(user: AuthUser | None, admin_user_id: str) -> bool:
    """An empty admin_user_id means nobody is admin."""
    return bool(user and admin_user_id and str(user.id) == admin_user_id)


def build_nav_links(user: AuthUser | None, admin_user_id: str) -> list[NavLink]:
    links = list(PUBLIC_LINKS)
    if is_admin(user, admin_user_id):
        links.append(ADMIN_LINK)
    return links
