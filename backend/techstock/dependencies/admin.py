"""Admin authentication dependency."""

from fastapi import Depends, HTTPException, status

from techstock.dependencies.auth import get_current_user
from techstock.schemas.auth import TokenClaims


def get_admin_user(current_user: TokenClaims = Depends(get_current_user)) -> TokenClaims:
    """Require admin privileges.

    Args:
        current_user: The caller's identity from get_current_user dependency.

    Returns:
        The claims if the caller is an admin.

    Raises:
        HTTPException: If the caller is not an admin.
    """
    if current_user.role != "admin":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user
