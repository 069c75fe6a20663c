"""Admin status endpoint."""

from fastapi import APIRouter, Depends, Request

from fitin.api.dependencies import get_container, get_current_user
from fitin.domain.models import AuthUser  # noqa: TC001

router = APIRouter(prefix="/me", tags=["admin"])


@router.get("/admin-status")
async def admin_status(
    request: Request, user: AuthUser | None = Depends(get_current_user)
) -> dict[str, object]:
    """Return whether the current user holds the admin role."""
    status = get_container(request).admin_service.get_admin_status(user)
    return {
        "is_admin": status.is_admin,
        "user_id": str(status.user_id) if status.user_id else None,
    }
