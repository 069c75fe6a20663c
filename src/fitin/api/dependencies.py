"""Request-scoped dependencies shared by the routers."""

from fastapi import Depends, HTTPException, Request, status

from fitin.containers import AppContainer
from fitin.domain.models import AuthUser  # noqa: TC001


def get_container(request: Request) -> AppContainer:
    """Return the dependency container attached to the app."""
    return request.app.state.container


def extract_access_token(request: Request) -> str | None:
    """Return the bearer token, falling back to the session cookie."""
    header = request.headers.get("authorization")
    if header:
        scheme, _, value = header.partition(" ")
        if scheme.lower() == "bearer" and value.strip():
            return value.strip()
    container = get_container(request)
    return request.cookies.get(container.settings.session_cookie_name) or None


async def get_current_user(request: Request) -> AuthUser | None:
    """Resolve the signed-in user, if any."""
    container = get_container(request)
    return container.auth_service.current_user(extract_access_token(request))


async def require_user(
    user: AuthUser | None = Depends(get_current_user),
) -> AuthUser:
    """Ensure the request carries a valid session."""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="You must be logged in",
        )
    return user
