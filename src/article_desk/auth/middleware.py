"""Session-based actor resolution and role guards.

Login itself is handled by an external service that stores
``{"id": ..., "role": ...}`` under ``request.session["user"]``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any

from fastapi import Depends, HTTPException, Request, status
from pydantic import BaseModel, ValidationError

from article_desk.models.user import Role

if TYPE_CHECKING:
    from collections.abc import Callable


class Actor(BaseModel):
    """The authenticated user making a request."""

    id: str
    role: Role


def get_user(request: Request) -> dict[str, Any] | None:
    """Extract the authenticated user from the session, if present."""
    return request.session.get("user") if hasattr(request, "session") else None


def require_authenticated_user(request: Request) -> Actor:
    """Return the authenticated actor or raise HTTP 401."""
    user = get_user(request)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    try:
        return Actor.model_validate({"id": str(user.get("id", "")), "role": user.get("role")})
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid session user",
        ) from exc


def require_role(*roles: Role) -> Callable[[Actor], Actor]:
    """Build a dependency that admits only actors holding one of ``roles``."""

    def dependency(actor: Annotated[Actor, Depends(require_authenticated_user)]) -> Actor:
        if actor.role not in roles:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
        return actor

    return dependency
