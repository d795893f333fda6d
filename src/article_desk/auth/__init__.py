"""Authentication module: session actor and role guards."""

from article_desk.auth.middleware import Actor, require_authenticated_user, require_role

__all__ = ["Actor", "require_authenticated_user", "require_role"]
