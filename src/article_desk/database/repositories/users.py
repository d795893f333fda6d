"""Repository for the users container (partitioned by /id)."""

from __future__ import annotations

from article_desk.database.repositories.base import BaseRepository
from article_desk.models.user import Role, User


class UserRepository(BaseRepository[User]):
    """Read access to users; registration is owned by the login service."""

    container_name = "users"
    model_class = User

    async def list_reviewers(self) -> list[User]:
        """Fetch every user holding the reviewer role."""
        return await self.query(
            "SELECT * FROM c WHERE c.role = @role ORDER BY c.name ASC",
            [{"name": "@role", "value": Role.REVIEWER.value}],
        )

    async def get_reviewer(self, user_id: str) -> User | None:
        """Fetch a user by id only if they are a reviewer."""
        user = await self.get(user_id, user_id)
        if user is None or user.role != Role.REVIEWER:
            return None
        return user
