"""User document model: the record store's view of an actor."""

from __future__ import annotations

from enum import StrEnum

from article_desk.models.base import DocumentBase


class Role(StrEnum):
    AUTHOR = "AUTHOR"
    REVIEWER = "REVIEWER"
    ADMIN = "ADMIN"


class User(DocumentBase):
    """A registered user. Credentials live with the external login service."""

    name: str
    email: str
    role: Role
