"""Article document model."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel

from article_desk.models.base import DocumentBase


class ArticleStatus(StrEnum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    IN_REVIEW = "IN_REVIEW"
    PUBLISHED = "PUBLISHED"
    REJECTED = "REJECTED"


class ReviewStatus(StrEnum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


class Article(DocumentBase):
    """One editorial document and its in-flight edit, if any.

    ``previous_content`` and ``pending_content`` are set together when an
    edit is proposed: they are the before/after sides of the diff an admin
    decides on.
    """

    title: str
    content: str
    status: ArticleStatus = ArticleStatus.PENDING
    author_id: str
    reviewer_id: str | None = None
    review_status: ReviewStatus | None = None
    revision_requested: bool = False
    revision_approved: bool = False
    previous_content: str | None = None
    pending_content: str | None = None


class PublicArticle(BaseModel):
    """The subset of an article exposed on the public feed."""

    id: str
    title: str
    content: str
    author_id: str
    created_at: datetime

    @classmethod
    def from_article(cls, article: Article) -> PublicArticle:
        return cls(
            id=article.id,
            title=article.title,
            content=article.content,
            author_id=article.author_id,
            created_at=article.created_at,
        )
