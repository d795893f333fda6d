"""Reviewer routes: assigned articles, suggest changes, reject."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from article_desk.auth.middleware import Actor, require_role
from article_desk.changes.ledger import ChangeLedger
from article_desk.database.repositories.articles import ArticleRepository
from article_desk.errors import InvalidOperation
from article_desk.models.article import ReviewStatus
from article_desk.models.user import Role
from article_desk.routes.deps import articles_repository, change_ledger
from article_desk.services import workflow

router = APIRouter(prefix="/reviewer", tags=["reviewer"])

ReviewerActor = Annotated[Actor, Depends(require_role(Role.REVIEWER))]
Articles = Annotated[ArticleRepository, Depends(articles_repository)]


class SuggestedChanges(BaseModel):
    pending_content: str


class ReviewUpdate(BaseModel):
    review_status: ReviewStatus


@router.get("/articles")
async def list_assigned(actor: ReviewerActor, articles: Articles) -> dict:
    return {"articles": await workflow.list_reviewer_articles(actor.id, articles)}


@router.patch("/articles/{article_id}/suggest-changes")
async def suggest_changes(
    article_id: str,
    body: SuggestedChanges,
    actor: ReviewerActor,
    articles: Articles,
    ledger: Annotated[ChangeLedger, Depends(change_ledger)],
) -> dict:
    """Send proposed text to the admin for per-change decisions."""
    article = await workflow.suggest_changes(actor.id, article_id, body.pending_content, articles, ledger)
    return {"article": article}


@router.patch("/articles/{article_id}/review")
async def review(article_id: str, body: ReviewUpdate, actor: ReviewerActor, articles: Articles) -> dict:
    """Reject an assigned article outright."""
    if body.review_status != ReviewStatus.REJECTED:
        raise InvalidOperation("Only REJECTED is allowed here")
    article = await workflow.reviewer_reject(actor.id, article_id, articles)
    return {"article": article}
