"""Admin routes: triage, reviewer assignment, revision requests, change decisions."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from article_desk.auth.middleware import Actor, require_role
from article_desk.changes.ledger import ChangeLedger
from article_desk.database.repositories.articles import ArticleRepository
from article_desk.database.repositories.users import UserRepository
from article_desk.models.article import ArticleStatus
from article_desk.models.change import Decision
from article_desk.models.user import Role
from article_desk.routes.deps import articles_repository, change_ledger, users_repository
from article_desk.services import workflow

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_role(Role.ADMIN))])

logger = logging.getLogger(__name__)

Articles = Annotated[ArticleRepository, Depends(articles_repository)]
Users = Annotated[UserRepository, Depends(users_repository)]
Ledger = Annotated[ChangeLedger, Depends(change_ledger)]
AdminActor = Annotated[Actor, Depends(require_role(Role.ADMIN))]


class StatusUpdate(BaseModel):
    status: ArticleStatus


class ReviewerAssignment(BaseModel):
    reviewer_id: str


class RevisionDecision(BaseModel):
    approved: bool


class ChangeDecision(BaseModel):
    decision: Decision


@router.get("/articles")
async def list_articles(articles: Articles, status: ArticleStatus = ArticleStatus.PENDING) -> dict:
    """List articles in one status bucket."""
    return {"articles": await workflow.list_articles_by_status(status, articles)}


@router.patch("/articles/{article_id}/status")
async def set_status(article_id: str, body: StatusUpdate, articles: Articles) -> dict:
    """Accept or reject a newly submitted article."""
    article = await workflow.set_article_status(article_id, body.status, articles)
    return {"article": article}


@router.get("/reviewers")
async def list_reviewers(users: Users) -> dict:
    return {"reviewers": await workflow.list_reviewers(users)}


@router.patch("/articles/{article_id}/assign-reviewer")
async def assign_reviewer(article_id: str, body: ReviewerAssignment, articles: Articles, users: Users) -> dict:
    article = await workflow.assign_reviewer(article_id, body.reviewer_id, articles, users)
    return {"article": article}


@router.patch("/articles/{article_id}/revision-decision")
async def decide_revision(article_id: str, body: RevisionDecision, articles: Articles) -> dict:
    article = await workflow.decide_revision_request(article_id, body.approved, articles)
    return {"article": article}


@router.get("/articles/{article_id}/changes")
async def get_changes(article_id: str, articles: Articles, ledger: Ledger) -> workflow.ChangesView:
    """Show the word-level diff of an article's pending edit with current decisions."""
    return await workflow.get_changes(article_id, articles, ledger)


@router.patch("/articles/{article_id}/changes/{change_id}/decision")
async def decide_change(article_id: str, change_id: int, body: ChangeDecision, ledger: Ledger) -> dict:
    """Approve or reject one change."""
    spans = workflow.decide_change(article_id, change_id, body.decision, ledger)
    return {"article_id": article_id, "changes": spans}


@router.post("/articles/{article_id}/submit-changes")
async def submit_changes(article_id: str, actor: AdminActor, articles: Articles, ledger: Ledger) -> dict:
    """Apply all decisions and advance the article."""
    article = await workflow.submit_changes(article_id, articles, ledger)
    logger.info("Change set applied by admin=%s article=%s", actor.id, article_id)
    return {"article": article}
