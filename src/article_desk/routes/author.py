"""Author routes: submit, list, request revision, edit after approval."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from article_desk.auth.middleware import Actor, require_role
from article_desk.changes.ledger import ChangeLedger
from article_desk.database.repositories.articles import ArticleRepository
from article_desk.models.user import Role
from article_desk.routes.deps import articles_repository, change_ledger
from article_desk.services import workflow

router = APIRouter(tags=["author"])

AuthorActor = Annotated[Actor, Depends(require_role(Role.AUTHOR))]
Articles = Annotated[ArticleRepository, Depends(articles_repository)]


class ArticleCreate(BaseModel):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)


class ArticleEdit(BaseModel):
    title: str | None = None
    content: str | None = None


@router.post("/articles")
async def submit_article(body: ArticleCreate, actor: AuthorActor, articles: Articles) -> dict:
    """Submit a new article for admin triage."""
    article = await workflow.submit_article(actor.id, body.title, body.content, articles)
    return {"article": article}


@router.get("/author/articles")
async def list_my_articles(actor: AuthorActor, articles: Articles) -> dict:
    return {"articles": await workflow.list_author_articles(actor.id, articles)}


@router.post("/author/articles/{article_id}/request-revision")
async def request_revision(article_id: str, actor: AuthorActor, articles: Articles) -> dict:
    """Ask to revise a rejected article."""
    article = await workflow.request_revision(actor.id, article_id, articles)
    return {"article": article}


@router.patch("/author/articles/{article_id}/edit")
async def edit_article(
    article_id: str,
    body: ArticleEdit,
    actor: AuthorActor,
    articles: Articles,
    ledger: Annotated[ChangeLedger, Depends(change_ledger)],
) -> dict:
    """Submit revised content once the revision request is approved."""
    article = await workflow.author_edit(
        actor.id,
        article_id,
        articles,
        ledger,
        title=body.title,
        content=body.content,
    )
    return {"article": article}
