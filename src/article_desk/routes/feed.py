"""Public feed route: published articles only, no login required."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from article_desk.database.repositories.articles import ArticleRepository
from article_desk.routes.deps import articles_repository
from article_desk.services import workflow

router = APIRouter(tags=["feed"])


@router.get("/feed")
async def feed(articles: Annotated[ArticleRepository, Depends(articles_repository)]) -> dict:
    return {"articles": await workflow.public_feed(articles)}
