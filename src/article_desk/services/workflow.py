"""Article lifecycle: role-gated, precondition-checked transitions.

Every transition checks ownership before state, builds the updated article
as a copy and writes it with a single repository update. A rejected call
raises a ``WorkflowError`` and leaves both the stored article and the change
ledger as they were.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel

from article_desk.changes.reconstruct import reconstruct
from article_desk.errors import Forbidden, InvalidOperation, InvalidState, NotFound
from article_desk.models.article import Article, ArticleStatus, PublicArticle, ReviewStatus
from article_desk.models.change import ChangeSpan, Decision
from article_desk.models.workflow import REJECTED_STAGES, WorkflowStage, workflow_stage

if TYPE_CHECKING:
    from article_desk.changes.ledger import ChangeLedger
    from article_desk.database.repositories.articles import ArticleRepository
    from article_desk.database.repositories.users import UserRepository
    from article_desk.models.user import User

logger = logging.getLogger(__name__)

TRIAGE_STATUSES = frozenset({ArticleStatus.ACCEPTED, ArticleStatus.REJECTED})


class ChangesView(BaseModel):
    """What an admin sees when opening an article's pending edit."""

    article_id: str
    original_text: str
    proposed_text: str
    spans: list[ChangeSpan]
    recomputed: bool


async def _load(article_id: str, articles_repo: ArticleRepository) -> Article:
    article = await articles_repo.get(article_id, article_id)
    if article is None:
        raise NotFound(f"Article {article_id} not found")
    return article


async def _save(article: Article, changes: dict[str, object], articles_repo: ArticleRepository) -> Article:
    updated = article.model_copy(update=changes)
    await articles_repo.update(updated)
    return updated


def _require_author(article: Article, author_id: str) -> None:
    if article.author_id != author_id:
        raise Forbidden("Only the article's author can do this")


def _require_reviewer(article: Article, reviewer_id: str) -> None:
    if article.reviewer_id != reviewer_id:
        raise Forbidden("Only the assigned reviewer can do this")


# Author


async def submit_article(
    author_id: str,
    title: str,
    content: str,
    articles_repo: ArticleRepository,
) -> Article:
    """Create a new article in the admin triage queue."""
    if not title.strip() or not content.strip():
        raise InvalidOperation("Title and content are required")
    article = Article(title=title, content=content, author_id=author_id)
    await articles_repo.create(article)
    logger.info("Article submitted: article=%s author=%s", article.id, author_id)
    return article


async def list_author_articles(author_id: str, articles_repo: ArticleRepository) -> list[Article]:
    return await articles_repo.list_by_author(author_id)


async def request_revision(
    author_id: str,
    article_id: str,
    articles_repo: ArticleRepository,
) -> Article:
    """Ask an admin for permission to revise a rejected article.

    Repeating the request while one is open changes nothing. After a denial
    the flag is reset, so the author may ask again.
    """
    article = await _load(article_id, articles_repo)
    _require_author(article, author_id)
    if workflow_stage(article) not in REJECTED_STAGES:
        raise InvalidState("Revision can be requested only for REJECTED articles")
    if article.revision_requested:
        return article

    article = await _save(article, {"revision_requested": True}, articles_repo)
    logger.info("Revision requested: article=%s author=%s", article_id, author_id)
    return article


async def author_edit(
    author_id: str,
    article_id: str,
    articles_repo: ArticleRepository,
    ledger: ChangeLedger,
    *,
    title: str | None = None,
    content: str | None = None,
) -> Article:
    """Submit a revised article for admin decision after an approved revision request."""
    if title is None and content is None:
        raise InvalidOperation("Nothing to update")
    if title is not None and not title.strip():
        raise InvalidOperation("Title must not be empty")
    if content is not None and not content.strip():
        raise InvalidOperation("Content must not be empty")

    article = await _load(article_id, articles_repo)
    _require_author(article, author_id)
    if workflow_stage(article) not in REJECTED_STAGES:
        raise InvalidState("Only REJECTED articles can be edited after revision approval")
    if not (article.revision_requested and article.revision_approved):
        raise InvalidState("Revision is not approved yet")

    changes: dict[str, object] = {}
    if title is not None:
        changes["title"] = title
    if content is not None:
        changes.update(
            previous_content=article.content,
            pending_content=content,
            reviewer_id=None,
            review_status=None,
        )

    article = await _save(article, changes, articles_repo)
    if content is not None:
        ledger.clear(article_id)
    logger.info(
        "Author revision submitted: article=%s author=%s content_changed=%s",
        article_id,
        author_id,
        content is not None,
    )
    return article


# Admin


async def list_articles_by_status(status: ArticleStatus, articles_repo: ArticleRepository) -> list[Article]:
    return await articles_repo.list_by_status(status)


async def set_article_status(
    article_id: str,
    status: ArticleStatus,
    articles_repo: ArticleRepository,
) -> Article:
    """Accept or reject a freshly submitted article.

    A rejection resets all review context so the article starts clean.
    """
    if status not in TRIAGE_STATUSES:
        raise InvalidOperation("Status must be ACCEPTED or REJECTED")

    article = await _load(article_id, articles_repo)
    if workflow_stage(article) != WorkflowStage.AWAITING_TRIAGE:
        raise InvalidState("Only PENDING articles without a reviewer can be triaged")

    changes: dict[str, object] = {"status": status}
    if status == ArticleStatus.REJECTED:
        changes.update(
            reviewer_id=None,
            review_status=None,
            revision_requested=False,
            revision_approved=False,
        )
    article = await _save(article, changes, articles_repo)
    logger.info("Article triaged: article=%s status=%s", article_id, status)
    return article


async def list_reviewers(users_repo: UserRepository) -> list[User]:
    return await users_repo.list_reviewers()


async def assign_reviewer(
    article_id: str,
    reviewer_id: str,
    articles_repo: ArticleRepository,
    users_repo: UserRepository,
) -> Article:
    """Hand a triaged article to a reviewer."""
    reviewer = await users_repo.get_reviewer(reviewer_id)
    if reviewer is None:
        raise NotFound(f"Reviewer {reviewer_id} not found")

    article = await _load(article_id, articles_repo)
    if workflow_stage(article) != WorkflowStage.AWAITING_TRIAGE:
        raise InvalidState("Only PENDING articles awaiting triage can be assigned")

    article = await _save(
        article,
        {
            "reviewer_id": reviewer_id,
            "status": ArticleStatus.IN_REVIEW,
            "review_status": ReviewStatus.PENDING,
        },
        articles_repo,
    )
    logger.info("Reviewer assigned: article=%s reviewer=%s", article_id, reviewer_id)
    return article


async def decide_revision_request(
    article_id: str,
    approved: bool,
    articles_repo: ArticleRepository,
) -> Article:
    """Approve or deny an author's open revision request."""
    article = await _load(article_id, articles_repo)
    if article.status != ArticleStatus.REJECTED:
        raise InvalidState("Revision decision allowed only for REJECTED articles")
    if not article.revision_requested:
        raise InvalidState("No revision request to decide")

    article = await _save(
        article,
        {"revision_approved": approved, "revision_requested": approved},
        articles_repo,
    )
    logger.info("Revision request decided: article=%s approved=%s", article_id, approved)
    return article


async def get_changes(
    article_id: str,
    articles_repo: ArticleRepository,
    ledger: ChangeLedger,
) -> ChangesView:
    """Load (or reuse) the change set for an article's pending edit."""
    article = await _load(article_id, articles_repo)
    if article.pending_content is None:
        raise InvalidState("No pending changes to review")

    original = article.previous_content if article.previous_content is not None else article.content
    change_set, recomputed = ledger.compute_or_fetch(article_id, original or "", article.pending_content)
    if recomputed:
        logger.info(
            "Change decisions start from defaults: article=%s (first load or ledger lost on restart)",
            article_id,
        )
    return ChangesView(
        article_id=article_id,
        original_text=change_set.original_text,
        proposed_text=change_set.proposed_text,
        spans=change_set.spans,
        recomputed=recomputed,
    )


def decide_change(
    article_id: str,
    span_id: int,
    decision: Decision,
    ledger: ChangeLedger,
) -> list[ChangeSpan]:
    """Approve or reject a single change span."""
    change_set = ledger.set_decision(article_id, span_id, decision)
    logger.debug("Change decided: article=%s change=%d decision=%s", article_id, span_id, decision)
    return change_set.spans


async def submit_changes(
    article_id: str,
    articles_repo: ArticleRepository,
    ledger: ChangeLedger,
) -> Article:
    """Apply the decided change set and move the article on.

    Reviewer-originated edits are published. Author revisions go back to
    the triage queue for a fresh reviewer assignment.
    """
    change_set = ledger.get(article_id)
    if change_set is None:
        raise InvalidState(
            "No changes loaded for this article; load changes first "
            "(decisions made before a restart are lost)"
        )
    final_text = reconstruct(change_set.spans)

    article = await _load(article_id, articles_repo)
    if article.pending_content is None:
        raise InvalidState("No pending content found")

    changes: dict[str, object] = {
        "content": final_text,
        "previous_content": None,
        "pending_content": None,
        "revision_requested": False,
        "revision_approved": False,
    }
    if workflow_stage(article) == WorkflowStage.REVIEWER_CHANGES_SUBMITTED:
        changes.update(status=ArticleStatus.PUBLISHED, review_status=ReviewStatus.ACCEPTED)
    else:
        changes.update(status=ArticleStatus.PENDING, review_status=None, reviewer_id=None)

    article = await _save(article, changes, articles_repo)
    ledger.clear(article_id)
    logger.info("Changes submitted: article=%s status=%s", article_id, article.status)
    return article


# Reviewer


async def list_reviewer_articles(reviewer_id: str, articles_repo: ArticleRepository) -> list[Article]:
    return await articles_repo.list_by_reviewer(reviewer_id)


async def suggest_changes(
    reviewer_id: str,
    article_id: str,
    proposed_text: str,
    articles_repo: ArticleRepository,
    ledger: ChangeLedger,
) -> Article:
    """Send a reviewer's proposed text back to the admin queue."""
    article = await _load(article_id, articles_repo)
    _require_reviewer(article, reviewer_id)
    if workflow_stage(article) != WorkflowStage.IN_REVIEW:
        raise InvalidState("Article must be IN_REVIEW")
    if not proposed_text.strip():
        raise InvalidOperation("Proposed text must not be empty")

    article = await _save(
        article,
        {
            "previous_content": article.content,
            "pending_content": proposed_text,
            "status": ArticleStatus.PENDING,
            "review_status": ReviewStatus.PENDING,
        },
        articles_repo,
    )
    ledger.clear(article_id)
    logger.info("Changes suggested: article=%s reviewer=%s", article_id, reviewer_id)
    return article


async def reviewer_reject(
    reviewer_id: str,
    article_id: str,
    articles_repo: ArticleRepository,
) -> Article:
    """Reject an article outright and release the reviewer.

    Pending content, if any, is kept as-is for an admin to resolve.
    """
    article = await _load(article_id, articles_repo)
    _require_reviewer(article, reviewer_id)
    if workflow_stage(article) != WorkflowStage.IN_REVIEW:
        raise InvalidState("Article not in review state")
    if article.pending_content is not None:
        logger.warning("Reviewer rejected article with pending content kept: article=%s", article_id)

    article = await _save(
        article,
        {
            "review_status": ReviewStatus.REJECTED,
            "status": ArticleStatus.REJECTED,
            "reviewer_id": None,
        },
        articles_repo,
    )
    logger.info("Article rejected by reviewer: article=%s reviewer=%s", article_id, reviewer_id)
    return article


# Public


async def public_feed(articles_repo: ArticleRepository) -> list[PublicArticle]:
    return [PublicArticle.from_article(a) for a in await articles_repo.list_published()]
