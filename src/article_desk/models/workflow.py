"""Named workflow stages derived from an article's status and flags.

Several logical states share a primary status (a plain rejection and a
rejection carrying an author revision are both ``REJECTED``). Services match
on the stage instead of re-deriving meaning from field combinations.
"""

from __future__ import annotations

from enum import StrEnum

from article_desk.models.article import Article, ArticleStatus, ReviewStatus


class WorkflowStage(StrEnum):
    AWAITING_TRIAGE = "awaiting_triage"
    REVIEWER_CHANGES_SUBMITTED = "reviewer_changes_submitted"
    PENDING_UNRESOLVED = "pending_unresolved"
    ACCEPTED = "accepted"
    IN_REVIEW = "in_review"
    PUBLISHED = "published"
    REJECTED_CLEAN = "rejected_clean"
    REJECTED_REVISION_REQUESTED = "rejected_revision_requested"
    REJECTED_REVISION_APPROVED = "rejected_revision_approved"
    REJECTED_WITH_AUTHOR_REVISION = "rejected_with_author_revision"


REJECTED_STAGES = frozenset(
    {
        WorkflowStage.REJECTED_CLEAN,
        WorkflowStage.REJECTED_REVISION_REQUESTED,
        WorkflowStage.REJECTED_REVISION_APPROVED,
        WorkflowStage.REJECTED_WITH_AUTHOR_REVISION,
    }
)


_DIRECT_STAGES = {
    ArticleStatus.ACCEPTED: WorkflowStage.ACCEPTED,
    ArticleStatus.IN_REVIEW: WorkflowStage.IN_REVIEW,
    ArticleStatus.PUBLISHED: WorkflowStage.PUBLISHED,
}


def workflow_stage(article: Article) -> WorkflowStage:
    """Classify an article into exactly one workflow stage."""
    if article.status in _DIRECT_STAGES:
        return _DIRECT_STAGES[article.status]

    if article.status == ArticleStatus.PENDING:
        if (
            article.reviewer_id is not None
            and article.review_status == ReviewStatus.PENDING
            and article.pending_content is not None
        ):
            return WorkflowStage.REVIEWER_CHANGES_SUBMITTED
        if article.reviewer_id is None and article.pending_content is None:
            return WorkflowStage.AWAITING_TRIAGE
        # Leftover review context that no admin operation may act on.
        return WorkflowStage.PENDING_UNRESOLVED

    if article.status == ArticleStatus.REJECTED:
        if article.pending_content is not None:
            return WorkflowStage.REJECTED_WITH_AUTHOR_REVISION
        if article.revision_requested and article.revision_approved:
            return WorkflowStage.REJECTED_REVISION_APPROVED
        if article.revision_requested:
            return WorkflowStage.REJECTED_REVISION_REQUESTED
        return WorkflowStage.REJECTED_CLEAN

    raise ValueError(f"Unknown article status: {article.status!r}")
