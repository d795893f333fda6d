"""Data models for Cosmos DB document types and the change engine."""

from article_desk.models.article import Article, ArticleStatus, PublicArticle, ReviewStatus
from article_desk.models.change import ChangeKind, ChangeSet, ChangeSpan, Decision
from article_desk.models.user import Role, User
from article_desk.models.workflow import WorkflowStage, workflow_stage

__all__ = [
    "Article",
    "ArticleStatus",
    "ChangeKind",
    "ChangeSet",
    "ChangeSpan",
    "Decision",
    "PublicArticle",
    "ReviewStatus",
    "Role",
    "User",
    "WorkflowStage",
    "workflow_stage",
]
