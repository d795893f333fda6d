"""HTTP routes grouped by actor role."""

from article_desk.routes import admin, author, feed, reviewer, status

__all__ = ["admin", "author", "feed", "reviewer", "status"]
