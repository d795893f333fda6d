"""Change span models produced by the diff engine."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class ChangeKind(StrEnum):
    SAME = "same"
    ADDED = "added"
    REMOVED = "removed"


class Decision(StrEnum):
    APPROVED = "approved"
    REJECTED = "rejected"
    PENDING = "pending"


class ChangeSpan(BaseModel):
    """A maximal run of tokens sharing one diff classification.

    Ids are 1-based and only stable within a single diff computation.
    """

    id: int
    kind: ChangeKind
    text: str
    decision: Decision

    @property
    def is_decidable(self) -> bool:
        return self.kind != ChangeKind.SAME


class ChangeSet(BaseModel):
    """The spans computed for one article, with the texts they were built from."""

    article_id: str
    original_text: str
    proposed_text: str
    spans: list[ChangeSpan] = Field(default_factory=list)
