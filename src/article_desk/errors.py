"""Typed workflow errors raised by services and rendered by the app."""

from __future__ import annotations


class WorkflowError(Exception):
    """Base class for rejected workflow operations.

    A rejected operation never leaves a partial update behind: the article
    record and the change ledger are exactly as they were before the call.
    """

    code = "workflow_error"
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, object]:
        return {"error": self.code, "detail": self.message}


class Forbidden(WorkflowError):
    """The actor does not own the article or lacks the required role."""

    code = "forbidden"
    status_code = 403


class NotFound(WorkflowError):
    """An article, change span, reviewer or ledger entry does not exist."""

    code = "not_found"
    status_code = 404


class InvalidState(WorkflowError):
    """The article's status or flags do not allow the transition."""

    code = "invalid_state"
    status_code = 409


class InvalidOperation(WorkflowError):
    """The action is structurally disallowed on otherwise valid data."""

    code = "invalid_operation"
    status_code = 400


class IncompleteDecision(InvalidState):
    """Reconstruction was attempted while some changes are still undecided."""

    code = "incomplete_decision"

    def __init__(self, pending_ids: list[int]) -> None:
        super().__init__(f"{len(pending_ids)} change(s) still pending a decision")
        self.pending_ids = pending_ids

    def to_dict(self) -> dict[str, object]:
        return {**super().to_dict(), "pending": self.pending_ids}
