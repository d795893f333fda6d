"""Fold per-change decisions back into final article text."""

from __future__ import annotations

from article_desk.errors import IncompleteDecision
from article_desk.models.change import ChangeKind, ChangeSpan, Decision


def pending_spans(spans: list[ChangeSpan]) -> list[ChangeSpan]:
    """Return the decidable spans that are still undecided."""
    return [s for s in spans if s.is_decidable and s.decision == Decision.PENDING]


def reconstruct(spans: list[ChangeSpan]) -> str:
    """Assemble the final text from a fully decided span list.

    An approved addition is kept. A removal is kept only when it was
    rejected, since rejecting a removal means the original text stays.
    """
    pending = pending_spans(spans)
    if pending:
        raise IncompleteDecision([s.id for s in pending])

    parts: list[str] = []
    for span in spans:
        if span.kind == ChangeKind.SAME:
            parts.append(span.text)
        elif span.kind == ChangeKind.ADDED and span.decision == Decision.APPROVED:
            parts.append(span.text)
        elif span.kind == ChangeKind.REMOVED and span.decision == Decision.REJECTED:
            parts.append(span.text)
    return "".join(parts)
