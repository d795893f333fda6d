"""In-memory decision ledger: one change set per article under review."""

from __future__ import annotations

import logging

from article_desk.changes.aligner import build_changes
from article_desk.errors import InvalidOperation, NotFound
from article_desk.models.change import ChangeSet, Decision

logger = logging.getLogger(__name__)

_SETTABLE_DECISIONS = frozenset({Decision.APPROVED, Decision.REJECTED})


class ChangeLedger:
    """Holds the change set an admin is deciding on, keyed by article id.

    Entries are process-local and lost on restart. Because the diff is
    deterministic, a lost entry can be rebuilt from the article's stored
    ``previous_content``/``pending_content``, but its decisions reset to
    their defaults.
    """

    def __init__(self) -> None:
        self._entries: dict[str, ChangeSet] = {}

    def __contains__(self, article_id: str) -> bool:
        return article_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, article_id: str) -> ChangeSet | None:
        return self._entries.get(article_id)

    def compute_or_fetch(
        self, article_id: str, original_text: str, proposed_text: str
    ) -> tuple[ChangeSet, bool]:
        """Return the article's change set, computing it on first access.

        The second element is True when the spans were just computed. An
        existing entry is never recomputed, so decisions already made on it
        survive repeated fetches.
        """
        existing = self._entries.get(article_id)
        if existing is not None:
            return existing, False

        change_set = ChangeSet(
            article_id=article_id,
            original_text=original_text,
            proposed_text=proposed_text,
            spans=build_changes(original_text, proposed_text),
        )
        self._entries[article_id] = change_set
        logger.info(
            "Change set computed: article=%s spans=%d",
            article_id,
            len(change_set.spans),
        )
        return change_set, True

    def set_decision(self, article_id: str, span_id: int, decision: Decision) -> ChangeSet:
        """Record an approve/reject decision on one span, in place."""
        if decision not in _SETTABLE_DECISIONS:
            raise InvalidOperation(f"Decision must be approved or rejected, got {decision!r}")

        change_set = self._entries.get(article_id)
        if change_set is None:
            raise NotFound(f"No changes loaded for article {article_id}; load changes first")

        span = next((s for s in change_set.spans if s.id == span_id), None)
        if span is None:
            raise NotFound(f"Change {span_id} not found for article {article_id}")
        if not span.is_decidable:
            raise InvalidOperation("Cannot change the decision of an unchanged span")

        span.decision = decision
        return change_set

    def clear(self, article_id: str) -> None:
        if self._entries.pop(article_id, None) is not None:
            logger.debug("Change set cleared: article=%s", article_id)
