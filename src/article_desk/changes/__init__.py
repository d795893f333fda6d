"""Word-level change tracking: tokenize, align, decide, reconstruct."""

from article_desk.changes.aligner import align, build_changes
from article_desk.changes.ledger import ChangeLedger
from article_desk.changes.reconstruct import pending_spans, reconstruct
from article_desk.changes.tokenizer import tokenize

__all__ = [
    "ChangeLedger",
    "align",
    "build_changes",
    "pending_spans",
    "reconstruct",
    "tokenize",
]
