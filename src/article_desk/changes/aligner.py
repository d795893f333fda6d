"""LCS-based alignment of two token sequences into change spans.

The table is dense ``(n + 1) x (m + 1)``, so time and memory are O(n * m)
in the token counts. That is fine for article-length text; very large
documents would need a linear-space variant.
"""

from __future__ import annotations

from article_desk.changes.tokenizer import tokenize
from article_desk.models.change import ChangeKind, ChangeSpan, Decision


def _lcs_table(original: list[str], proposed: list[str]) -> list[list[int]]:
    n, m = len(original), len(proposed)
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        for j in range(1, m + 1):
            if original[i - 1] == proposed[j - 1]:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
    return table


def align(original: list[str], proposed: list[str]) -> list[tuple[ChangeKind, str]]:
    """Return per-token operations, in document order, turning original into proposed.

    On a tie between dropping an original token and taking a proposed one,
    the backtrack drops the original token first. Operations are collected
    from the end of the text, so after reversal the addition lands ahead of
    the removal at the same position.
    """
    table = _lcs_table(original, proposed)
    ops: list[tuple[ChangeKind, str]] = []
    i, j = len(original), len(proposed)

    while i > 0 and j > 0:
        if original[i - 1] == proposed[j - 1]:
            ops.append((ChangeKind.SAME, original[i - 1]))
            i -= 1
            j -= 1
        elif table[i - 1][j] >= table[i][j - 1]:
            ops.append((ChangeKind.REMOVED, original[i - 1]))
            i -= 1
        else:
            ops.append((ChangeKind.ADDED, proposed[j - 1]))
            j -= 1
    while i > 0:
        ops.append((ChangeKind.REMOVED, original[i - 1]))
        i -= 1
    while j > 0:
        ops.append((ChangeKind.ADDED, proposed[j - 1]))
        j -= 1

    ops.reverse()
    return ops


def _group(ops: list[tuple[ChangeKind, str]]) -> list[tuple[ChangeKind, str]]:
    grouped: list[tuple[ChangeKind, str]] = []
    for kind, text in ops:
        if grouped and grouped[-1][0] == kind:
            grouped[-1] = (kind, grouped[-1][1] + text)
        else:
            grouped.append((kind, text))
    return grouped


def build_changes(original_text: str, proposed_text: str) -> list[ChangeSpan]:
    """Diff two texts into numbered spans with their initial decisions.

    ``same`` spans start approved and stay that way; ``added`` and
    ``removed`` spans start pending.
    """
    ops = align(tokenize(original_text), tokenize(proposed_text))
    spans: list[ChangeSpan] = []
    for kind, text in _group(ops):
        if not text:
            continue
        spans.append(
            ChangeSpan(
                id=len(spans) + 1,
                kind=kind,
                text=text,
                decision=Decision.APPROVED if kind == ChangeKind.SAME else Decision.PENDING,
            )
        )
    return spans
