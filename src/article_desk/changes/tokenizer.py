"""Whitespace-preserving word tokenizer."""

from __future__ import annotations

import re

_WHITESPACE_RUN = re.compile(r"(\s+)")


def tokenize(text: str) -> list[str]:
    """Split text into alternating word and whitespace runs.

    Whitespace is kept as its own token so that ``"".join(tokenize(text))``
    reproduces ``text`` byte for byte.
    """
    return [token for token in _WHITESPACE_RUN.split(text) if token]
