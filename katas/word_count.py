"""Count word occurrences in a phrase."""

from __future__ import annotations

import re
from collections import Counter

_DELIMITERS = re.compile(r"[ ,\n]")
_EDGE_PUNCTUATION = re.compile(r"^[\W_]+|[\W_]+$")


def word_count(words: str) -> dict[str, int]:
    """Lower-cased words, split on spaces, commas and newlines, trimmed of punctuation."""
    pieces = (_EDGE_PUNCTUATION.sub("", piece) for piece in _DELIMITERS.split(words.lower()))
    return dict(Counter(piece for piece in pieces if piece))