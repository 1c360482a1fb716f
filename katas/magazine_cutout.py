"""Check whether a note can be cut out of a magazine's words."""

from __future__ import annotations

from collections import Counter
from typing import Iterable


def can_construct_note(magazine: Iterable[str], note: Iterable[str]) -> bool:
    """True when every word of the note, counted with repeats, is in the magazine."""
    return not Counter(note) - Counter(magazine)