"""Count letter frequencies across texts using a pool of worker threads."""

from __future__ import annotations

from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence


def _count_letters(text: str) -> Counter[str]:
    return Counter(c.lower() if c.isascii() else c for c in text if c.isalpha())


def frequency(texts: Sequence[str], worker_count: int) -> dict[str, int]:
    """Letter counts over all texts; ASCII letters are folded to lower case."""
    if worker_count < 1:
        raise ValueError("worker_count must be at least 1")
    size = max(len(texts) // worker_count, 1)
    chunks = ["".join(texts[start : start + size]) for start in range(0, len(texts), size)]
    total: Counter[str] = Counter()
    with ThreadPoolExecutor(max_workers=worker_count) as pool:
        for counts in pool.map(_count_letters, chunks):
            total.update(counts)
    return dict(total)