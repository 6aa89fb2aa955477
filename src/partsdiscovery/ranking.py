"""
Selection of the highest scored words of a catalog.
"""

from __future__ import annotations

from typing import List, Mapping

DEFAULT_TOP_K = 10


def get_best_scored_words(
    tfidf_scores: Mapping[str, float],
    k: int = DEFAULT_TOP_K,
) -> List[str]:
    """
    Return the ``k`` highest scored words, best first.

    Equal scores are ordered alphabetically. When fewer than ``k`` words are
    scored, all of them are returned.
    """
    if k < 0:
        raise ValueError("k must be non-negative")

    ranked = sorted(tfidf_scores.items(), key=lambda x: (-x[1], x[0]))
    return [word for word, _score in ranked[:k]]
