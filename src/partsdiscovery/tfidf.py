"""
TF-IDF scoring for one catalog.
"""

from __future__ import annotations

from typing import Dict, Mapping

from .errors import MissingIdfScoreError


def get_tfidf_scores(
    word_counts: Mapping[str, int],
    idf_scores: Mapping[str, float],
) -> Dict[str, float]:
    """
    Weight each word count of a catalog by its IDF score.

    Raises:
        MissingIdfScoreError: If a word in ``word_counts`` has no IDF score.
    """
    scores: Dict[str, float] = {}
    for word, count in word_counts.items():
        if word not in idf_scores:
            raise MissingIdfScoreError(word)
        scores[word] = count * idf_scores[word]
    return scores
