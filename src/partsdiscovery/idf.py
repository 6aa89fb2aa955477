"""
Inverse document frequency across a corpus of catalogs.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, Mapping, Sequence

import numpy as np

from .errors import EmptyCorpusError

logger = logging.getLogger(__name__)


def calculate_document_frequencies(
    catalog_word_counts: Sequence[Mapping[str, int]],
) -> Dict[str, int]:
    """Number of catalogs each word appears in, counting a catalog once per word."""
    doc_freq: Counter[str] = Counter()
    for word_counts in catalog_word_counts:
        doc_freq.update(word_counts.keys())
    return dict(doc_freq)


def calculate_idf_scores(
    catalog_word_counts: Sequence[Mapping[str, int]],
) -> Dict[str, float]:
    """
    Calculate the IDF score of every word in a set of catalogs.

    idf = log10(N / df), where N is the number of catalogs and df the number
    of catalogs whose counts contain the word. A word found in every catalog
    scores 0.

    Args:
        catalog_word_counts: One word -> count mapping per catalog.

    Returns:
        Mapping of every word in the corpus to its IDF score.

    Raises:
        EmptyCorpusError: If no catalogs are given.
    """
    n_catalogs = len(catalog_word_counts)
    if n_catalogs == 0:
        raise EmptyCorpusError("cannot compute IDF scores for an empty corpus")

    doc_freq = calculate_document_frequencies(catalog_word_counts)
    if not doc_freq:
        return {}

    words = list(doc_freq.keys())
    df = np.array([doc_freq[w] for w in words], dtype=np.float64)
    idf = np.log10(n_catalogs / df)

    logger.debug("Computed IDF for %d words over %d catalogs", len(words), n_catalogs)
    return {word: float(score) for word, score in zip(words, idf)}
