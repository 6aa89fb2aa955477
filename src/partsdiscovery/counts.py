"""
Word counting helpers for a single catalog.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, MutableMapping, Optional


def calculate_word_counts(words: Iterable[str]) -> Dict[str, int]:
    """Count how often each word appears in a tokenized catalog."""
    return dict(Counter(words))


def remove_word(word: str, word_counts: MutableMapping[str, int]) -> None:
    """Remove ``word`` from ``word_counts`` in place. Missing words are ignored."""
    word_counts.pop(word, None)


def get_most_frequent_word(word_counts: Optional[Dict[str, int]]) -> Optional[str]:
    """
    Find the word with the highest count.

    Args:
        word_counts: Word -> count mapping for one catalog, or None.

    Returns:
        The most frequent word, or None when there are no counts. When several
        words share the highest count the alphabetically first one is returned.
    """
    if not word_counts:
        return None

    max_count = max(word_counts.values())
    return min(word for word, count in word_counts.items() if count == max_count)
